"""Base type for records stored in tenant-scoped collections."""

import secrets
import string

from pydantic import BaseModel, ConfigDict, Field

_ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9


def new_record_id() -> str:
    """Short random alphanumeric identifier (probabilistically unique)"""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


class TenantRecord(BaseModel):
    """
    A record owned by exactly one office.

    sede_id may be missing or forged on input; the store always overwrites
    it with the acting user's office before persisting.
    """

    id: str = Field(default_factory=new_record_id)
    sede_id: str | None = None

    model_config = ConfigDict(extra="ignore")
