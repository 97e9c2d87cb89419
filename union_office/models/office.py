"""Office (sede) record: the tenant isolation boundary."""

import re
from datetime import datetime

from pydantic import BaseModel, Field

from union_office.models.record import new_record_id


def normalize_office_name(name: str) -> str:
    """Case-insensitive, whitespace-collapsed form used to match office names"""
    return re.sub(r"\s+", " ", name).strip().lower()


class Office(BaseModel):
    """
    Multi-tenant isolation boundary.

    An office is created once, when the first user registers under a name
    that matches no existing office. Its id is the sede_id carried by every
    user and every record of that office. Later registrations look the
    office up by normalized name only to decide whether to join it.
    """

    id: str = Field(default_factory=new_record_id)
    name: str
    normalized_name: str
    created_at: datetime = Field(default_factory=datetime.now)
