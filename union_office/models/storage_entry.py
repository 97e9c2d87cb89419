"""Key/value row backing the collection storage."""

from typing import Any

from sqlalchemy import String, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from union_office.models.base import Base, TimestampMixin


class StorageEntry(Base, TimestampMixin):
    """
    One named collection stored as a JSON document.

    Every collection (users, members, cases, ...) lives in a single row
    keyed by a stable string such as "gs_members". The value is the whole
    collection; writes always replace it entirely.

    The revision counter is bumped on each write and lets a writer detect
    that another request replaced the collection since it was read.
    """

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    revision: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<StorageEntry(key='{self.key}', revision={self.revision})>"
