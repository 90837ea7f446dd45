"""SQLAlchemy ORM models."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from brokerage.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KVEntry(Base):
    """
    One document in the flat key-value namespace.

    Every record type lives here; the key prefix identifies the type
    (see RecordPrefix) and makes prefix scans act as table scans.
    """

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        default=_utcnow, onupdate=_utcnow, nullable=False
    )
