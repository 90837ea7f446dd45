"""
Key-value store over the kv_store table.

The whole domain persists through these four calls. Writes commit
immediately; there are no cross-key transactions.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from brokerage.db.models import KVEntry
from brokerage.types import Record


def get(db: Session, key: str) -> Record | None:
    entry = db.get(KVEntry, key)
    if entry is None:
        return None
    return entry.value


def set(db: Session, key: str, value: Record) -> None:
    """Insert or replace the document stored under `key`."""
    entry = db.get(KVEntry, key)
    if entry is None:
        db.add(KVEntry(key=key, value=value))
    else:
        entry.value = dict(value)
        # Callers may have mutated the loaded document in place
        flag_modified(entry, "value")
    db.commit()


def delete(db: Session, key: str) -> None:
    """Remove `key` if present. Deleting a missing key is a no-op."""
    entry = db.get(KVEntry, key)
    if entry is not None:
        db.delete(entry)
        db.commit()


def get_by_prefix(db: Session, prefix: str) -> list[Record]:
    """
    Return every document whose key starts with `prefix`, in key order.

    The prefix is matched literally (`_` is not a LIKE wildcard here).
    """
    stmt = (
        select(KVEntry.value)
        .where(KVEntry.key.startswith(prefix, autoescape=True))
        .order_by(KVEntry.key)
    )
    return list(db.scalars(stmt))


def delete_many(db: Session, keys: list[str]) -> int:
    """Remove several keys in one commit; returns how many existed."""
    removed = 0
    for key in keys:
        entry = db.get(KVEntry, key)
        if entry is not None:
            db.delete(entry)
            removed += 1
    if removed:
        db.commit()
    return removed
