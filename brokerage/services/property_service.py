"""
Property Service - listing CRUD and in-memory filtering.

Listings are scanned in full and filtered in Python; there is no index.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.core.exceptions import NotFoundError
from brokerage.db.enums import RecordPrefix
from brokerage.schemas.property import PropertyCreate, PropertyUpdate
from brokerage.services import kv_store
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, normalize_search, price_to_number, utc_now_iso

logger = logging.getLogger(__name__)

# Fields a partial update may never overwrite
IMMUTABLE_FIELDS = ("id", "createdAt")


def create_property(db: Session, data: PropertyCreate) -> Record:
    now = utc_now_iso()
    property_id = new_record_id(RecordPrefix.PROPERTY.value)
    record = data.to_record(id=property_id, createdAt=now, updatedAt=now)
    kv_store.set(db, property_id, record)
    logger.info("Property created: %s", property_id)
    return record


def get_property(db: Session, property_id: str) -> Optional[Record]:
    """Best-effort lookup; None for unknown ids or keys of another type."""
    if not property_id.startswith(RecordPrefix.PROPERTY.value):
        return None
    return kv_store.get(db, property_id)


def require_property(db: Session, property_id: str) -> Record:
    record = get_property(db, property_id)
    if record is None:
        raise NotFoundError("Property not found")
    return record


def list_properties(
    db: Session,
    *,
    property_type: Optional[str] = None,
    search: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> list[Record]:
    """
    List listings with optional filters.

    - property_type: case-insensitive exact match; "all" disables the filter
    - search: case-insensitive substring of title or location
    - min_price/max_price: compared against the digits of the display price;
      listings whose price has no digits are excluded once a bound is given
    """
    properties = kv_store.get_by_prefix(db, RecordPrefix.PROPERTY.value)

    wanted_type = normalize_search(property_type)
    if wanted_type and wanted_type != "all":
        properties = [p for p in properties if normalize_search(p.get("type")) == wanted_type]

    term = normalize_search(search)
    if term:
        properties = [
            p for p in properties
            if term in normalize_search(p.get("title")) or term in normalize_search(p.get("location"))
        ]

    if min_price is not None or max_price is not None:
        properties = [p for p in properties if _price_in_range(p, min_price, max_price)]

    return newest_first(properties)


def _price_in_range(record: Record, min_price: Optional[float], max_price: Optional[float]) -> bool:
    amount = price_to_number(record.get("price"))
    if amount is None:
        return False
    if min_price is not None and amount < min_price:
        return False
    if max_price is not None and amount > max_price:
        return False
    return True


def update_property(db: Session, property_id: str, data: PropertyUpdate) -> Record:
    """Shallow-merge the provided fields; last writer wins."""
    existing = require_property(db, property_id)
    changes = {k: v for k, v in data.changes().items() if k not in IMMUTABLE_FIELDS}
    updated = {**existing, **changes, "updatedAt": utc_now_iso()}
    kv_store.set(db, property_id, updated)
    logger.info("Property updated: %s", property_id)
    return updated


def delete_property(db: Session, property_id: str) -> None:
    """Idempotent: deleting an unknown id succeeds."""
    if property_id.startswith(RecordPrefix.PROPERTY.value):
        kv_store.delete(db, property_id)
        logger.info("Property deleted: %s", property_id)
