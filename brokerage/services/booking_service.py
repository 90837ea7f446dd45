"""
Booking Service - reservations, inspections and consultations.

Bookings copy the property's title and type at creation time. The copy is a
historical snapshot and is never refreshed when the listing changes.

Inspection and consultation share one lifecycle:

    pending -> approved | confirmed | declined

driven by a single admin update that merges status/confirmedDate/confirmedTime.
"""

import logging
from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.core.exceptions import NotFoundError
from brokerage.db.enums import BookingStatus, RecordPrefix, ReservationStatus
from brokerage.schemas.booking import (
    BookingStatusUpdate,
    ConsultationCreate,
    InspectionCreate,
    ReservationCreate,
)
from brokerage.services import kv_store, notification_service, property_service
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, utc_now_iso

logger = logging.getLogger(__name__)


class BookingKind(str, Enum):
    INSPECTION = "inspection"
    CONSULTATION = "consultation"

    @property
    def prefix(self) -> str:
        if self is BookingKind.INSPECTION:
            return RecordPrefix.INSPECTION.value
        return RecordPrefix.CONSULTATION.value


def _property_snapshot(
    db: Session,
    property_id: Optional[str],
    title: Optional[str],
    property_type: Optional[str],
) -> dict:
    """Title/type as of now: the stored listing wins over client-sent values."""
    listing = property_service.get_property(db, property_id) if property_id else None
    if listing:
        return {"propertyTitle": listing.get("title", ""), "propertyType": listing.get("type", "")}
    return {"propertyTitle": title or "", "propertyType": property_type or ""}


# =============================================================================
# Reservations
# =============================================================================


def create_reservation(db: Session, data: ReservationCreate) -> Record:
    """Record reservation intent. No payment, no date-order validation."""
    reservation_id = new_record_id(RecordPrefix.RESERVATION.value)
    reservation = data.to_record(
        id=reservation_id,
        status=ReservationStatus.PENDING.value,
        createdAt=utc_now_iso(),
        **_property_snapshot(db, data.property_id, data.property_title, data.property_type),
    )
    kv_store.set(db, reservation_id, reservation)
    logger.info("Reservation created: %s for property: %s", reservation_id, data.property_id)

    notification_service.notify_admins(
        db,
        title="New reservation request",
        body=f"{reservation['name']} requested {reservation['propertyTitle'] or reservation['propertyId']}.",
    )
    return reservation


def list_reservations(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.RESERVATION.value))


# =============================================================================
# Inspections & Consultations
# =============================================================================


def _create_booking(db: Session, kind: BookingKind, fields: Record, summary: str) -> Record:
    now = utc_now_iso()
    booking_id = new_record_id(kind.prefix)
    booking = {
        **fields,
        "id": booking_id,
        "status": BookingStatus.PENDING.value,
        "confirmedDate": "",
        "confirmedTime": "",
        "createdAt": now,
        "updatedAt": now,
    }
    kv_store.set(db, booking_id, booking)
    logger.info("%s created: %s", kind.value.capitalize(), booking_id)

    notification_service.notify_admins(
        db,
        title=f"New {kind.value} request",
        body=f"{booking['name']} requested {summary}.",
    )
    return booking


def create_inspection(db: Session, data: InspectionCreate) -> Record:
    snapshot = _property_snapshot(db, data.property_id, data.property_title, data.property_type)
    fields = data.to_record(**snapshot)
    summary = f"an inspection of {snapshot['propertyTitle'] or data.property_id} on {data.preferred_date}"
    return _create_booking(db, BookingKind.INSPECTION, fields, summary)


def create_consultation(db: Session, data: ConsultationCreate) -> Record:
    snapshot = _property_snapshot(db, data.property_id, data.property_title, data.property_type)
    fields = data.to_record(propertyId=data.property_id or "", **snapshot)
    summary = f"a consultation on {data.date}"
    return _create_booking(db, BookingKind.CONSULTATION, fields, summary)


def list_bookings(db: Session, kind: BookingKind) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, kind.prefix))


def update_booking_status(
    db: Session,
    kind: BookingKind,
    booking_id: str,
    data: BookingStatusUpdate,
) -> Record:
    """
    Merge an admin transition into the stored booking.

    Omitted fields keep their stored values. Re-applying an update to an
    already decided booking is allowed.
    """
    existing = kv_store.get(db, booking_id) if booking_id.startswith(kind.prefix) else None
    if existing is None:
        raise NotFoundError(f"{kind.value.capitalize()} not found")

    updated = {**existing, **data.changes(), "updatedAt": utc_now_iso()}
    kv_store.set(db, booking_id, updated)
    logger.info(
        "%s %s status %s -> %s",
        kind.value.capitalize(),
        booking_id,
        existing.get("status"),
        updated.get("status"),
    )
    return updated
