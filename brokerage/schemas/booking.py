"""Booking schemas - reservations, inspections and consultations."""

from brokerage.db.enums import BookingStatus
from brokerage.schemas.common import CamelModel, Loose, RequiredStr


class ReservationCreate(CamelModel):
    """
    Reservation intent for an Airbnb stay or a lease.

    Dates are accepted as given; check-in after check-out is not rejected.
    """
    property_id: RequiredStr
    property_title: str | None = None
    property_type: str | None = None
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    check_in: str = ""
    check_out: str = ""
    move_in: str = ""
    guests: Loose = 1
    lease_term: str = ""
    notes: str = ""
    payment_method: str = ""


class InspectionCreate(CamelModel):
    property_id: RequiredStr
    property_title: str | None = None
    property_type: str | None = None
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    preferred_date: RequiredStr
    preferred_time: str = ""
    notes: str = ""


class ConsultationCreate(CamelModel):
    property_id: str | None = None
    property_title: str | None = None
    property_type: str | None = None
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    date: RequiredStr
    time: str = ""
    topic: str = ""
    notes: str = ""


class BookingStatusUpdate(CamelModel):
    """Admin transition; omitted (or null) fields keep their stored value."""
    status: BookingStatus | None = None
    confirmed_date: str | None = None
    confirmed_time: str | None = None

    def changes(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
