"""
Bookings Router - reservations, inspections and consultations.

Submissions are anonymous. Inspections and consultations share one admin
status route; every successful update emails the requester exactly once
and writes no in-app notification.
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from sqlalchemy.orm import Session

from brokerage.core.deps import get_db, require_admin
from brokerage.core.exceptions import unexpected_failure
from brokerage.core.rate_limit import FORM_LIMIT, limiter
from brokerage.schemas.booking import (
    BookingStatusUpdate,
    ConsultationCreate,
    InspectionCreate,
    ReservationCreate,
)
from brokerage.services import booking_service, email_service, email_templates
from brokerage.services.booking_service import BookingKind
from brokerage.types import Record

router = APIRouter(tags=["bookings"])


def _queue_creation_emails(background_tasks: BackgroundTasks, kind: BookingKind, booking: Record) -> None:
    email_service.queue_staff_email(background_tasks, email_templates.booking_staff(kind.value, booking))
    email_service.queue_email(background_tasks, booking["email"], email_templates.booking_ack(kind.value, booking))


def _apply_status_update(
    db: Session,
    background_tasks: BackgroundTasks,
    kind: BookingKind,
    booking_id: str,
    data: BookingStatusUpdate,
) -> Record:
    booking = booking_service.update_booking_status(db, kind, booking_id, data)
    if booking.get("email"):
        email_service.queue_email(
            background_tasks, booking["email"], email_templates.booking_status(kind.value, booking)
        )
    return booking


# =============================================================================
# Reservations
# =============================================================================


@router.post("/reservations")
@limiter.limit(FORM_LIMIT)
async def create_reservation(
    request: Request,
    data: ReservationCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to submit reservation"):
        reservation = booking_service.create_reservation(db, data)
        email_service.queue_staff_email(background_tasks, email_templates.reservation_staff(reservation))
        email_service.queue_email(background_tasks, reservation["email"], email_templates.reservation_ack(reservation))
        return {"success": True, "reservationId": reservation["id"]}


@router.get("/reservations/all", dependencies=[Depends(require_admin)])
def list_reservations(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch reservations"):
        return {"reservations": booking_service.list_reservations(db)}


# =============================================================================
# Inspections
# =============================================================================


@router.post("/inspections")
@limiter.limit(FORM_LIMIT)
async def create_inspection(
    request: Request,
    data: InspectionCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to book inspection"):
        inspection = booking_service.create_inspection(db, data)
        _queue_creation_emails(background_tasks, BookingKind.INSPECTION, inspection)
        return {"success": True, "inspectionId": inspection["id"]}


@router.get("/inspections/all", dependencies=[Depends(require_admin)])
def list_inspections(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch inspections"):
        return {"inspections": booking_service.list_bookings(db, BookingKind.INSPECTION)}


@router.put("/inspections/{inspection_id}", dependencies=[Depends(require_admin)])
def update_inspection(
    inspection_id: str,
    data: BookingStatusUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to update inspection"):
        inspection = _apply_status_update(db, background_tasks, BookingKind.INSPECTION, inspection_id, data)
        return {"success": True, "inspection": inspection}


# =============================================================================
# Consultations
# =============================================================================


@router.post("/consultations")
@limiter.limit(FORM_LIMIT)
async def create_consultation(
    request: Request,
    data: ConsultationCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to book consultation"):
        consultation = booking_service.create_consultation(db, data)
        _queue_creation_emails(background_tasks, BookingKind.CONSULTATION, consultation)
        return {"success": True, "consultationId": consultation["id"]}


@router.get("/consultations/all", dependencies=[Depends(require_admin)])
def list_consultations(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch consultations"):
        return {"consultations": booking_service.list_bookings(db, BookingKind.CONSULTATION)}


@router.put("/consultations/{consultation_id}", dependencies=[Depends(require_admin)])
def update_consultation(
    consultation_id: str,
    data: BookingStatusUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to update consultation"):
        consultation = _apply_status_update(
            db, background_tasks, BookingKind.CONSULTATION, consultation_id, data
        )
        return {"success": True, "consultation": consultation}
