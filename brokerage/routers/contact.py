"""Contact router - public contact form and the admin inquiry list."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from sqlalchemy.orm import Session

from brokerage.core.deps import get_db, require_admin
from brokerage.core.exceptions import unexpected_failure
from brokerage.core.rate_limit import FORM_LIMIT, limiter
from brokerage.schemas.inquiry import ContactInquiryCreate
from brokerage.services import email_service, email_templates, inquiry_service

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("")
@limiter.limit(FORM_LIMIT)
async def create_contact_inquiry(
    request: Request,
    data: ContactInquiryCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """Store a contact form submission and alert the office."""
    with unexpected_failure("Failed to submit inquiry"):
        inquiry = inquiry_service.create_contact_inquiry(db, data)
        email_service.queue_staff_email(background_tasks, email_templates.contact_inquiry(inquiry))
        return {"success": True, "inquiryId": inquiry["id"]}


@router.get("/all", dependencies=[Depends(require_admin)])
def list_contact_inquiries(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch inquiries"):
        return {"inquiries": inquiry_service.list_contact_inquiries(db)}
