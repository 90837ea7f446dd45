"""Property inquiry router - questions about a specific listing."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from sqlalchemy.orm import Session

from brokerage.core.deps import get_db, require_admin
from brokerage.core.exceptions import unexpected_failure
from brokerage.core.rate_limit import FORM_LIMIT, limiter
from brokerage.schemas.inquiry import PropertyInquiryCreate
from brokerage.services import email_service, email_templates, inquiry_service

router = APIRouter(prefix="/property-inquiries", tags=["inquiries"])


@router.post("")
@limiter.limit(FORM_LIMIT)
async def create_property_inquiry(
    request: Request,
    data: PropertyInquiryCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to submit inquiry"):
        inquiry, property_record = inquiry_service.create_property_inquiry(db, data)
        email_service.queue_staff_email(
            background_tasks, email_templates.property_inquiry(inquiry, property_record)
        )
        return {"success": True, "inquiryId": inquiry["id"]}


@router.get("/all", dependencies=[Depends(require_admin)])
def list_property_inquiries(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch property inquiries"):
        return {"inquiries": inquiry_service.list_property_inquiries(db)}
