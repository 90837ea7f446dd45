"""Inquiry Service - contact form and per-property inquiries."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.db.enums import InquiryStatus, RecordPrefix
from brokerage.schemas.inquiry import ContactInquiryCreate, PropertyInquiryCreate
from brokerage.services import kv_store, notification_service, property_service
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, utc_now_iso

logger = logging.getLogger(__name__)


def create_contact_inquiry(db: Session, data: ContactInquiryCreate) -> Record:
    inquiry_id = new_record_id(RecordPrefix.CONTACT_INQUIRY.value)
    inquiry = data.to_record(
        id=inquiry_id,
        createdAt=utc_now_iso(),
        status=InquiryStatus.NEW.value,
    )
    kv_store.set(db, inquiry_id, inquiry)
    logger.info("Contact inquiry created: %s", inquiry_id)

    notification_service.notify_admins(
        db,
        title="New contact inquiry",
        body=f"{inquiry['name']} sent a message through the contact form.",
    )
    return inquiry


def list_contact_inquiries(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.CONTACT_INQUIRY.value))


def create_property_inquiry(
    db: Session, data: PropertyInquiryCreate
) -> tuple[Record, Optional[Record]]:
    """
    Store an inquiry and return it with the referenced property, if any.

    The property id is not checked; it is resolved only to enrich the
    notification text.
    """
    property_record = property_service.get_property(db, data.property_id)

    inquiry_id = new_record_id(RecordPrefix.PROPERTY_INQUIRY.value)
    inquiry = data.to_record(
        id=inquiry_id,
        createdAt=utc_now_iso(),
        status=InquiryStatus.NEW.value,
    )
    kv_store.set(db, inquiry_id, inquiry)
    logger.info("Property inquiry created: %s for property: %s", inquiry_id, data.property_id)

    title = property_record["title"] if property_record else "Unknown Property"
    notification_service.notify_admins(
        db,
        title="New property inquiry",
        body=f"{inquiry['name']} asked about {title}.",
    )
    return inquiry, property_record


def list_property_inquiries(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.PROPERTY_INQUIRY.value))
