"""Service Request Service - authenticated service/purchase requests."""

import logging

from sqlalchemy.orm import Session

from brokerage.db.enums import InquiryStatus, RecordPrefix, user_request_prefix
from brokerage.schemas.account import ServiceRequestCreate
from brokerage.schemas.auth import Identity
from brokerage.services import kv_store, notification_service
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, utc_now_iso

logger = logging.getLogger(__name__)


def create_request(db: Session, identity: Identity, data: ServiceRequestCreate) -> Record:
    request_id = new_record_id(user_request_prefix(identity.id))
    request = data.to_record(
        id=request_id,
        userId=identity.id,
        email=identity.email,
        propertyId=data.property_id or "",
        budget="" if data.budget is None else data.budget,
        createdAt=utc_now_iso(),
        status=InquiryStatus.NEW.value,
    )
    kv_store.set(db, request_id, request)
    logger.info("Service request created: %s", request_id)

    notification_service.notify_admins(
        db,
        title=f"New {request['requestType']} request",
        body=f"{identity.email} requested {request['serviceType']} ({request['propertyType']}).",
    )
    notification_service.notify_user(
        db,
        identity.id,
        title="Request received",
        body=f"We received your {request['serviceType']} request and will be in touch shortly.",
    )
    return request


def list_user_requests(db: Session, user_id: str) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, user_request_prefix(user_id)))


def list_all_requests(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.SERVICE_REQUEST.value))
