"""
Account Router - endpoints for the signed-in user.

Profiles, service requests, the user's message thread and in-app
notifications. Every route requires a valid bearer token.
"""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from brokerage.core.deps import get_current_identity, get_db, require_admin
from brokerage.core.exceptions import unexpected_failure
from brokerage.schemas.account import MessageCreate, ProfileSave, ServiceRequestCreate
from brokerage.schemas.auth import Identity
from brokerage.services import (
    email_service,
    email_templates,
    message_service,
    notification_service,
    profile_service,
    request_service,
)

router = APIRouter(tags=["account"])


# =============================================================================
# Profiles
# =============================================================================


@router.get("/profiles")
@router.get("/profiles/me")
def get_profile(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """The caller's profile, or null when none has been saved yet."""
    with unexpected_failure("Failed to fetch profile"):
        return {"profile": profile_service.get_profile(db, identity.id)}


@router.post("/profiles")
@router.post("/profiles/me")
def save_profile(
    data: ProfileSave,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to save profile"):
        return {"success": True, "profile": profile_service.save_profile(db, identity, data)}


# =============================================================================
# Service requests
# =============================================================================


@router.post("/requests")
def create_request(
    data: ServiceRequestCreate,
    background_tasks: BackgroundTasks,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to submit request"):
        request = request_service.create_request(db, identity, data)
        email_service.queue_staff_email(background_tasks, email_templates.service_request(request))
        return {"success": True, "requestId": request["id"]}


@router.get("/requests/me")
def list_my_requests(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to fetch requests"):
        return {"requests": request_service.list_user_requests(db, identity.id)}


@router.get("/requests/all", dependencies=[Depends(require_admin)])
def list_all_requests(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch requests"):
        return {"requests": request_service.list_all_requests(db)}


# =============================================================================
# Messages & notifications
# =============================================================================


@router.post("/messages")
def send_message(
    data: MessageCreate,
    background_tasks: BackgroundTasks,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to send message"):
        message = message_service.send_user_message(db, identity, data.content)
        email_service.queue_staff_email(background_tasks, email_templates.user_message(message))
        return {"success": True, "messageId": message["id"]}


@router.get("/messages")
def list_my_messages(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to fetch messages"):
        return {"messages": message_service.list_thread(db, identity.id)}


@router.get("/notifications")
def list_my_notifications(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to fetch notifications"):
        return {"notifications": notification_service.list_user_notifications(db, identity.id)}
