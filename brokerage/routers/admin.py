"""
Admin Router - /admin endpoints for the back office.

All routes require an allow-listed admin identity.
"""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from brokerage.core.deps import get_db, require_admin
from brokerage.core.exceptions import unexpected_failure
from brokerage.schemas.account import AdminMessageCreate
from brokerage.schemas.auth import UserListResponse
from brokerage.schemas.mailing import MailingListCreate, MailingSend
from brokerage.services import (
    email_service,
    email_templates,
    export_service,
    identity_service,
    mailing_service,
    message_service,
    notification_service,
)
from brokerage.utils import utc_now_iso

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# =============================================================================
# Messages & notifications
# =============================================================================


@router.get("/messages")
def list_messages(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch messages"):
        return {"messages": message_service.list_all_messages(db)}


@router.post("/messages")
def send_message(
    data: AdminMessageCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    with unexpected_failure("Failed to send message"):
        message = message_service.send_admin_message(db, data.user_id, data.email, data.content)
        if message["email"]:
            email_service.queue_email(background_tasks, message["email"], email_templates.admin_message(message))
        return {"success": True, "messageId": message["id"]}


@router.get("/notifications")
def list_notifications(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch notifications"):
        return {"notifications": notification_service.list_admin_notifications(db)}


# =============================================================================
# Mailing lists
# =============================================================================


@router.post("/mailing-lists")
def create_mailing_list(data: MailingListCreate, db: Session = Depends(get_db)):
    with unexpected_failure("Failed to create mailing list"):
        return {"success": True, "list": mailing_service.create_list(db, data)}


@router.get("/mailing-lists")
def list_mailing_lists(db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch mailing lists"):
        return {"lists": mailing_service.list_lists(db)}


@router.post("/mailing-lists/{list_id}/send")
def send_mailing_list(
    list_id: str,
    data: MailingSend,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """
    Fan out one message to every profile matching the list.

    Writes one in-app notification per match and queues a single email
    dispatch. Subscribers are blind-copied so they never see each other.
    """
    with unexpected_failure("Failed to send mailing list"):
        mailing_list = mailing_service.get_list(db, list_id)
        recipients = mailing_service.record_send(db, mailing_list, data.subject)
        if recipients.emails:
            email_service.queue_email(
                background_tasks,
                email_service.sender_address(),
                email_templates.mailing(data.subject, data.body),
                bcc=recipients.emails,
            )
        return {"success": True, "sent": len(recipients)}


# =============================================================================
# Users & exports
# =============================================================================


@router.get("/users", response_model=UserListResponse)
async def list_users():
    with unexpected_failure("Failed to fetch users"):
        return UserListResponse(users=await identity_service.list_users())


@router.get("/exports/clients")
def export_clients(db: Session = Depends(get_db)):
    """Download every lead as CSV."""
    with unexpected_failure("Failed to export clients"):
        rows = list(export_service.stream_clients_csv(db))
    filename = f"clients-{utc_now_iso()[:10]}.csv"
    return StreamingResponse(
        iter(rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
