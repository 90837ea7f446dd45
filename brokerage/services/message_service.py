"""
Message Service - one user <-> admin thread per user.

Thread messages are keyed under message_<userId>_ so a user's thread is a
single prefix scan.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.db.enums import MessageSender, RecordPrefix, user_message_prefix
from brokerage.schemas.auth import Identity
from brokerage.services import kv_store, notification_service, profile_service
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, utc_now_iso

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 120


def _preview(content: str) -> str:
    if len(content) <= PREVIEW_LENGTH:
        return content
    return content[: PREVIEW_LENGTH - 1].rstrip() + "…"


def _store_message(db: Session, user_id: str, email: str, sender: MessageSender, content: str) -> Record:
    message_id = new_record_id(user_message_prefix(user_id))
    message = {
        "id": message_id,
        "userId": user_id,
        "email": email,
        "from": sender.value,
        "content": content,
        "createdAt": utc_now_iso(),
    }
    kv_store.set(db, message_id, message)
    logger.info("Message %s stored (from %s)", message_id, sender.value)
    return message


def send_user_message(db: Session, identity: Identity, content: str) -> Record:
    message = _store_message(db, identity.id, identity.email, MessageSender.USER, content)
    notification_service.notify_admins(
        db,
        title="New client message",
        body=f"{identity.email}: {_preview(content)}",
    )
    return message


def send_admin_message(db: Session, user_id: str, email: Optional[str], content: str) -> Record:
    """
    Post an admin reply into a user's thread.

    When no email is given the user's profile email is used, if any.
    """
    if not email:
        profile = profile_service.get_profile(db, user_id)
        email = (profile or {}).get("email") or ""
    message = _store_message(db, user_id, email, MessageSender.ADMIN, content)
    notification_service.notify_user(
        db,
        user_id,
        title="New message from our team",
        body=_preview(content),
    )
    return message


def list_thread(db: Session, user_id: str) -> list[Record]:
    """A user's thread in conversation order (oldest first, i.e. key order)."""
    return kv_store.get_by_prefix(db, user_message_prefix(user_id))


def list_all_messages(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.MESSAGE.value))
