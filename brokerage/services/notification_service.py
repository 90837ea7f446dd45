"""
Notification Service - in-app notification records.

Admin notifications share one global feed; user notifications are scoped by
user id in the key. Records are append-only.
"""

from sqlalchemy.orm import Session

from brokerage.db.enums import RecordPrefix, user_notification_prefix
from brokerage.services import kv_store
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, parse_iso, utc_now_iso


def notify_admins(db: Session, title: str, body: str) -> Record:
    """Write one admin-facing notification."""
    notification = {
        "id": new_record_id(RecordPrefix.ADMIN_NOTIFICATION.value),
        "title": title,
        "body": body,
        "createdAt": utc_now_iso(),
    }
    kv_store.set(db, notification["id"], notification)
    return notification


def notify_user(db: Session, user_id: str, title: str, body: str) -> Record:
    """Write one notification into a user's feed."""
    notification = {
        "id": new_record_id(user_notification_prefix(user_id)),
        "userId": user_id,
        "title": title,
        "body": body,
        "createdAt": utc_now_iso(),
    }
    kv_store.set(db, notification["id"], notification)
    return notification


def list_admin_notifications(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.ADMIN_NOTIFICATION.value))


def list_user_notifications(db: Session, user_id: str) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, user_notification_prefix(user_id)))


def purge_older_than(db: Session, cutoff_iso: str) -> int:
    """
    Delete admin and user notifications created before `cutoff_iso`.

    Operator tool only; nothing calls this automatically.
    """
    cutoff = parse_iso(cutoff_iso)
    if cutoff is None:
        raise ValueError(f"Invalid cutoff timestamp: {cutoff_iso}")

    stale: list[str] = []
    for prefix in (RecordPrefix.ADMIN_NOTIFICATION.value, RecordPrefix.USER_NOTIFICATION.value):
        for record in kv_store.get_by_prefix(db, prefix):
            created = parse_iso(record.get("createdAt"))
            if created is not None and created < cutoff:
                stale.append(record["id"])
    return kv_store.delete_many(db, stale)
