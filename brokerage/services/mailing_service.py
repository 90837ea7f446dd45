"""
Mailing Service - interest segments and their one-to-many fan-out.

A send is not persisted: recipients are computed from profiles at send time,
and sending the same list twice emails everyone twice.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from brokerage.core.exceptions import NotFoundError, ValidationError
from brokerage.db.enums import MailingCategory, RecordPrefix
from brokerage.schemas.mailing import MailingListCreate
from brokerage.services import kv_store, notification_service, profile_service
from brokerage.types import Record
from brokerage.utils import new_record_id, newest_first, utc_now_iso

logger = logging.getLogger(__name__)


@dataclass
class MailingRecipients:
    """Matched profiles for one send."""
    user_ids: list[str] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.user_ids)


def create_list(db: Session, data: MailingListCreate) -> Record:
    list_id = new_record_id(RecordPrefix.MAILING_LIST.value)
    mailing_list = data.to_record(id=list_id, createdAt=utc_now_iso())
    kv_store.set(db, list_id, mailing_list)
    logger.info("Mailing list created: %s (%s)", list_id, mailing_list["category"])
    return mailing_list


def list_lists(db: Session) -> list[Record]:
    return newest_first(kv_store.get_by_prefix(db, RecordPrefix.MAILING_LIST.value))


def get_list(db: Session, list_id: str) -> Record:
    mailing_list = (
        kv_store.get(db, list_id) if list_id.startswith(RecordPrefix.MAILING_LIST.value) else None
    )
    if mailing_list is None:
        raise NotFoundError("Mailing list not found")
    return mailing_list


def profile_matches(profile: Record, mailing_list: Record) -> bool:
    """True when the profile shares at least one interest with the list."""
    category = MailingCategory(mailing_list["category"])
    interests = (profile.get("interests") or {}).get(category.interest_field) or []
    return bool(set(interests) & set(mailing_list.get("interests") or []))


def resolve_recipients(db: Session, mailing_list: Record) -> MailingRecipients:
    """
    Scan every profile and keep those whose interests intersect the list.
    """
    recipients = MailingRecipients()
    for profile in profile_service.list_profiles(db):
        if not profile_matches(profile, mailing_list):
            continue
        recipients.user_ids.append(profile["userId"])
        recipients.emails.append(profile.get("email") or "")
    return recipients


def record_send(db: Session, mailing_list: Record, subject: str) -> MailingRecipients:
    """
    Resolve recipients and write one in-app notification per match.

    Raises:
        ValidationError: no profile matches the list
    """
    recipients = resolve_recipients(db, mailing_list)
    if not recipients:
        raise ValidationError("No matching recipients found")

    for user_id in recipients.user_ids:
        notification_service.notify_user(
            db,
            user_id,
            title=subject,
            body=f"New update from {mailing_list['name']}. Check your email for details.",
        )
    logger.info("Mailing list %s sent to %d recipient(s)", mailing_list["id"], len(recipients))
    return recipients
