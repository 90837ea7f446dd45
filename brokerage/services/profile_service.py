"""Profile Service - one self-declared profile per authenticated user."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.core.exceptions import ValidationError
from brokerage.db.enums import RecordPrefix, profile_key
from brokerage.schemas.account import MINIMUM_AGE, ProfileSave
from brokerage.schemas.auth import Identity
from brokerage.services import kv_store
from brokerage.types import Record
from brokerage.utils import utc_now_iso

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: str) -> Optional[Record]:
    return kv_store.get(db, profile_key(user_id))


def save_profile(db: Session, identity: Identity, data: ProfileSave) -> Record:
    """
    Create or replace the caller's profile.

    Raises:
        ValidationError: age below the minimum; the stored profile is untouched
    """
    if data.age < MINIMUM_AGE:
        raise ValidationError(f"You must be at least {MINIMUM_AGE} years old")

    profile = data.to_record(
        userId=identity.id,
        email=identity.email,
        updatedAt=utc_now_iso(),
    )
    kv_store.set(db, profile_key(identity.id), profile)
    logger.info("Profile saved for user %s", identity.id)
    return profile


def list_profiles(db: Session) -> list[Record]:
    return kv_store.get_by_prefix(db, RecordPrefix.PROFILE.value)
