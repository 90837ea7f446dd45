"""Enums and key-prefix conventions for stored records."""

from enum import Enum


class RecordPrefix(str, Enum):
    """
    Key prefixes of the flat key-value namespace.

    A record keeps its prefix for its whole lifetime. Per-user prefixes are
    built with the helpers below so scans never miss on a typo.
    """

    CONTACT_INQUIRY = "inquiry_"
    PROPERTY = "property_"
    PROPERTY_INQUIRY = "prop_inquiry_"
    RESERVATION = "reservation_"
    INSPECTION = "inspection_"
    CONSULTATION = "consultation_"
    SERVICE_REQUEST = "request_"
    MESSAGE = "message_"
    ADMIN_NOTIFICATION = "admin_notification_"
    USER_NOTIFICATION = "notification_"
    MAILING_LIST = "mailing_list_"
    PROFILE = "profile_"


def user_request_prefix(user_id: str) -> str:
    return f"{RecordPrefix.SERVICE_REQUEST.value}{user_id}_"


def user_message_prefix(user_id: str) -> str:
    return f"{RecordPrefix.MESSAGE.value}{user_id}_"


def user_notification_prefix(user_id: str) -> str:
    return f"{RecordPrefix.USER_NOTIFICATION.value}{user_id}_"


def profile_key(user_id: str) -> str:
    return f"{RecordPrefix.PROFILE.value}{user_id}"


class PropertyType(str, Enum):
    SALE = "Sale"
    RENT = "Rent"
    AIRBNB = "Airbnb"
    COMMERCIAL = "Commercial"


class BookingStatus(str, Enum):
    """Inspection/consultation lifecycle. Only pending is non-terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


class InquiryStatus(str, Enum):
    NEW = "new"


class ReservationStatus(str, Enum):
    PENDING = "pending"


class RequestType(str, Enum):
    SERVICE = "service"
    PURCHASE = "purchase"


class MessageSender(str, Enum):
    USER = "user"
    ADMIN = "admin"


class MailingCategory(str, Enum):
    PROPERTY = "property"
    SERVICE = "service"

    @property
    def interest_field(self) -> str:
        """Profile interests key matched by lists of this category."""
        return "propertyTypes" if self is MailingCategory.PROPERTY else "serviceTypes"
