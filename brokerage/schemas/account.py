"""Account schemas - profiles, service requests and messages."""

from pydantic import Field

from brokerage.db.enums import RequestType
from brokerage.schemas.common import CamelModel, Loose, RequiredStr

MINIMUM_AGE = 18


class ProfileInterests(CamelModel):
    property_types: list[str] = Field(default_factory=list)
    service_types: list[str] = Field(default_factory=list)


class ProfileSave(CamelModel):
    """Self-declared profile. The age gate is enforced by profile_service."""
    full_name: RequiredStr
    gender: str = ""
    age: int
    address: str = ""
    phone: str = ""
    location: str = ""
    interests: ProfileInterests = Field(default_factory=ProfileInterests)


class ServiceRequestCreate(CamelModel):
    request_type: RequestType
    service_type: RequiredStr
    property_type: RequiredStr
    property_id: str | None = None
    budget: Loose | None = None
    message: RequiredStr


class MessageCreate(CamelModel):
    content: RequiredStr


class AdminMessageCreate(CamelModel):
    user_id: RequiredStr
    email: str | None = None
    content: RequiredStr
