"""Authentication-related Pydantic schemas."""

from pydantic import BaseModel


class Identity(BaseModel):
    """
    Caller identity resolved from a bearer token.

    Returned by the get_current_identity dependency.
    """
    id: str
    email: str


class UserSummary(BaseModel):
    """Entry of GET /admin/users."""
    id: str
    email: str


class UserListResponse(BaseModel):
    users: list[UserSummary]
