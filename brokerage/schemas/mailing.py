"""Mailing list schemas - admin-defined interest segments."""

from pydantic import Field

from brokerage.db.enums import MailingCategory
from brokerage.schemas.common import CamelModel, RequiredStr


class MailingListCreate(CamelModel):
    name: RequiredStr
    category: MailingCategory
    interests: list[str] = Field(..., min_length=1)


class MailingSend(CamelModel):
    subject: RequiredStr
    body: RequiredStr
