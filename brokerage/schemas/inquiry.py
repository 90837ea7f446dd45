"""Inquiry schemas - public contact form and per-property inquiries."""

from brokerage.schemas.common import CamelModel, RequiredStr


class ContactInquiryCreate(CamelModel):
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    message: RequiredStr


class PropertyInquiryCreate(CamelModel):
    property_id: RequiredStr
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    message: str = ""
