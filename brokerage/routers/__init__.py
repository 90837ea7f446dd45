"""API routers."""

from brokerage.routers.account import router as account_router
from brokerage.routers.admin import router as admin_router
from brokerage.routers.bookings import router as bookings_router
from brokerage.routers.contact import router as contact_router
from brokerage.routers.properties import router as properties_router
from brokerage.routers.property_inquiries import router as property_inquiries_router

__all__ = [
    "account_router",
    "admin_router",
    "bookings_router",
    "contact_router",
    "properties_router",
    "property_inquiries_router",
]
