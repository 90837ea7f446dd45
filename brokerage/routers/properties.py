"""
Properties Router - public listing search and admin listing management.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from brokerage.core.deps import get_db, require_admin
from brokerage.core.exceptions import NotFoundError, unexpected_failure
from brokerage.schemas.property import PropertyCreate, PropertyUpdate
from brokerage.services import property_service
from brokerage.utils import parse_price_bound

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", dependencies=[Depends(require_admin)])
def create_property(data: PropertyCreate, db: Session = Depends(get_db)):
    with unexpected_failure("Failed to create property"):
        return {"success": True, "property": property_service.create_property(db, data)}


@router.get("")
def list_properties(
    property_type: Optional[str] = Query(None, alias="type"),
    search: Optional[str] = Query(None),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    db: Session = Depends(get_db),
):
    """
    Search listings.

    Bounds are plain numbers compared against the digits of each listing's
    display price. A bound that is not a number is ignored.
    """
    with unexpected_failure("Failed to fetch properties"):
        properties = property_service.list_properties(
            db,
            property_type=property_type,
            search=search,
            min_price=parse_price_bound(min_price),
            max_price=parse_price_bound(max_price),
        )
        return {"properties": properties}


@router.get("/{property_id}")
def get_property(property_id: str, db: Session = Depends(get_db)):
    with unexpected_failure("Failed to fetch property"):
        record = property_service.get_property(db, property_id)
        if record is None:
            raise NotFoundError("Property not found")
        return {"property": record}


@router.put("/{property_id}", dependencies=[Depends(require_admin)])
def update_property(property_id: str, data: PropertyUpdate, db: Session = Depends(get_db)):
    with unexpected_failure("Failed to update property"):
        return {"success": True, "property": property_service.update_property(db, property_id, data)}


@router.delete("/{property_id}", dependencies=[Depends(require_admin)])
def delete_property(property_id: str, db: Session = Depends(get_db)):
    with unexpected_failure("Failed to delete property"):
        property_service.delete_property(db, property_id)
        return {"success": True}
