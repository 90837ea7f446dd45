"""Property schemas - admin-managed listings."""

from pydantic import Field

from brokerage.db.enums import PropertyType
from brokerage.schemas.common import CamelModel, Loose, RequiredStr


class PropertyCreate(CamelModel):
    """Schema for creating a listing. Price and area are display strings."""
    title: RequiredStr
    location: RequiredStr
    price: RequiredStr
    type: PropertyType
    description: str = ""
    bedrooms: Loose = 0
    bathrooms: Loose = 0
    area: str = ""
    images: list[str] = Field(default_factory=list)
    videos: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)


class PropertyUpdate(CamelModel):
    """Partial update; only fields present in the body are merged."""
    title: str | None = Field(None, min_length=1)
    location: str | None = Field(None, min_length=1)
    price: str | None = Field(None, min_length=1)
    type: PropertyType | None = None
    description: str | None = None
    bedrooms: Loose | None = None
    bathrooms: Loose | None = None
    area: str | None = None
    images: list[str] | None = None
    videos: list[str] | None = None
    features: list[str] | None = None

    def changes(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)
