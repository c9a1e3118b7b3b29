"""
Data models for the catalog import pipeline.

Raw records are validated once at the fetch boundary; everything
downstream works with these typed shapes instead of loose dicts.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator

PUBLISHED = "published"


# Source side

class Dimensions(BaseModel):
    """Physical dimensions as reported by the catalog source."""
    width: Optional[float] = None
    height: Optional[float] = None
    depth: Optional[float] = None


class RawCatalogItem(BaseModel):
    """One record from the remote catalog source."""
    id: Union[int, str]
    title: str
    price: float = Field(..., ge=0)
    brand: Optional[str] = None
    description: Optional[str] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    sku: Optional[str] = None
    thumbnail: Optional[str] = None
    images: Optional[list[str]] = None
    weight: Optional[float] = None
    dimensions: Optional[Dimensions] = None


# Backend input side

class CategoryInput(BaseModel):
    name: str
    handle: str
    is_active: bool = True


class IdReference(BaseModel):
    id: str


class ImageInput(BaseModel):
    url: str


class ProductOptionInput(BaseModel):
    title: str
    values: list[str]


class PriceInput(BaseModel):
    """Price in minor units (cents) for a single currency."""
    currency_code: str
    amount: int


class VariantInput(BaseModel):
    title: str = "Default Variant"
    sku: str
    prices: list[PriceInput]
    options: dict[str, str] = Field(default_factory=lambda: {"Default": "Default"})
    manage_inventory: bool = True


class NormalizedProduct(BaseModel):
    """
    Product shaped for the commerce backend.

    Always carries a single option group, exactly one variant and exactly
    one sales channel reference. The category list holds zero or one entry.
    """
    title: str
    subtitle: str = ""
    description: Optional[str] = None
    handle: str
    status: str = PUBLISHED
    thumbnail: Optional[str] = None
    images: list[ImageInput] = Field(default_factory=list)
    options: list[ProductOptionInput]
    variants: list[VariantInput]
    sales_channels: list[IdReference]
    categories: list[IdReference] = Field(default_factory=list)
    weight: float = 0
    length: float = 0
    width: float = 0
    height: float = 0

    def to_payload(self) -> dict:
        """Convert to the request body shape expected by the backend."""
        return self.model_dump(mode="json")


class InventoryLevelInput(BaseModel):
    inventory_item_id: str
    location_id: str
    stocked_quantity: int

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")


# Backend result side

class SalesChannel(BaseModel):
    id: str
    name: Optional[str] = None


class StockLocation(BaseModel):
    id: str
    name: Optional[str] = None


class CreatedCategory(BaseModel):
    id: str
    name: str
    handle: Optional[str] = None


class InventoryItemLink(BaseModel):
    inventory_item_id: str


class CreatedVariant(BaseModel):
    id: str
    sku: Optional[str] = None
    inventory_items: list[InventoryItemLink] = Field(default_factory=list)

    @field_validator("inventory_items", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []


class CreatedProduct(BaseModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    variants: list[CreatedVariant] = Field(default_factory=list)

    @field_validator("variants", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []
