"""Product domain models."""

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer

from core.utils.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS


class ImageSource(str, Enum):
    """Where a product image came from.

    Only ``MEDIA_STORE`` images are owned (and therefore deleted) by the
    catalog; ``EXTERNAL`` URLs are referenced but never touched.
    """

    MEDIA_STORE = "media_store"
    EXTERNAL = "external"


class ProductImage(BaseModel):
    """Image reference stored on a product, tagged with its provenance."""

    model_config = ConfigDict(use_enum_values=True)

    url: StrictStr = Field(..., min_length=1, description="Fully-qualified image URL")
    source: ImageSource = Field(..., description="Provenance computed at write time")

    @property
    def is_store_owned(self) -> bool:
        return self.source == ImageSource.MEDIA_STORE


class Product(BaseModel):
    """Catalog product as persisted in the product table."""

    model_config = ConfigDict(validate_assignment=True)

    product_id: StrictStr | None = Field(
        None, description="Opaque identifier assigned by persistence"
    )
    name: StrictStr = Field(..., min_length=1, description="Product display name")
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Unit price",
    )
    category_id: StrictStr = Field(..., min_length=1, description="Owning category")
    image: ProductImage | None = Field(None, description="Optional product image")

    created_at: StrictStr | None = Field(None, description="ISO-8601 creation timestamp (UTC)")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last update timestamp (UTC)")

    @field_serializer("price", when_used="json")
    def _serialize_price(self, price: Decimal) -> float:
        return float(price)

    def to_item(self) -> dict[str, Any]:
        """Return the DynamoDB representation (absent fields are omitted)."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Product":
        return cls.model_validate(item)
