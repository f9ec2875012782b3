"""Pydantic models for update product request."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    CATEGORY_ID_MAX_LENGTH,
    CATEGORY_ID_PATTERN,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRODUCT_NAME_MAX_LENGTH,
)
from core.utils.validators import decode_image


class UpdateProductRequest(BaseModel):
    """Validation model for update product request.

    Name, price and category are always overwritten. The image is only
    replaced when ``image`` carries new bytes.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    product_id: str = Field(..., min_length=1, description="Product ID to update")
    name: str = Field(
        ..., min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH, description="Product name"
    )
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Unit price",
    )
    category_id: str = Field(
        ...,
        min_length=1,
        max_length=CATEGORY_ID_MAX_LENGTH,
        pattern=CATEGORY_ID_PATTERN,
        description="Category identifier",
    )
    image: bytes | None = Field(None, description="Base64 encoded replacement image")

    @field_validator("image", mode="before")
    @classmethod
    def decode_base64_image(cls, value: Any) -> Any:
        if isinstance(value, str):
            return decode_image(value) if value.strip() else None
        return value
