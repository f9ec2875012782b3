"""Pydantic models for create product request/response."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.models.product import Product
from core.utils.constants import (
    CATEGORY_ID_MAX_LENGTH,
    CATEGORY_ID_PATTERN,
    IMAGE_URL_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRODUCT_NAME_MAX_LENGTH,
)
from core.utils.validators import decode_image


class CreateProductRequest(BaseModel):
    """Validation model for create product request.

    ``image`` arrives base64 encoded and is held as the decoded bytes.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

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
    image: bytes | None = Field(None, description="Base64 encoded product image")
    image_url: str | None = Field(
        None, max_length=IMAGE_URL_MAX_LENGTH, description="Externally hosted image URL"
    )

    @field_validator("image", mode="before")
    @classmethod
    def decode_base64_image(cls, value: Any) -> Any:
        if isinstance(value, str):
            return decode_image(value) if value.strip() else None
        return value

    @field_validator("image_url", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError("Image URL must start with http:// or https://")
        return value

    @model_validator(mode="after")
    def check_single_image_source(self) -> "CreateProductRequest":
        if self.image is not None and self.image_url is not None:
            raise ValueError("Provide either image or image_url, not both")
        return self


class ProductResponse(BaseModel):
    """Response model wrapping a product and a status message."""

    product: Product = Field(..., description="Persisted product")
    message: str = Field(..., description="Success message")
