"""Pydantic models for list products request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from core.models.product import Product
from core.utils.constants import CATEGORY_ID_MAX_LENGTH, CATEGORY_ID_PATTERN


class ListProductsRequest(BaseModel):
    """Validation model for list products query parameters."""

    model_config = ConfigDict(str_strip_whitespace=True)

    category_id: str | None = Field(
        None,
        min_length=1,
        max_length=CATEGORY_ID_MAX_LENGTH,
        pattern=CATEGORY_ID_PATTERN,
        description="Only return products in this category",
    )


class ListProductsResponse(BaseModel):
    """Response for listing products."""

    products: list[Product] = Field(..., description="Matching products")
    count: StrictInt = Field(..., description="Number of products returned")
