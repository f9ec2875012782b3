"""Request and response bodies for product deletion."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class DeleteProductRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    product_id: StrictStr = Field(..., min_length=1, description="Product to delete")


class DeleteProductResponse(BaseModel):
    """Outcome of a delete; ``deleted`` is False when nothing was stored."""

    product_id: str
    deleted: bool
    message: str
    deleted_at: str = Field(..., description="ISO-8601 time the request was handled")
