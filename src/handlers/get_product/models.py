from pydantic import BaseModel, ConfigDict, Field, StrictStr


class GetProductRequest(BaseModel):
    """Path parameters of a product lookup."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Whitespace is stripped first, so a blank ID fails min_length
    product_id: StrictStr = Field(..., min_length=1, description="Product to fetch")
