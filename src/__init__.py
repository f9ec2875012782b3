"""Furniture Catalog Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless furniture catalog with product image lifecycle management "
    "using AWS Lambda, S3, and DynamoDB"
)

__all__ = ["handlers", "core"]
