"""DynamoDB-backed implementation of ProductRepository.

Table layout: partition key ``product_id``, plus the ``category-index``
GSI keyed on ``category_id`` for per-category listings.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
import uuid

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
    Item,
)
from core.models.errors import ProductRepositoryError
from core.models.product import Product
from core.repositories.product_repository import ProductRepository
from core.utils.constants import (
    ERROR_CODE_PRODUCT_DELETE_FAILED,
    ERROR_CODE_PRODUCT_FETCH_FAILED,
    ERROR_CODE_PRODUCT_INVALID_FORMAT,
    ERROR_CODE_PRODUCT_LIST_FAILED,
    ERROR_CODE_PRODUCT_SAVE_FAILED,
)
from core.utils.time import utc_now_iso

logger = Logger(utc=True)

CATEGORY_INDEX_NAME = "category-index"


@contextmanager
def _translate_client_errors(message: str, error_code: str, **details: Any) -> Iterator[None]:
    try:
        yield
    except ClientError as exc:
        logger.error(
            message,
            extra={**details, "aws_error": exc.response.get("Error", {}).get("Code")},
        )
        raise ProductRepositoryError(
            message=message,
            error_code=error_code,
            details=details,
        ) from exc


class DynamoDBProductRepository(ProductRepository):
    """Product storage in DynamoDB.

    boto3 failures surface as ProductRepositoryError with one of the
    PRODUCT_*_FAILED codes; unreadable records as PRODUCT_INVALID_FORMAT.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    @staticmethod
    def generate_product_id() -> str:
        return f"prod_{uuid.uuid4().hex}"

    def find_all(self) -> list[Product]:
        with _translate_client_errors("Unable to list products", ERROR_CODE_PRODUCT_LIST_FAILED):
            items = self._db.scan_all()

        logger.info("Products listed", extra={"count": len(items)})
        return self._to_products(items)

    def find_by_category_id(self, category_id: str) -> list[Product]:
        with _translate_client_errors(
            "Unable to list products",
            ERROR_CODE_PRODUCT_LIST_FAILED,
            category_id=category_id,
        ):
            items = self._db.query_all(
                IndexName=CATEGORY_INDEX_NAME,
                KeyConditionExpression=Key("category_id").eq(category_id),
            )

        logger.info(
            "Category products listed",
            extra={"category_id": category_id, "count": len(items)},
        )
        return self._to_products(items)

    def find_by_id(self, product_id: str) -> Product | None:
        with _translate_client_errors(
            "Unable to retrieve product",
            ERROR_CODE_PRODUCT_FETCH_FAILED,
            product_id=product_id,
        ):
            item = self._db.get_item(key={"product_id": product_id})

        if item is None:
            logger.debug("Product not in table", extra={"product_id": product_id})
            return None
        return self._to_product(item)

    def save(self, product: Product) -> Product:
        """Write the product, assigning an ID and created_at on first save.

        updated_at is refreshed on every call.
        """
        now = utc_now_iso()
        stored = product.model_copy(
            update={
                "product_id": product.product_id or self.generate_product_id(),
                "created_at": product.created_at or now,
                "updated_at": now,
            }
        )

        with _translate_client_errors(
            "Unable to save product at this time",
            ERROR_CODE_PRODUCT_SAVE_FAILED,
            product_id=stored.product_id,
        ):
            self._db.put_item(item=stored.to_item())

        logger.info("Product saved", extra={"product_id": stored.product_id})
        return stored

    def delete_by_id(self, product_id: str) -> None:
        with _translate_client_errors(
            "Unable to delete product",
            ERROR_CODE_PRODUCT_DELETE_FAILED,
            product_id=product_id,
        ):
            self._db.delete_item(key={"product_id": product_id})

        logger.info("Product record deleted", extra={"product_id": product_id})

    def _to_products(self, items: list[Item]) -> list[Product]:
        return [self._to_product(item) for item in items]

    @staticmethod
    def _to_product(item: Item) -> Product:
        try:
            return Product.from_item(item)
        except PydanticValidationError as exc:
            logger.error("Invalid product record", extra={"product_id": item.get("product_id")})
            raise ProductRepositoryError(
                message="Invalid product record format",
                error_code=ERROR_CODE_PRODUCT_INVALID_FORMAT,
                details={"product_id": item.get("product_id")},
            ) from exc
