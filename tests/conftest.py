"""
Pytest configuration and fixtures for catalog service tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup,
plus in-memory collaborators for lifecycle service tests.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PRODUCTS_TABLE_NAME", "furniture-products-test")
os.environ.setdefault("MEDIA_S3_BUCKET_NAME", "furniture-media-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "furniture-catalog")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "FurnitureCatalog")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.pop("AWS_ENDPOINT_URL", None)
os.environ.pop("MEDIA_PUBLIC_BASE_URL", None)
os.environ.pop("MEDIA_STORE_BACKEND", None)

from core.models.media import DeletionResult, DeletionStatus  # noqa: E402
from core.models.product import Product  # noqa: E402
from core.repositories.media_store import MediaStore  # noqa: E402
from core.repositories.product_repository import ProductRepository  # noqa: E402

BUCKET_URL = "https://furniture-media-test.s3.us-east-1.amazonaws.com"


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_products_table(dynamodb_resource):
    """Helper to create the products table with its category GSI."""
    table_name = os.getenv("PRODUCTS_TABLE_NAME")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "product_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "product_id", "AttributeType": "S"},
            {"AttributeName": "category_id", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "category-index",
                "KeySchema": [
                    {"AttributeName": "category_id", "KeyType": "HASH"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the products table for a test.

    The table lives inside the moto context and disappears with it.
    """
    table_name = os.getenv("PRODUCTS_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_products_table(dynamodb_resource)
        table.wait_until_exists()

    yield table


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single item into DynamoDB.

    Usage:
        item = dynamodb_put_item({"product_id": "prod_1", "name": "Chair", ...})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    """
    Helper to get a single item from DynamoDB.

    Usage:
        item = dynamodb_get_item("prod_1")
    """

    def _get(product_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"product_id": product_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the media bucket inside the moto context."""
    bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client


@pytest.fixture
def s3_put_object(s3_client) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        s3_put_object("furniture_products/abc.jpg", image_bytes, "image/jpeg")
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
        return s3_client.put_object(
            Bucket=bucket_name, Key=key, Body=body, ContentType=content_type
        )

    return _put


@pytest.fixture
def s3_list_keys(s3_client) -> Callable[[str], list[str]]:
    """
    Helper to list object keys under a prefix.

    Usage:
        keys = s3_list_keys("furniture_products/")
    """

    def _list(prefix: str = "") -> list[str]:
        bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
        response = s3_client.list_objects_v2(Bucket=bucket_name, Prefix=prefix)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], bytes]:
    """
    Helper to get an object from S3.

    Usage:
        content = s3_get_object("furniture_products/abc.jpg")
    """

    def _get(key: str) -> bytes:
        bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
        response: dict[str, Any] = s3_client.get_object(Bucket=bucket_name, Key=key)
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def sample_product_item() -> dict[str, Any]:
    """Single product record as stored in DynamoDB."""
    return {
        "product_id": "prod_1",
        "name": "Oak Dining Table",
        "price": Decimal("749.00"),
        "category_id": "tables",
        "image": {
            "url": f"{BUCKET_URL}/furniture_products/oak123.jpg",
            "source": "media_store",
        },
        "created_at": "2024-01-01T10:00:00+00:00",
        "updated_at": "2024-01-01T10:00:00+00:00",
    }


# ============================================================================
# In-memory collaborators
# ============================================================================


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository that records every write."""

    def __init__(self) -> None:
        self.products: dict[str, Product] = {}
        self.saved: list[Product] = []
        self.deleted: list[str] = []
        self._counter = 0

    def find_all(self) -> list[Product]:
        return list(self.products.values())

    def find_by_category_id(self, category_id: str) -> list[Product]:
        return [p for p in self.products.values() if p.category_id == category_id]

    def find_by_id(self, product_id: str) -> Product | None:
        product = self.products.get(product_id)
        return product.model_copy(deep=True) if product else None

    def save(self, product: Product) -> Product:
        if product.product_id is None:
            self._counter += 1
            product = product.model_copy(update={"product_id": f"prod_{self._counter}"})
        self.products[product.product_id] = product
        self.saved.append(product)
        return product

    def delete_by_id(self, product_id: str) -> None:
        self.deleted.append(product_id)
        self.products.pop(product_id, None)


@dataclass
class RecordingMediaStore(MediaStore):
    """Media store double recording every call in order."""

    upload_error: Exception | None = None
    delete_status: DeletionStatus = DeletionStatus.DELETED
    calls: list[tuple[str, Any]] = field(default_factory=list)
    _counter: int = 0

    def upload(self, *, data: bytes, folder: str) -> str:
        self.calls.append(("upload", data))
        if self.upload_error is not None:
            raise self.upload_error
        self._counter += 1
        return f"{BUCKET_URL}/{folder}/img{self._counter}.png"

    def delete(self, *, public_id: str) -> DeletionResult:
        self.calls.append(("delete", public_id))
        error = "simulated failure" if self.delete_status is DeletionStatus.FAILED else None
        return DeletionResult(public_id=public_id, status=self.delete_status, error=error)

    @property
    def uploads(self) -> list[Any]:
        return [arg for name, arg in self.calls if name == "upload"]

    @property
    def deletes(self) -> list[Any]:
        return [arg for name, arg in self.calls if name == "delete"]


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def media_store() -> RecordingMediaStore:
    return RecordingMediaStore()
