"""boto3 wrapper for the products table.

Like the S3 adapter, this layer performs no error handling; the product
repository translates ClientError into domain errors.
"""

import os
from typing import Any, Protocol

import boto3

from core.utils.constants import (
    DEFAULT_AWS_REGION,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_PRODUCTS_TABLE_NAME,
)

Item = dict[str, Any]


class DynamoDBAdapterProtocol(Protocol):
    """What DynamoDBProductRepository needs from the table."""

    def put_item(self, *, item: Item) -> None: ...
    def get_item(self, *, key: Item) -> Item | None: ...
    def delete_item(self, *, key: Item) -> None: ...
    def query_all(self, **kwargs: Any) -> list[Item]: ...
    def scan_all(self, **kwargs: Any) -> list[Item]: ...


class DynamoDBAdapter:
    """Products table operations, configured from PRODUCTS_TABLE_NAME."""

    def __init__(self) -> None:
        table_name = os.getenv(ENV_PRODUCTS_TABLE_NAME)
        if not table_name:
            raise RuntimeError(f"{ENV_PRODUCTS_TABLE_NAME} environment variable is not set")

        resource = boto3.resource(
            "dynamodb",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION) or DEFAULT_AWS_REGION,
        )
        self.table: Any = resource.Table(table_name)

    def put_item(self, *, item: Item) -> None:
        self.table.put_item(Item=item)

    def get_item(self, *, key: Item) -> Item | None:
        """The stored item, or None when the key is absent."""
        item: Item | None = self.table.get_item(Key=key).get("Item")
        return item

    def delete_item(self, *, key: Item) -> None:
        self.table.delete_item(Key=key)

    def query_all(self, **kwargs: Any) -> list[Item]:
        return self._drain(self.table.query, kwargs)

    def scan_all(self, **kwargs: Any) -> list[Item]:
        return self._drain(self.table.scan, kwargs)

    @staticmethod
    def _drain(operation: Any, kwargs: dict[str, Any]) -> list[Item]:
        """Repeat operation from LastEvaluatedKey until no pages remain."""
        items: list[Item] = []
        request = dict(kwargs)

        while True:
            response = operation(**request)
            items.extend(response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            request["ExclusiveStartKey"] = last_key
