from decimal import Decimal

import pytest
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.utils.constants import ENV_PRODUCTS_TABLE_NAME


class TestDynamoDBAdapter:
    def test_init_missing_table_env(self, monkeypatch):
        monkeypatch.delenv(ENV_PRODUCTS_TABLE_NAME, raising=False)

        with pytest.raises(RuntimeError):
            DynamoDBAdapter()

    def test_put_and_get_item(self, dynamodb_table):
        adapter = DynamoDBAdapter()
        item = {"product_id": "prod_1", "name": "Sofa", "price": Decimal("999"), "category_id": "sofas"}

        adapter.put_item(item=item)

        assert adapter.get_item(key={"product_id": "prod_1"}) == item

    def test_get_missing_item(self, dynamodb_table):
        assert DynamoDBAdapter().get_item(key={"product_id": "missing"}) is None

    def test_delete_item(self, dynamodb_put_item, dynamodb_get_item):
        dynamodb_put_item({"product_id": "prod_1", "category_id": "sofas"})

        DynamoDBAdapter().delete_item(key={"product_id": "prod_1"})

        assert dynamodb_get_item("prod_1") is None

    def test_query_all_on_category_index(self, dynamodb_put_item):
        dynamodb_put_item({"product_id": "prod_1", "category_id": "sofas"})
        dynamodb_put_item({"product_id": "prod_2", "category_id": "chairs"})

        items = DynamoDBAdapter().query_all(
            IndexName="category-index",
            KeyConditionExpression=Key("category_id").eq("sofas"),
        )

        assert [item["product_id"] for item in items] == ["prod_1"]

    def test_scan_all_follows_pages(self, dynamodb_put_item):
        for i in range(5):
            dynamodb_put_item({"product_id": f"prod_{i}", "category_id": "sofas"})

        items = DynamoDBAdapter().scan_all(Limit=2)

        assert sorted(item["product_id"] for item in items) == [f"prod_{i}" for i in range(5)]

    def test_scan_all_empty_table(self, dynamodb_table):
        assert DynamoDBAdapter().scan_all() == []

    def test_missing_table_raises_client_error(self, aws_mock):
        with pytest.raises(ClientError):
            DynamoDBAdapter().get_item(key={"product_id": "prod_1"})
