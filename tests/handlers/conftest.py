import base64
import json
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def catalog_backend(dynamodb_table, s3_bucket):
    """Products table and media bucket, both mocked."""
    return dynamodb_table, s3_bucket


@pytest.fixture
def create_product_event(sample_image_binary) -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": "/products",
        "body": json.dumps(
            {
                "name": "Walnut Armchair",
                "price": 349.99,
                "category_id": "chairs",
                "image": base64.b64encode(sample_image_binary).decode("utf-8"),
            }
        ),
        "headers": {"Content-Type": "application/json"},
    }


@pytest.fixture
def update_product_event(sample_jpeg_binary) -> dict[str, Any]:
    return {
        "httpMethod": "PUT",
        "path": "/products/prod_1",
        "pathParameters": {"product_id": "prod_1"},
        "body": json.dumps(
            {
                "name": "Oak Dining Table XL",
                "price": 899.5,
                "category_id": "tables",
                "image": base64.b64encode(sample_jpeg_binary).decode("utf-8"),
            }
        ),
        "headers": {"Content-Type": "application/json"},
    }


@pytest.fixture
def get_product_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/products/prod_1",
        "pathParameters": {"product_id": "prod_1"},
    }


@pytest.fixture
def delete_product_event() -> dict[str, Any]:
    return {
        "httpMethod": "DELETE",
        "path": "/products/prod_1",
        "pathParameters": {"product_id": "prod_1"},
    }
