"""
Lambda handler for ``PUT /products/{product_id}``.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.services.product_service import ProductService
from core.utils.decorators import api_gateway_handler
from core.utils.events import json_body, path_parameter, request_summary
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request
from handlers.create_product.models import ProductResponse

from .models import UpdateProductRequest

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Overwrite a product's name, price and category.

    With an ``image`` in the body the previous store-owned image is
    deleted on a best-effort basis and the new one uploaded before saving.
    An unknown product gives 404; a failed upload gives 500 and leaves the
    record unchanged.
    """
    product_id = path_parameter(event, "product_id")
    logger.info(
        "Received product update request",
        extra={**request_summary(event, context), "product_id": product_id},
    )

    request = validate_request(
        UpdateProductRequest,
        {**json_body(event), "product_id": product_id},
    )

    product = ProductService().update_product(
        request.product_id,
        name=request.name,
        price=request.price,
        category_id=request.category_id,
        image=request.image,
    )

    response = ProductResponse(product=product, message="Product updated successfully")
    return ResponseBuilder.ok(response.model_dump(mode="json"))
