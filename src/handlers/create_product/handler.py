"""
Lambda handler for ``POST /products``.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.services.product_service import ProductService
from core.utils.decorators import api_gateway_handler
from core.utils.events import json_body, request_summary
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import CreateProductRequest, ProductResponse

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Create a product.

    Body fields: ``name``, ``price``, ``category_id`` and at most one of
    ``image`` (base64 bytes, uploaded to the media store) or ``image_url``
    (an externally hosted image). An upload failure aborts the request
    before anything is written.

    Returns:
        201 with ``{"product": ..., "message": ...}``
    """
    logger.info("Received product create request", extra=request_summary(event, context))

    request = validate_request(CreateProductRequest, json_body(event))

    product = ProductService().create_product(
        name=request.name,
        price=request.price,
        category_id=request.category_id,
        image=request.image,
        image_url=request.image_url,
    )

    response = ProductResponse(product=product, message="Product created successfully")
    return ResponseBuilder.created(response.model_dump(mode="json"))
