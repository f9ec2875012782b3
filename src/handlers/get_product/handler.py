"""
Lambda handler for ``GET /products/{product_id}``.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.services.product_service import ProductService
from core.utils.decorators import api_gateway_handler
from core.utils.events import path_parameter, request_summary
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetProductRequest

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return a single product, or 404 when it does not exist."""
    logger.info("Received product get request", extra=request_summary(event, context))

    request = validate_request(
        GetProductRequest,
        {"product_id": path_parameter(event, "product_id")},
    )

    product = ProductService().get_product(request.product_id)
    if product is None:
        return ResponseBuilder.product_not_found(request.product_id)

    return ResponseBuilder.ok(product.model_dump(mode="json"))
