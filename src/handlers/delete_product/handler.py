"""
Lambda handler for ``DELETE /products/{product_id}``.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.services.product_service import ProductService
from core.utils.decorators import api_gateway_handler
from core.utils.events import path_parameter, request_summary
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso
from core.utils.validators import validate_request

from .models import DeleteProductRequest, DeleteProductResponse

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Delete a product and, best effort, its store-owned image.

    Deleting a product that does not exist still answers 200, with
    ``deleted`` set to false.
    """
    logger.info("Received product delete request", extra=request_summary(event, context))

    request = validate_request(
        DeleteProductRequest,
        {"product_id": path_parameter(event, "product_id")},
    )

    deleted = ProductService().delete_product(request.product_id)

    response = DeleteProductResponse(
        product_id=request.product_id,
        deleted=deleted,
        message="Product deleted successfully" if deleted else "Product did not exist",
        deleted_at=utc_now_iso(),
    )
    return ResponseBuilder.ok(response.model_dump())
