"""
Lambda handler for ``GET /products``.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.services.product_service import ProductService
from core.utils.decorators import api_gateway_handler
from core.utils.events import query_parameter, request_summary
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListProductsRequest, ListProductsResponse

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    List every product, or only those of ``?category_id=``.

    Returns:
        200 with ``{"products": [...], "count": n}``
    """
    logger.info(
        "Received product list request",
        extra={**request_summary(event, context), "query_params": event.get("queryStringParameters")},
    )

    request = validate_request(
        ListProductsRequest,
        {"category_id": query_parameter(event, "category_id")},
    )

    service = ProductService()
    if request.category_id:
        products = service.list_products_by_category(request.category_id)
    else:
        products = service.list_products()

    response = ListProductsResponse(products=products, count=len(products))
    return ResponseBuilder.ok(response.model_dump(mode="json"))
