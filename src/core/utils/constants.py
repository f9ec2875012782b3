"""Shared constants for the catalog service.

Error codes, media conventions, request limits, HTTP defaults and the
names of the environment variables read at startup all live here.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"

# Media store
ERROR_CODE_IMAGE_UPLOAD_FAILED = "IMAGE_UPLOAD_FAILED"
ERROR_CODE_IMAGE_DELETE_FAILED = "IMAGE_DELETE_FAILED"

# Product table
ERROR_CODE_PRODUCT_REPOSITORY = "PRODUCT_REPOSITORY_ERROR"
ERROR_CODE_PRODUCT_SAVE_FAILED = "PRODUCT_SAVE_FAILED"
ERROR_CODE_PRODUCT_FETCH_FAILED = "PRODUCT_FETCH_FAILED"
ERROR_CODE_PRODUCT_DELETE_FAILED = "PRODUCT_DELETE_FAILED"
ERROR_CODE_PRODUCT_LIST_FAILED = "PRODUCT_LIST_FAILED"
ERROR_CODE_PRODUCT_INVALID_FORMAT = "PRODUCT_INVALID_FORMAT"

# ============================================================================
# Media Store
# ============================================================================

# Every product image is stored under this folder; public IDs are
# '<folder>/<basename without extension>'.
PRODUCT_IMAGE_FOLDER: Final[str] = "furniture_products"

MEDIA_STORE_BACKEND_S3 = "s3"
MEDIA_STORE_BACKEND_LOCAL = "local"

DEFAULT_LOCAL_MEDIA_BASE_URL = "http://localhost:8080"

MAX_IMAGE_SIZE_MB = 4
MAX_FILE_SIZE = MAX_IMAGE_SIZE_MB * 1024 * 1024

# First entry is the extension used when storing the image
IMAGE_EXTENSIONS: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
}

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(IMAGE_EXTENSIONS)

FALLBACK_EXTENSION = "bin"
FALLBACK_CONTENT_TYPE = "application/octet-stream"

# ============================================================================
# Products
# ============================================================================

PRODUCT_NAME_MAX_LENGTH = 200
CATEGORY_ID_MAX_LENGTH = 64
CATEGORY_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"
IMAGE_URL_MAX_LENGTH = 2048

# Prices are stored as DynamoDB numbers; keep them well inside its precision
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2

# ============================================================================
# Static Uploads
# ============================================================================

STATIC_UPLOADS_URL_PREFIX = "/uploads/images"
DEFAULT_UPLOADS_DIR = "uploads/images"
STATIC_CACHE_MAX_AGE = 24 * 60 * 60

# ============================================================================
# HTTP
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length,Cache-Control"
JSON_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_PRODUCTS_TABLE_NAME = "PRODUCTS_TABLE_NAME"
ENV_MEDIA_S3_BUCKET_NAME = "MEDIA_S3_BUCKET_NAME"
ENV_MEDIA_PUBLIC_BASE_URL = "MEDIA_PUBLIC_BASE_URL"
ENV_MEDIA_STORE_BACKEND = "MEDIA_STORE_BACKEND"
ENV_LOCAL_MEDIA_BASE_URL = "LOCAL_MEDIA_BASE_URL"
ENV_UPLOADS_DIR = "UPLOADS_DIR"

DEFAULT_AWS_REGION = "us-east-1"
