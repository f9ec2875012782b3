#!/usr/bin/env python3
"""
Create the sample catalog in a running deployment.

Usage:
    python seed/seed_products.py --api-id <API-ID> [--api-key <KEY>]
    python seed/seed_products.py --base-url https://api.example.com/v1

Entries in seed/data/products.json carry either an ``image_file`` (read
from seed/images/ and uploaded as base64) or an external ``image_url``.
"""

import argparse
import base64
import json
from pathlib import Path
import sys
from typing import Any

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")

SEED_DIR = Path(__file__).parent
LOCALSTACK_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1"
REQUEST_TIMEOUT = 30


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed sample furniture products")

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--api-id", help="LocalStack API Gateway ID")
    target.add_argument("--base-url", help="API base URL ending in /v1")

    parser.add_argument("--api-key", default=None, help="Value for the x-api-key header")
    parser.add_argument("--limit", type=int, default=10, help="Maximum products to create")

    return parser.parse_args()


def api_base_url(args: argparse.Namespace) -> str:
    if args.base_url:
        return str(args.base_url).rstrip("/")
    return LOCALSTACK_API_URL.format(args.api_id)


def load_products() -> list[dict[str, Any]]:
    with open(SEED_DIR / "data" / "products.json", encoding="utf-8") as f:
        products: list[dict[str, Any]] = json.load(f)["products"]
    return products


def build_payload(entry: dict[str, Any]) -> dict[str, Any] | None:
    """Request body for one entry, or None if its image file is missing."""
    payload = {key: entry[key] for key in ("name", "price", "category_id")}

    if entry.get("image_file"):
        image_path = SEED_DIR / "images" / entry["image_file"]
        if not image_path.is_file():
            logger.warning("Skipping product, image file not found", extra={"path": str(image_path)})
            return None
        payload["image"] = base64.b64encode(image_path.read_bytes()).decode("utf-8")
    elif entry.get("image_url"):
        payload["image_url"] = entry["image_url"]

    return payload


def create_product(session: requests.Session, products_url: str, entry: dict[str, Any]) -> bool:
    payload = build_payload(entry)
    if payload is None:
        return False

    response = session.post(products_url, json=payload, timeout=REQUEST_TIMEOUT)
    if response.status_code != 201:
        logger.error(
            "Failed to seed product",
            extra={"name": entry["name"], "status": response.status_code, "response": response.text},
        )
        return False

    product = response.json()["product"]
    logger.info(
        "Seeded product",
        extra={"name": product["name"], "product_id": product["product_id"]},
    )
    return True


def main() -> None:
    args = parse_args()
    products_url = f"{api_base_url(args)}/products"

    session = requests.Session()
    session.headers["Content-Type"] = "application/json"
    if args.api_key:
        session.headers["x-api-key"] = args.api_key

    logger.info("Starting seeding process", extra={"products_url": products_url})

    try:
        created = sum(
            create_product(session, products_url, entry) for entry in load_products()[: args.limit]
        )
        listing = session.get(products_url, timeout=REQUEST_TIMEOUT)
        listing.raise_for_status()
    except (OSError, requests.RequestException) as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)

    logger.info(
        "Seeding completed",
        extra={"created": created, "catalog_size": listing.json().get("count")},
    )


if __name__ == "__main__":
    main()
