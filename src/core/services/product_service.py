"""Business logic for the product lifecycle.

This module keeps a product's image consistent with the product itself:
images are uploaded when a product is created, replaced when an update
brings new image bytes, and reclaimed when the product is deleted.

Upload failures are fatal to the surrounding operation. Deletions are
best effort: a media store that cannot delete an image never prevents the
product mutation from completing.
"""

from decimal import Decimal

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_products import DynamoDBProductRepository
from core.infrastructure.media_store_factory import create_media_store
from core.models.errors import ProductNotFoundError, ValidationError
from core.models.media import DeletionResult
from core.models.product import ImageSource, Product, ProductImage
from core.repositories.media_store import MediaStore
from core.repositories.product_repository import ProductRepository
from core.utils.constants import PRODUCT_IMAGE_FOLDER
from core.utils.public_id import extract_public_id

logger = Logger(utc=True)


class ProductService:
    """Application service responsible for products and their images.

    This service orchestrates:
    - Pass-through reads from the product repository
    - Uploading image bytes to the media store on create and update
    - Best-effort reclamation of replaced or orphaned store-owned images
    - Persisting the resulting product records
    """

    def __init__(
        self,
        *,
        repository: ProductRepository | None = None,
        media_store: MediaStore | None = None,
    ) -> None:
        """Initialize the service with its persistence and media dependencies."""
        self.repository = repository or DynamoDBProductRepository()
        self.media_store = media_store or create_media_store()

    def list_products(self) -> list[Product]:
        return self.repository.find_all()

    def list_products_by_category(self, category_id: str) -> list[Product]:
        return self.repository.find_by_category_id(category_id)

    def get_product(self, product_id: str) -> Product | None:
        """Return the product, or None if it does not exist."""
        return self.repository.find_by_id(product_id)

    def create_product(
        self,
        *,
        name: str,
        price: Decimal,
        category_id: str,
        image: bytes | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Create a product, uploading its image first when bytes are given.

        Args:
            name: Product name
            price: Unit price
            category_id: Owning category
            image: Optional raw image bytes to upload
            image_url: Optional externally hosted image URL; the catalog
                references it but never deletes it

        Returns:
            The persisted product carrying its assigned identifier

        Raises:
            ValidationError: If both image bytes and an image URL are given
            ImageUploadFailedError: If the upload fails (nothing is persisted)
        """
        if image and image_url:
            raise ValidationError(
                message="Provide either image data or an image URL, not both",
            )

        logger.debug(
            "Creating product",
            extra={"category_id": category_id, "has_image": bool(image or image_url)},
        )

        product_image: ProductImage | None = None
        if image:
            product_image = self._upload(image)
        elif image_url:
            product_image = ProductImage(url=image_url, source=ImageSource.EXTERNAL)

        product = Product(
            name=name,
            price=price,
            category_id=category_id,
            image=product_image,
        )

        saved = self.repository.save(product)
        logger.info("Product created", extra={"product_id": saved.product_id})
        return saved

    def update_product(
        self,
        product_id: str,
        *,
        name: str,
        price: Decimal,
        category_id: str,
        image: bytes | None = None,
    ) -> Product:
        """Update a product, replacing its image when new bytes are given.

        The update flow is:
        1. Load the existing product
        2. Overwrite name, price and category
        3. With new image bytes: reclaim the current store-owned image,
           then upload the new one
        4. Persist

        Without image bytes the stored image reference is left untouched.

        Raises:
            ProductNotFoundError: If the product does not exist
            ImageUploadFailedError: If the upload fails (nothing is persisted)
        """
        existing = self.repository.find_by_id(product_id)
        if existing is None:
            logger.warning("Product not found for update", extra={"product_id": product_id})
            raise ProductNotFoundError(
                message=f"Product not found: {product_id}",
                details={"product_id": product_id},
            )

        existing.name = name
        existing.price = price
        existing.category_id = category_id

        if image:
            self._release_image(existing)
            existing.image = self._upload(image)

        saved = self.repository.save(existing)
        logger.info(
            "Product updated",
            extra={"product_id": product_id, "image_replaced": bool(image)},
        )
        return saved

    def delete_product(self, product_id: str) -> bool:
        """Delete a product and reclaim its store-owned image.

        Returns:
            True if a product was deleted, False if none existed
        """
        existing = self.repository.find_by_id(product_id)
        if existing is None:
            logger.info("Product already absent", extra={"product_id": product_id})
            return False

        self._release_image(existing)
        self.repository.delete_by_id(product_id)

        logger.info("Product deleted", extra={"product_id": product_id})
        return True

    def _upload(self, image: bytes) -> ProductImage:
        url = self.media_store.upload(data=image, folder=PRODUCT_IMAGE_FOLDER)
        return ProductImage(url=url, source=ImageSource.MEDIA_STORE)

    def _release_image(self, product: Product) -> DeletionResult | None:
        """Best-effort deletion of the product's store-owned image.

        Returns None when there was nothing this service may delete.
        """
        if product.image is None or not product.image.is_store_owned:
            return None

        public_id = extract_public_id(product.image.url)
        if public_id is None:
            logger.warning(
                "Cannot derive public ID from image URL; leaving it in place",
                extra={"product_id": product.product_id, "url": product.image.url},
            )
            return None

        result = self.media_store.delete(public_id=public_id)
        if not result.succeeded:
            logger.warning(
                "Previous image was not deleted",
                extra={
                    "product_id": product.product_id,
                    "public_id": public_id,
                    "status": result.status.value,
                },
            )

        return result
