"""Abstract contract for product persistence."""

from abc import ABC, abstractmethod

from core.models.product import Product


class ProductRepository(ABC):
    """Contract for storing and retrieving catalog products.

    Implementations could be DynamoDB, PostgreSQL, an in-memory dict, etc.
    The lifecycle service depends on this interface, not the implementation.
    """

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product.

        Raises:
            ProductRepositoryError: If the listing fails
        """

    @abstractmethod
    def find_by_category_id(self, category_id: str) -> list[Product]:
        """Return the products belonging to a category.

        Args:
            category_id: Category identifier

        Raises:
            ProductRepositoryError: If the query fails
        """

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Fetch a single product.

        Args:
            product_id: Opaque product identifier

        Returns:
            The product, or None if it does not exist

        Raises:
            ProductRepositoryError: If the fetch fails
        """

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or update a product.

        A product without ``product_id`` is inserted and receives a freshly
        assigned identifier; otherwise the stored record is overwritten.

        Returns:
            The persisted product, carrying its identifier and timestamps

        Raises:
            ProductRepositoryError: If the write fails
        """

    @abstractmethod
    def delete_by_id(self, product_id: str) -> None:
        """Delete a product record.

        Raises:
            ProductRepositoryError: If the deletion fails
        """
