"""
Products service - storage access for the products table
"""

import logging
from decimal import Decimal
from fastapi import Depends, Request

from product_api.database.connection import Database
from product_api.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, name, price"


class ProductsService(BaseService):
    """Service for product CRUD and filtering operations"""

    def __init__(self, database: Database):
        super().__init__(database, "products")

    async def get_product_by_id(self, product_id: int) -> ServiceResult:
        """
        Get a product by its ID

        Args:
            product_id: ID of the product

        Returns:
            ServiceResult with the product row, RESOURCE_NOT_FOUND if absent
        """
        return await self._fetch_one(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = $1",
            product_id
        )

    async def list_products(self, start: int, count: int) -> ServiceResult:
        """
        List products in id order

        Args:
            start: Number of products to skip
            count: Maximum number of products to return

        Returns:
            ServiceResult with up to count products
        """
        return await self._fetch_rows(
            f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY id LIMIT $1 OFFSET $2",
            count,
            start
        )

    async def list_products_by_name(self, name: str) -> ServiceResult:
        """Get all products whose name equals the given string exactly"""
        return await self._fetch_rows(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE name = $1 ORDER BY id",
            name
        )

    async def list_products_by_price_range(self, min_price: Decimal, max_price: Decimal) -> ServiceResult:
        """Get all products priced within [min_price, max_price]"""
        return await self._fetch_rows(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE price >= $1 AND price <= $2 ORDER BY id",
            min_price,
            max_price
        )

    async def create_product(self, name: str, price: Decimal) -> ServiceResult:
        """
        Insert a new product

        Args:
            name: Product name
            price: Product price

        Returns:
            ServiceResult whose single row holds the generated id
        """
        logger.info(f"Creating product: {name}")
        return await self._fetch_one(
            "INSERT INTO products (name, price) VALUES ($1, $2) RETURNING id",
            name,
            price
        )

    async def update_product(self, product_id: int, name: str, price: Decimal) -> ServiceResult:
        """Overwrite name and price; a missing id is not an error"""
        logger.info(f"Updating product {product_id}")
        return await self._execute(
            "UPDATE products SET name = $1, price = $2 WHERE id = $3",
            name,
            price,
            product_id
        )

    async def delete_product(self, product_id: int) -> ServiceResult:
        """Delete a product; a missing id is not an error"""
        logger.info(f"Deleting product {product_id}")
        return await self._execute("DELETE FROM products WHERE id = $1", product_id)


def get_database(request: Request) -> Database:
    """Get the database owned by the running application"""
    return request.app.state.database


def get_products_service(database: Database = Depends(get_database)) -> ProductsService:
    """Get a products service bound to the application's database"""
    return ProductsService(database)
