"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Optional

from product_api.config.settings import DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE, DB_COMMAND_TIMEOUT

logger = logging.getLogger(__name__)

PRODUCTS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS products
(
    id SERIAL,
    name TEXT NOT NULL,
    price NUMERIC(10,2) NOT NULL DEFAULT 0.00,
    CONSTRAINT products_pkey PRIMARY KEY (id)
)
"""


class Database:
    """Owns the asyncpg pool for the lifetime of the application"""

    def __init__(
        self,
        dsn: str,
        min_size: int = DB_POOL_MIN_SIZE,
        max_size: int = DB_POOL_MAX_SIZE,
        command_timeout: float = DB_COMMAND_TIMEOUT
    ):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self):
        """Open the connection pool and verify connectivity"""
        self.pool = await asyncpg.create_pool(
            self.dsn,
            min_size=self.min_size,
            max_size=self.max_size,
            command_timeout=self.command_timeout
        )

        # Test connection
        await self.ping()

        logger.info("Database initialized successfully")

    async def ensure_schema(self):
        """Create the products table if it does not exist yet"""
        async with self.acquire() as conn:
            await conn.execute(PRODUCTS_TABLE_DDL)
        logger.info("Products table is ready")

    async def ping(self):
        async with self.acquire() as conn:
            await conn.fetchval("SELECT 1")

    def acquire(self):
        """Acquire a pooled connection, usable as an async context manager"""
        if self.pool is None:
            raise RuntimeError("Database pool not initialized")
        return self.pool.acquire()

    async def close(self):
        """Close the connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        logger.info("Database connections closed")
