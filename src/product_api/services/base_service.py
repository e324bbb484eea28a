"""
Base service layer for direct SQL execution against the connection pool
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from product_api.database.connection import Database

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
DATABASE_ERROR = "DATABASE_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def not_found(self) -> bool:
        return self.error_type == RESOURCE_NOT_FOUND


class BaseService:
    """Runs parameterized statements for a single table"""

    def __init__(self, database: Database, table_name: str):
        self.database = database
        self.table_name = table_name

    async def _fetch_rows(self, query: str, *params: Any) -> ServiceResult:
        """
        Execute a SELECT returning any number of rows

        Returns:
            ServiceResult whose data is a (possibly empty) list of row dicts
        """
        logger.info(f"Executing READ query: {query}")
        logger.info(f"Parameters: {list(params)}")

        try:
            async with self.database.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except Exception as e:
            return self._database_error("READ", e)

        data = [dict(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def _fetch_one(self, query: str, *params: Any) -> ServiceResult:
        """
        Execute a statement expected to return exactly one row

        Returns:
            ServiceResult with a single row, or RESOURCE_NOT_FOUND when nothing matched
        """
        logger.info(f"Executing query: {query}")
        logger.info(f"Parameters: {list(params)}")

        try:
            async with self.database.acquire() as conn:
                row = await conn.fetchrow(query, *params)
        except Exception as e:
            return self._database_error("FETCH", e)

        if row is None:
            return ServiceResult(
                success=False,
                error=f"No {self.table_name} record found",
                error_type=RESOURCE_NOT_FOUND
            )

        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def _execute(self, query: str, *params: Any) -> ServiceResult:
        """
        Execute a statement without a result set

        The affected row count is reported but never checked, so statements
        matching no rows still succeed.
        """
        logger.info(f"Executing: {query}")
        logger.info(f"Parameters: {list(params)}")

        try:
            async with self.database.acquire() as conn:
                status = await conn.execute(query, *params)
        except Exception as e:
            return self._database_error("WRITE", e)

        # asyncpg returns a status tag such as "DELETE 1"
        affected = int(status.split()[-1]) if status and status.split()[-1].isdigit() else 0
        return ServiceResult(success=True, data=[], count=affected)

    def _database_error(self, operation: str, error: Exception) -> ServiceResult:
        logger.error(f"Database error during {operation} on {self.table_name}: {error}")
        return ServiceResult(
            success=False,
            error=str(error),
            error_type=DATABASE_ERROR
        )
