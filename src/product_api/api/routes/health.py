"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException

from product_api.database.connection import Database
from product_api.services.products_service import get_database

router = APIRouter()


@router.get("/health")
async def health_check(database: Database = Depends(get_database)):
    """Report healthy when the database answers a trivial query"""
    try:
        await database.ping()
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "database": "connected"
    }
