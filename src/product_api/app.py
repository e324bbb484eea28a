"""
Product Catalog Backend API Server
CRUD and filtering over a single products table
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.config.settings import ALLOWED_ORIGINS, get_database_url
from product_api.database.connection import Database
from product_api.api.routes import health, products
from product_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database for the lifetime of the application"""
    try:
        database = Database(get_database_url())
        await database.connect()
        await database.ensure_schema()
    except Exception as e:
        logger.critical(f"Database startup failed: {e}")
        raise

    app.state.database = database
    try:
        yield
    finally:
        await database.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Catalog Backend",
        description="Backend API for product CRUD and filtering",
        version="1.0.0",
        lifespan=lifespan
    )

    if ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(products.router, tags=["Products"])

    return app


# FastAPI app instance is exported for use by uvicorn
app = create_app()
