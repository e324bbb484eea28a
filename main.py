"""
Entry point for the Product Catalog Backend
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from product_api.config.settings import HOST, PORT, LOG_LEVEL

# Configure logging before the application modules log anything
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Import the FastAPI application
from product_api.app import app

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Product Catalog Backend on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
