"""
Order Pricing Service

HTTP front for the order pricing engine: shape catalog, delivery methods,
promo validation and live cart quotes for the order builder.
"""

import os
import sys
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Add shared modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "shared"))

from .routes import shapes_router, delivery_router, promo_router, quote_router
from .core.config import settings

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", "config", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Order Pricing Service starting up...")
    logger.info(f"Admin discounts: {'enabled' if settings.admin_enabled else 'disabled'}")
    logger.info(f"Custom art setup fee: {settings.custom_art_setup_fee}")
    yield
    logger.info("Order Pricing Service shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Order pricing and fulfillment estimates for custom nail sets",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(shapes_router)
app.include_router(delivery_router)
app.include_router(promo_router)
app.include_router(quote_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Order Pricing API",
        "docs": "/docs",
        "endpoints": {
            "shapes": "/api/shapes",
            "delivery_methods": "/api/delivery-methods",
            "promo_codes": "/api/promo-codes/validate",
            "quote": "/api/pricing/quote",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "order-pricing"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
