"""
Variant Relay - Main Application
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import ConfigurationError, settings
from .dependencies import init_dependencies, close_dependencies, get_registry
from .routes import ApiError, fetch_router, update_router
from .state import ShopRegistry, load_shop_registry

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Variant Relay...")
    try:
        init_dependencies()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise
    logger.info("Application ready")
    yield
    logger.info("Shutting down...")
    close_dependencies()


# Create app
app = FastAPI(
    title="Variant Relay",
    description="Fetch variants from a representative Shopify store and push edits to other stores",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(fetch_router)
app.include_router(update_router)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as 400 instead of 422."""
    errors = exc.errors()
    missing = [
        str(err["loc"][-1]) for err in errors
        if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"error": message, "details": jsonable_encoder(errors)},
    )


@app.get("/health")
async def health(registry: ShopRegistry = Depends(get_registry)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "representative": registry.representative.name,
        "shops": registry.names,
    }


def run() -> None:
    """Validate configuration, then serve the app with uvicorn."""
    import uvicorn

    try:
        load_shop_registry(settings)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    uvicorn.run(
        "variant_relay.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
