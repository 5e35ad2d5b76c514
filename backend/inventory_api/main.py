import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from inventory_api.core.config import get_settings
from inventory_api.api.error_handlers import register_error_handlers
from inventory_api.api.routes import products

# Get settings
settings = get_settings()

ENDPOINTS = {
    "GET /products": "Get all products",
    "GET /products/instock": "Get all in-stock products",
    "GET /products/:id": "Get a specific product by ID",
    "POST /products": "Create a new product",
    "PUT /products/:id": "Update a product",
    "DELETE /products/:id": "Delete a product",
}


def configure_logging() -> None:
    """Root logger with timestamped console output and, when log_dir is set,
    a rotating file handler."""
    log_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        log_dir = os.path.normpath(settings.log_dir)
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "app.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.app_name} is running on http://{settings.host}:{settings.port}")
    logger.info(f"Products file: {settings.products_file}")
    for route, description in ENDPOINTS.items():
        logger.info(f"  {route:<24} - {description}")
    yield
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(products.router, prefix="/products", tags=["products"])

register_error_handlers(app)


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.version,
        "endpoints": ENDPOINTS,
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


class StaticAssets(StaticFiles):
    """Static files that answer 404, not 405, to non-GET requests so unknown
    paths share the "endpoint does not exist" response."""

    async def get_response(self, path: str, scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await super().get_response(path, scope)


def mount_static(app: FastAPI, directory: str) -> None:
    # Mounted after the API routes so those take precedence
    app.mount("/", StaticAssets(directory=directory, html=True), name="static")


if settings.static_dir and os.path.isdir(settings.static_dir):
    mount_static(app, settings.static_dir)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "inventory_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
