"""
Fish Parque - Backend API
Storefront ordering service: catalog, customer accounts, orders
"""
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api import admin, auth, orders, products
from storefront.core.config import Settings
from storefront.core.context import build_context
from storefront.core.exceptions import (
    InvalidCredentialsError,
    InvalidOrderError,
    StorefrontError,
    ValidationError,
)
from storefront.core.logging_config import configure_logging
from storefront.domain.catalog import Catalog

logger = logging.getLogger(__name__)

# Body that could not be parsed at all, reported with the endpoint's own message
REQUEST_VALIDATION_ERRORS = {
    "/api/register": ValidationError,
    "/api/login": InvalidCredentialsError,
    "/api/order": InvalidOrderError,
}


def create_app(settings: Settings = None, catalog: Catalog = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Application settings (read from the environment if omitted)
        catalog: Product catalog (default catalog if omitted)
    """
    if settings is None:
        load_dotenv()
        settings = Settings()

    configure_logging(settings)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
    )
    app.state.context = build_context(settings, catalog)

    allowed_origins = settings.get_allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        """Render domain failures as result payloads instead of errors"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Render malformed request bodies as result payloads"""
        error_type = REQUEST_VALIDATION_ERRORS.get(request.url.path, ValidationError)
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return await storefront_error_handler(request, error_type())

    # Include API routers
    app.include_router(auth.router, prefix="/api", tags=["Auth"])
    app.include_router(products.router, prefix="/api", tags=["Products"])
    app.include_router(orders.router, prefix="/api", tags=["Orders"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "message": "Fish Parque API is running"}

    logger.info(f"🐟 Fish Parque API ready (data dir: {settings.DATA_DIR})")
    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn"""
    import uvicorn

    load_dotenv()
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
