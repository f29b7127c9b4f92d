"""
AdReady Analyzer - FastAPI Application Entry Point
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from adready.config import Settings, settings
from adready.api.endpoints import analyze, health
from adready.logger import logger


def create_app(config: Settings = settings) -> FastAPI:
    """Build the API application from explicit settings."""
    app = FastAPI(
        title=config.APP_NAME,
        description="Checks whether a website meets the technical prerequisites for AdSense approval",
        version=config.VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # CORS: allow-listed origins plus trusted deployment subdomains
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_origin_regex=config.CORS_ORIGIN_REGEX or None,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_origin(request: Request, call_next):
        """Log the request origin for CORS debugging."""
        origin = request.headers.get("origin")
        if origin:
            logger.debug(f"Request Origin: {origin}")
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies as 400 instead of 422."""
        return analyze.error_response(400, "Invalid request body.", "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ))

    # Include routers
    app.include_router(health.router)
    app.include_router(analyze.router, prefix="/api")

    @app.on_event("startup")
    async def startup():
        """Log configuration on startup."""
        logger.info(f"Starting {config.APP_NAME}...")
        logger.info(f"Allowed origins: {', '.join(config.CORS_ORIGINS)} (+ {config.CORS_ORIGIN_REGEX})")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "app": config.APP_NAME,
            "version": config.VERSION,
            "docs": "/docs"
        }

    return app


app = create_app()
