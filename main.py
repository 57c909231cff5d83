import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from shortlinks_app.config import settings
from shortlinks_app.logging_config import setup_logging
from shortlinks_app.database.connection import engine, Base
from shortlinks_app.api.v1 import links, redirect
from shortlinks_app.schemas.link import ErrorResponse
from shortlinks_app.services.errors import LinkServiceError

# Import models to ensure they're registered with Base
from shortlinks_app.models import Link

setup_logging(level=settings.log_level, log_file=settings.log_file)
logger = logging.getLogger("shortlinks_app.main")

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener service built with FastAPI",
    debug=settings.debug
)


@app.exception_handler(LinkServiceError)
async def link_service_error_handler(request: Request, exc: LinkServiceError):
    """Render service errors with their stable code and message"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(code=exc.code, detail=exc.message, short_code=exc.short_code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(links.router, prefix="/api/v1")
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
