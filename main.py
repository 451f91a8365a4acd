from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from shortlink_app.config import settings
from shortlink_app.database.connection import engine, Base
from shortlink_app.exceptions import LinkServiceError
from shortlink_app.logging_config import setup_logging, get_logger
from shortlink_app.api.v1 import links, redirect

# Import models to ensure they're registered with Base
from shortlink_app.models import Link, LinkStatistic

setup_logging()
logger = get_logger("shortlink")

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener with click statistics built with FastAPI",
    debug=settings.debug
)


@app.exception_handler(LinkServiceError)
async def link_service_error_handler(request: Request, exc: LinkServiceError):
    """Link errors go out as plain text with the status they carry"""
    return PlainTextResponse(str(exc), status_code=exc.status_code)


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
# redirect's catch-all "/{link_id}" goes last
app.include_router(links.router)
app.include_router(redirect.router)

logger.info("%s %s ready (%s)", settings.app_name, settings.app_version, settings.environment)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
