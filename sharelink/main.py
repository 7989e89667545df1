"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- API routes
- Middleware (logging, CORS)
- Static assets (share image)
- Link store lifecycle (opened on startup, closed on shutdown)

The service generates and serves short links for social media sharing:
POST / with {title, description, redirectUrl} returns {"id": ...};
GET /{id} returns an HTML page with meta tags that redirects to redirectUrl.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from sharelink.api import endpoints
from sharelink.core.exceptions import ServiceUnavailableError
from sharelink.core.setting import BASE_DIR, settings
from sharelink.core.store_manager import close_store, open_store
from sharelink.middleware.logging import add_logging_middleware

app = FastAPI(
    title="Share Link Service",
    description="Short links with social media previews",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

add_logging_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceUnavailableError)
async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


# Health endpoints defined before router to match before catch-all route
@app.get("/", tags=["Health"], response_class=PlainTextResponse)
async def root():
    """Root endpoint; answers with the service banner."""
    return settings.SERVICE_BANNER


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        Health status of the service
    """
    return {"status": "healthy"}


app.include_router(endpoints.router, tags=["Short Links"])

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


@app.on_event("startup")
async def startup_event():
    """Open the link store before the first request."""
    await open_store(app, settings)


@app.on_event("shutdown")
async def shutdown_event():
    """Close the link store."""
    await close_store(app)
