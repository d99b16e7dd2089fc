"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ohshub import __version__
from ohshub.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from ohshub.api.routes import metrics, references, themes
from ohshub.core.config import get_settings

settings = get_settings()
docs_enabled = settings.docs_enabled

app = FastAPI(
    title="OHSHub API",
    description="Workplace hazard wizards with rule-based risk assessment",
    version=__version__,
    docs_url="/api/docs" if docs_enabled else None,
    redoc_url="/api/redoc" if docs_enabled else None,
    openapi_url="/api/openapi.json" if docs_enabled else None,
)

# add_middleware wraps the existing stack, so the last one added runs first:
# request logging, then security headers, then CORS.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(themes.router, prefix="/api/themes", tags=["themes"])
app.include_router(references.router, prefix="/api/references", tags=["references"])
app.include_router(metrics.router, prefix="/api", tags=["metrics"])
