"""FastAPI application."""

from fastapi import FastAPI

from .. import __version__
from .routers import monitoring

app = FastAPI(title="Atelier", version=__version__)
app.include_router(monitoring.router, prefix="/api")


@app.get("/health")
def health() -> dict:
    """Service health check."""
    return {"status": "healthy"}
