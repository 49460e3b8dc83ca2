"""Earthquake Map API - FastAPI service.

Serves the rendered earthquake map as an HTML page. Each request fetches
the current feeds and renders a fresh map.

Run locally with: uvicorn quakemap.api:app
"""

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from quakemap import __version__
from quakemap.loader import build_map
from quakemap.shell.config_loader import load_config


logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Earthquake Map",
    description="Interactive map of the weekly USGS earthquake feed and tectonic plates",
    version=__version__,
)


class HealthResponse(BaseModel):
    status: str
    version: str


@app.get("/", response_class=HTMLResponse)
async def get_map() -> HTMLResponse:
    """Render the map page.

    Layers whose source failed are simply missing from the page; only an
    unexpected rendering failure returns an error.
    """
    try:
        config = load_config()
        session, result = await build_map(config)
        html = session.render_html()
    except Exception:
        logger.exception("Failed to render earthquake map")
        raise HTTPException(status_code=500, detail="Failed to render map") from None

    logger.info("Served map: %s", result.summary)

    return HTMLResponse(content=html)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)
