"""
OSM to GeoJSON Converter - Web Application

FastAPI backend that converts Overpass API responses (nodes, ways and
relations) into GeoJSON FeatureCollections, assembling relation member
ways into rings and line chains.
"""

import asyncio
import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from osm_geojson import __version__
from osm_geojson.services.conversion_service import convert_overpass
from osm_geojson.services.validators import validate_elements

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("main")

# ===========================================================================
# FastAPI app
# ===========================================================================

app = FastAPI(
    title="OSM to GeoJSON Converter",
    description="Convert OpenStreetMap elements into GeoJSON features",
    version=__version__,
)

# ===========================================================================
# Middleware
# ===========================================================================

# Configure allowed origins from environment or use defaults
CORS_ORIGINS = os.environ.get(
    "CORS_ORIGINS",
    "http://localhost:8080,http://127.0.0.1:8080",
).split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ===========================================================================
# Request/Response models
# ===========================================================================


class OverpassPayload(BaseModel):
    # Overpass response body; "version", "generator", "osm3s" are ignored
    elements: list = []


# ===========================================================================
# Routes - API
# ===========================================================================


@app.post("/api/convert")
async def convert_elements(request_body: OverpassPayload):
    """
    Convert an Overpass JSON response into a GeoJSON FeatureCollection.
    Untagged elements and elements without usable geometry are left out.
    """
    try:
        elements = validate_elements(request_body.elements)
        result = await asyncio.to_thread(convert_overpass, {"elements": elements})
        logger.info(
            f"Converted request: {len(elements)} elements -> "
            f"{len(result['features'])} features"
        )
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Conversion failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Conversion failed: {str(e)}"},
        )


# ===========================================================================
# Health check
# ===========================================================================


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "OSM to GeoJSON Converter",
        "version": __version__,
    }
