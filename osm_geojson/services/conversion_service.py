"""
Batch conversion service.

Converts a batch of OSM elements (or a raw Overpass response) into a
GeoJSON FeatureCollection and logs what was produced:
- Features per geometry type
- Elements dropped (untagged, degenerate, no usable geometry)
- Polygonal features shapely reports as invalid (reported, not repaired)
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from shapely.errors import GEOSException
from shapely.geometry import shape

from osm_geojson.config.osm import OSM_ID_KEY
from osm_geojson.services.feature_converter import convert
from osm_geojson.services.osm_elements import Element
from osm_geojson.services.overpass_reader import read_overpass_elements
from osm_geojson.services.utils.geojson import make_feature_collection
from osm_geojson.services.utils.parallel import parallel_map

logger = logging.getLogger(__name__)

_POLYGONAL_TYPES = ("Polygon", "MultiPolygon")


def _is_valid_geometry(geom: dict) -> bool:
    """
    Check a polygonal GeoJSON geometry with shapely.

    MultiPolygon entries are checked one by one: inner rings are stored
    as separate entries overlapping their outer ring, which shapely would
    reject for the MultiPolygon as a whole.
    """
    if geom["type"] == "MultiPolygon":
        return all(
            _is_valid_geometry({"type": "Polygon", "coordinates": c}) for c in geom["coordinates"]
        )
    try:
        return shape(geom).is_valid
    except (GEOSException, ValueError) as e:
        logger.debug(f"Shapely could not build {geom.get('type')}: {e}")
        return False


def summarize_features(features: list[dict], input_count: int) -> dict:
    """
    Count converted features by geometry type.

    Args:
        features: Converted GeoJSON features
        input_count: Number of elements that were converted

    Returns:
        Dict with total, dropped, by_type and invalid counts
    """
    by_type: dict[str, int] = {}
    invalid = []
    for feature in features:
        geom = feature["geometry"]
        by_type[geom["type"]] = by_type.get(geom["type"], 0) + 1
        if geom["type"] in _POLYGONAL_TYPES and not _is_valid_geometry(geom):
            invalid.append(feature["properties"].get(OSM_ID_KEY))

    if invalid:
        logger.warning(
            f"{len(invalid)} polygonal features are not valid geometries "
            f"(osm ids: {invalid[:10]}{'...' if len(invalid) > 10 else ''})"
        )

    return {
        "total": len(features),
        "dropped": input_count - len(features),
        "by_type": by_type,
        "invalid": len(invalid),
    }


def convert_elements(elements: Sequence[Element], workers: Optional[int] = None) -> dict:
    """
    Convert elements to a GeoJSON FeatureCollection.

    Args:
        elements: Resolved OSM elements
        workers: Worker threads (default: CONVERT_WORKERS)

    Returns:
        FeatureCollection of every non-dropped feature, in input order
    """
    converted = parallel_map(convert, list(elements), workers=workers)
    features = [f for f in converted if f is not None]

    stats = summarize_features(features, len(elements))
    logger.info(
        f"Converted {len(elements)} elements into {stats['total']} features "
        f"({stats['dropped']} dropped). By type: {stats['by_type']}"
    )

    return make_feature_collection(features)


def convert_overpass(data: dict[str, Any], workers: Optional[int] = None) -> dict:
    """Read an Overpass JSON response and convert all of its elements."""
    return convert_elements(read_overpass_elements(data), workers=workers)
