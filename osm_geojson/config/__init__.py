"""
Application configuration package.

Re-exports all configuration values from sub-modules so that
``from osm_geojson.config import X`` works for every setting.

Configuration is split into focused modules:
- osm: OSM_ID_KEY, MULTIPOLYGON_TYPE, OUTER_ROLE, MIN_POLYGON_NODES, SUPPORTED_ELEMENT_TYPES
- limits: MAX_ELEMENTS_PER_REQUEST, MAX_RELATION_MEMBERS, CONVERT_WORKERS, PARALLEL_MIN_BATCH
"""

# OSM conventions
from osm_geojson.config.osm import (
    OSM_ID_KEY, MULTIPOLYGON_TYPE, OUTER_ROLE,
    MIN_POLYGON_NODES, SUPPORTED_ELEMENT_TYPES,
)

# Batch / request limits
from osm_geojson.config.limits import (
    MAX_ELEMENTS_PER_REQUEST, MAX_RELATION_MEMBERS,
    CONVERT_WORKERS, PARALLEL_MIN_BATCH,
)
