"""OSM tag, role and geometry conventions used by the feature converter."""

# Synthetic property holding the source element's OSM id
OSM_ID_KEY = "osm_id"

# Relation "type" tag value that switches on outer/inner ring assembly
MULTIPOLYGON_TYPE = "multipolygon"

# Member role compared by exact match; every other role counts as inner
OUTER_ROLE = "outer"

# 3 distinct vertices + the repeated closing vertex
MIN_POLYGON_NODES = 4

# Overpass element "type" values the reader understands
SUPPORTED_ELEMENT_TYPES = ("node", "way", "relation")
