"""
OSM to GeoJSON Converter

Converts OpenStreetMap nodes, ways and relations into GeoJSON features,
stitching relation member ways into rings and line chains.
"""

__version__ = "1.0.0"

from osm_geojson.services.osm_elements import Node, Way, Member, Relation
from osm_geojson.services.feature_converter import convert

__all__ = ["Node", "Way", "Member", "Relation", "convert"]
