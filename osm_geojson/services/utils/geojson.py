"""
GeoJSON geometry and feature construction helpers.

Turns ordered OSM node sequences into GeoJSON geometry dicts and wraps
them into features and feature collections. Positions are [lng, lat].
"""

from __future__ import annotations

from typing import Optional

from osm_geojson.config.osm import MIN_POLYGON_NODES
from osm_geojson.services.osm_elements import Node


def node_to_position(node: Node) -> list[float]:
    """Convert a node to a [lng, lat] coordinate pair."""
    return [node.lon, node.lat]


def make_point(node: Node) -> dict:
    """GeoJSON Point geometry at the node's position."""
    return {"type": "Point", "coordinates": node_to_position(node)}


def closed_ring_to_shape(nodes: list[Node]) -> Optional[dict]:
    """
    Classify an ordered node sequence as a Polygon or a LineString.

    A sequence whose first and last node are the same node (by id) and
    which has at least 4 nodes becomes a single-ring Polygon, closing
    node included. Anything else with 2+ nodes becomes a LineString.

    Args:
        nodes: Ordered nodes of one way or one assembled ring group

    Returns:
        GeoJSON geometry dict, or None when the sequence has fewer than
        2 nodes and cannot form any geometry
    """
    if len(nodes) <= 1:
        return None

    coords = [node_to_position(n) for n in nodes]
    if nodes[0].id == nodes[-1].id and len(nodes) >= MIN_POLYGON_NODES:
        return {"type": "Polygon", "coordinates": [coords]}
    return {"type": "LineString", "coordinates": coords}


def make_multipolygon(polygons: list[dict]) -> dict:
    """
    Construct a MultiPolygon from Polygon geometries.

    Each polygon keeps its own rings; no ring is nested into another
    polygon as a hole.
    """
    return {"type": "MultiPolygon", "coordinates": [p["coordinates"] for p in polygons]}


def make_multilinestring(lines: list[dict]) -> dict:
    """Construct a MultiLineString from LineString geometries."""
    return {"type": "MultiLineString", "coordinates": [line["coordinates"] for line in lines]}


def make_feature(geometry: dict, properties: dict) -> dict:
    return {"type": "Feature", "geometry": geometry, "properties": properties}


def make_feature_collection(features: list[dict]) -> dict:
    return {"type": "FeatureCollection", "features": features}
