"""
OSM element to GeoJSON feature conversion.

Converts a single node, way or relation into a tagged GeoJSON Feature:
- Nodes -> Point
- Ways -> Polygon when closed with 4+ nodes, LineString otherwise
- Multipolygon relations -> MultiPolygon of assembled outer and inner rings
- Other relations -> MultiLineString of assembled open chains

Untagged elements only exist as geometry for other elements and never
become features. Malformed topology is dropped (None), never raised.
"""

from __future__ import annotations

from typing import Optional

from osm_geojson.config.osm import MULTIPOLYGON_TYPE, OSM_ID_KEY, OUTER_ROLE
from osm_geojson.services.osm_elements import Element, Node, Relation, Way
from osm_geojson.services.ring_assembler import assemble_rings
from osm_geojson.services.utils.geojson import (
    closed_ring_to_shape,
    make_feature,
    make_multilinestring,
    make_multipolygon,
    make_point,
)


def convert_tags(tags: dict, osm_id: int) -> dict:
    """Copy the element's tags and add the synthetic osm_id property."""
    properties = dict(tags)
    properties[OSM_ID_KEY] = osm_id
    return properties


def convert(element: Element) -> Optional[dict]:
    """
    Convert an OSM element to a GeoJSON Feature.

    Args:
        element: Node, Way or Relation with its referenced elements resolved

    Returns:
        GeoJSON Feature dict, or None when the element is dropped
    """
    if not element.tags:
        return None

    if isinstance(element, Node):
        return make_feature(make_point(element), convert_tags(element.tags, element.id))

    if isinstance(element, Way):
        # can't build a geometry from a single node
        geometry = closed_ring_to_shape(element.nodes)
        if geometry is None:
            return None
        return make_feature(geometry, convert_tags(element.tags, element.id))

    if isinstance(element, Relation):
        return _convert_relation(element)

    return None


def _ways_to_shapes(ways: list[Way], geom_type: str) -> list[dict]:
    """Assemble ways into rings/chains and keep shapes of one geometry type."""
    shapes = [closed_ring_to_shape(nodes) for nodes in assemble_rings(ways)]
    return [s for s in shapes if s is not None and s["type"] == geom_type]


def _convert_relation(relation: Relation) -> Optional[dict]:
    properties = convert_tags(relation.tags, relation.id)

    if relation.tags.get("type") == MULTIPOLYGON_TYPE:
        outer_ways = relation.member_ways(lambda role: role == OUTER_ROLE)
        inner_ways = relation.member_ways(lambda role: role != OUTER_ROLE)
        polygons = _ways_to_shapes(outer_ways, "Polygon") + _ways_to_shapes(inner_ways, "Polygon")
        # Emitted even with no closed rings at all
        return make_feature(make_multipolygon(polygons), properties)

    # Rings that happen to close are not part of a line relation's geometry
    lines = _ways_to_shapes(relation.member_ways(), "LineString")
    if not lines:
        return None
    return make_feature(make_multilinestring(lines), properties)
