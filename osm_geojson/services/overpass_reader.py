"""
Overpass API response reader.

Resolves an already-fetched Overpass JSON body into the element graph
the feature converter works on. Handles both 'out body' (node id
references) and 'out geom' (inline way geometry) responses.

Resolution order:
1. Nodes
2. Ways, with node references resolved by id
3. Relations, with members resolved by (type, ref)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from osm_geojson.services.osm_elements import Element, Member, Node, Relation, Way

logger = logging.getLogger(__name__)


def _node_from_geometry(ref: int, point: Any) -> Optional[Node]:
    """Synthesise an untagged node from an 'out geom' {lat, lon} entry."""
    if not isinstance(point, dict) or point.get("lat") is None or point.get("lon") is None:
        return None
    return Node(id=ref, lat=point["lat"], lon=point["lon"])


def _resolve_way_nodes(element: dict, nodes: dict[int, Node]) -> tuple[list[Node], int]:
    """
    Resolve a way's node references.

    Returns:
        (resolved nodes, number of references that could not be resolved)
    """
    geometry = element.get("geometry") or []
    resolved = []
    missing = 0
    for i, ref in enumerate(element.get("nodes", [])):
        node = nodes.get(ref)
        if node is None and i < len(geometry):
            node = _node_from_geometry(ref, geometry[i])
        if node is None:
            missing += 1
            continue
        resolved.append(node)
    return resolved, missing


def read_overpass_elements(data: dict[str, Any]) -> list[Element]:
    """
    Parse an Overpass response into Node, Way and Relation objects.

    Args:
        data: JSON response body from the Overpass API

    Returns:
        Elements in payload order. Unknown element types are skipped.

    Raises:
        ValueError: If a node element has no coordinates
    """
    raw_elements = data.get("elements", [])
    nodes: dict[int, Node] = {}
    ways: dict[int, Way] = {}
    relations: dict[int, Relation] = {}

    for element in raw_elements:
        if element.get("type") == "node":
            nodes[element["id"]] = Node(
                id=element["id"],
                lat=element.get("lat"),
                lon=element.get("lon"),
                tags=element.get("tags", {}),
            )

    missing_refs = 0
    for element in raw_elements:
        if element.get("type") == "way":
            way_nodes, missing = _resolve_way_nodes(element, nodes)
            missing_refs += missing
            ways[element["id"]] = Way(
                id=element["id"],
                nodes=way_nodes,
                tags=element.get("tags", {}),
            )

    if missing_refs:
        logger.warning(f"Skipped {missing_refs} way node references missing from the response")

    # Create relations before resolving members so relation members can
    # point at relations that appear later in the payload
    for element in raw_elements:
        if element.get("type") == "relation":
            relations[element["id"]] = Relation(id=element["id"], tags=element.get("tags", {}))

    lookup = {"node": nodes, "way": ways, "relation": relations}
    for element in raw_elements:
        if element.get("type") != "relation":
            continue
        relation = relations[element["id"]]
        for member in element.get("members", []):
            target = lookup.get(member.get("type"), {}).get(member.get("ref"))
            if target is None:
                logger.debug(
                    f"Relation {relation.id}: {member.get('type')} {member.get('ref')} "
                    f"not in response, member skipped"
                )
                continue
            relation.members.append(Member(role=member.get("role", ""), element=target))

    result: list[Element] = []
    for element in raw_elements:
        by_type = lookup.get(element.get("type"))
        if by_type is not None:
            result.append(by_type[element["id"]])

    logger.debug(
        f"Read {len(nodes)} nodes, {len(ways)} ways, {len(relations)} relations "
        f"from Overpass response"
    )
    return result
