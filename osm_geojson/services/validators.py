"""
Input validation for conversion requests.

Checks the structure of an Overpass JSON body before it reaches the
reader, and enforces the batch size limits that keep ring assembly
bounded.
"""

import math

from fastapi import HTTPException

from osm_geojson.config.limits import MAX_ELEMENTS_PER_REQUEST, MAX_RELATION_MEMBERS
from osm_geojson.config.osm import SUPPORTED_ELEMENT_TYPES


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate_node_coordinates(element: dict, position: int) -> None:
    """
    Validate a node element's lat/lon.

    Raises:
        HTTPException: If coordinates are missing or out of range
    """
    lat, lon = element.get("lat"), element.get("lon")
    if not _is_number(lat) or not _is_number(lon):
        raise HTTPException(
            status_code=400,
            detail=f"Node at position {position} has missing or invalid coordinates",
        )

    if not (-180 <= lon <= 180):
        raise HTTPException(
            status_code=400,
            detail=f"Longitude out of range at position {position}: {lon}",
        )

    if not (-90 <= lat <= 90):
        raise HTTPException(
            status_code=400,
            detail=f"Latitude out of range at position {position}: {lat}",
        )


def validate_elements(elements: list) -> list[dict]:
    """
    Validate an Overpass "elements" array.

    Args:
        elements: Raw element dicts from the request body

    Returns:
        The validated elements

    Raises:
        HTTPException: 400 for malformed elements, 413 when a size limit
            is exceeded
    """
    if len(elements) > MAX_ELEMENTS_PER_REQUEST:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Too many elements ({len(elements)}). "
                f"Maximum allowed is {MAX_ELEMENTS_PER_REQUEST}."
            ),
        )

    for i, element in enumerate(elements):
        if not isinstance(element, dict):
            raise HTTPException(status_code=400, detail=f"Element at position {i} is not an object")

        element_type = element.get("type")
        if element_type not in SUPPORTED_ELEMENT_TYPES:
            raise HTTPException(
                status_code=400,
                detail=(
                    f"Invalid element type at position {i}: {element_type!r}. "
                    f"Allowed: {', '.join(SUPPORTED_ELEMENT_TYPES)}"
                ),
            )

        element_id = element.get("id")
        if not _is_int(element_id):
            raise HTTPException(status_code=400, detail=f"Element at position {i} has no integer id")

        tags = element.get("tags", {})
        if not isinstance(tags, dict):
            raise HTTPException(status_code=400, detail=f"Element at position {i} has invalid tags")

        if element_type == "node":
            validate_node_coordinates(element, i)

        elif element_type == "way":
            node_refs = element.get("nodes", [])
            if not isinstance(node_refs, list) or not all(_is_int(ref) for ref in node_refs):
                raise HTTPException(
                    status_code=400,
                    detail=f"Way at position {i} has an invalid node list",
                )
            geometry = element.get("geometry")
            if geometry is not None and not isinstance(geometry, list):
                raise HTTPException(
                    status_code=400,
                    detail=f"Way at position {i} has invalid geometry",
                )

        else:
            members = element.get("members", [])
            if not isinstance(members, list) or not all(isinstance(m, dict) for m in members):
                raise HTTPException(
                    status_code=400,
                    detail=f"Relation at position {i} has an invalid member list",
                )
            for member in members:
                if not _is_int(member.get("ref")) or not isinstance(member.get("type"), str):
                    raise HTTPException(
                        status_code=400,
                        detail=f"Relation at position {i} has a member without a valid type and ref",
                    )
            if len(members) > MAX_RELATION_MEMBERS:
                raise HTTPException(
                    status_code=413,
                    detail=(
                        f"Relation {element_id} has too many members ({len(members)}). "
                        f"Maximum allowed is {MAX_RELATION_MEMBERS}."
                    ),
                )

    return elements
