"""
Shared test fixtures for the converter test suite.

Provides synthetic OSM elements (nodes, ways, relations) and Overpass
JSON bodies so that unit tests run without network access.
"""

from __future__ import annotations

import pytest

from osm_geojson.services.osm_elements import Member, Node, Relation, Way


# ---------------------------------------------------------------------------
# Node fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def square_nodes():
    """Four corners of a small square near Jerusalem: A, B, C, D."""
    return [
        Node(id=1, lat=31.770, lon=35.210),
        Node(id=2, lat=31.770, lon=35.220),
        Node(id=3, lat=31.780, lon=35.220),
        Node(id=4, lat=31.780, lon=35.210),
    ]


@pytest.fixture
def triangle_nodes():
    """Three vertices of a triangle inside the square: E, F, G."""
    return [
        Node(id=11, lat=31.772, lon=35.212),
        Node(id=12, lat=31.772, lon=35.218),
        Node(id=13, lat=31.778, lon=35.215),
    ]


@pytest.fixture
def trail_nodes():
    """Five nodes along an open hiking trail: P1..P5."""
    return [
        Node(id=21, lat=32.700, lon=35.300),
        Node(id=22, lat=32.705, lon=35.305),
        Node(id=23, lat=32.710, lon=35.310),
        Node(id=24, lat=32.715, lon=35.315),
        Node(id=25, lat=32.720, lon=35.320),
    ]


# ---------------------------------------------------------------------------
# Way and relation fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def square_way(square_nodes):
    """Closed square way A,B,C,D,A tagged as a building."""
    a, b, c, d = square_nodes
    return Way(id=100, nodes=[a, b, c, d, a], tags={"building": "yes"})


@pytest.fixture
def triangle_way(triangle_nodes):
    """Untagged closed triangle way E,F,G,E."""
    e, f, g = triangle_nodes
    return Way(id=101, nodes=[e, f, g, e])


@pytest.fixture
def multipolygon_relation(square_nodes, triangle_way):
    """Multipolygon with an untagged outer square and an inner triangle."""
    a, b, c, d = square_nodes
    outer = Way(id=102, nodes=[a, b, c, d, a])
    return Relation(
        id=500,
        members=[Member(role="outer", element=outer), Member(role="inner", element=triangle_way)],
        tags={"type": "multipolygon"},
    )


@pytest.fixture
def trail_relation(trail_nodes):
    """Hiking route relation whose trail is split into two member ways."""
    p1, p2, p3, p4, p5 = trail_nodes
    return Relation(
        id=600,
        members=[
            Member(role="", element=Way(id=201, nodes=[p3, p4, p5])),
            Member(role="", element=Way(id=200, nodes=[p1, p2, p3])),
        ],
        tags={"type": "route", "route": "hiking", "name": "Israel National Trail"},
    )


# ---------------------------------------------------------------------------
# Overpass JSON fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_overpass_response():
    """Overpass 'out body' response: a spring, a building and a park multipolygon."""
    return {
        "version": 0.6,
        "generator": "Overpass API",
        "elements": [
            {"type": "node", "id": 1, "lat": 31.770, "lon": 35.210},
            {"type": "node", "id": 2, "lat": 31.770, "lon": 35.220},
            {"type": "node", "id": 3, "lat": 31.780, "lon": 35.220},
            {"type": "node", "id": 4, "lat": 31.780, "lon": 35.210},
            {
                "type": "node", "id": 5, "lat": 31.775, "lon": 35.215,
                "tags": {"natural": "spring", "name": "Ein Test"},
            },
            {
                "type": "way", "id": 100, "nodes": [1, 2, 3],
            },
            {
                "type": "way", "id": 101, "nodes": [3, 4, 1],
            },
            {
                "type": "way", "id": 102, "nodes": [1, 2, 3, 4, 1],
                "tags": {"building": "yes"},
            },
            {
                "type": "relation", "id": 500,
                "members": [
                    {"type": "way", "ref": 100, "role": "outer"},
                    {"type": "way", "ref": 101, "role": "outer"},
                ],
                "tags": {"type": "multipolygon", "leisure": "park"},
            },
        ],
    }
