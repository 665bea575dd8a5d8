"""
OSM element model.

Data classes for the element graph the feature converter works on:
nodes, ways (ordered node lists) and relations (ordered role/element
members). Ways and relations hold the referenced objects themselves,
not ids, so a converted element carries everything it needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Node:
    """Represents an OSM node (point). Identity is the OSM node id."""

    id: int
    lat: float
    lon: float
    tags: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if self.lat is None or self.lon is None:
            raise ValueError(f"Node {self.id} has no coordinates")


@dataclass
class Way:
    """Represents an OSM way: an ordered node sequence plus tags."""

    id: int
    nodes: list[Node]
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class Member:
    """A relation member: role string plus the referenced element."""

    role: str
    element: Element


@dataclass
class Relation:
    """Represents an OSM relation with ordered members."""

    id: int
    members: list[Member] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    def member_ways(self, predicate=None) -> list[Way]:
        """Way members in member order, optionally filtered by role predicate."""
        return [
            m.element for m in self.members
            if isinstance(m.element, Way) and (predicate is None or predicate(m.role))
        ]


Element = Union[Node, Way, Relation]
