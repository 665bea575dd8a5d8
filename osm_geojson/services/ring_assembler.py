"""
Ring assembly for OSM relation members.

Relation members arrive as disjoint way fragments in arbitrary order.
This module stitches fragments that share endpoint nodes into node
chains, producing closed rings where the fragments close and open
chains where they don't.

Matching rules:
1. Fragments are consumed in input order, orientation preserved
   (fragments are never reversed)
2. A fragment joins the earliest-created group whose first node is the
   fragment's last node, or whose last node is the fragment's first node
3. The shared endpoint node is stored once
4. A fragment matching nothing starts a new group
5. When a fragment bridges two open groups, the second group is folded
   into the first, so one loop always ends up as one ring

First-fit is deliberate: with branching topologies the chains depend on
input order. A set of consistently oriented fragments forming one
closed loop always yields one ring, whatever the order.

Nodes are matched by OSM id only. Two different nodes at the same
coordinates are never joined.
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Optional

from osm_geojson.services.osm_elements import Node, Way


class _RingGroup:
    """A chain of nodes under construction. Owned by one assembly pass."""

    __slots__ = ("order", "nodes")

    def __init__(self, order: int, nodes: list[Node]):
        self.order = order
        self.nodes = nodes

    @property
    def first_id(self) -> int:
        return self.nodes[0].id

    @property
    def last_id(self) -> int:
        return self.nodes[-1].id

    @property
    def is_closed(self) -> bool:
        return self.first_id == self.last_id


class _EndpointIndex:
    """
    Endpoint node id → owning groups.

    Replaces a linear scan over all groups. Lookups resolve to the
    earliest-created candidate so the outcome is the same as scanning
    groups in creation order and taking the first match.
    """

    def __init__(self):
        self._by_first: dict[int, list[_RingGroup]] = defaultdict(list)
        self._by_last: dict[int, list[_RingGroup]] = defaultdict(list)

    def add(self, group: _RingGroup) -> None:
        self._by_first[group.first_id].append(group)
        self._by_last[group.last_id].append(group)

    def remove(self, group: _RingGroup) -> None:
        self._by_first[group.first_id].remove(group)
        self._by_last[group.last_id].remove(group)

    def find(self, first_id: int, last_id: int) -> Optional[_RingGroup]:
        """First group G with G.first == last_id or G.last == first_id."""
        candidates = self._by_first.get(last_id, []) + self._by_last.get(first_id, [])
        return _earliest(candidates)

    def find_successor(self, group: _RingGroup) -> Optional[_RingGroup]:
        """First other open group starting where ``group`` ends."""
        candidates = [
            g for g in self._by_first.get(group.last_id, [])
            if g is not group and not g.is_closed
        ]
        return _earliest(candidates)

    def find_predecessor(self, group: _RingGroup) -> Optional[_RingGroup]:
        """First other open group ending where ``group`` starts."""
        candidates = [
            g for g in self._by_last.get(group.first_id, [])
            if g is not group and not g.is_closed
        ]
        return _earliest(candidates)


def _earliest(candidates: list[_RingGroup]) -> Optional[_RingGroup]:
    if not candidates:
        return None
    return min(candidates, key=lambda g: g.order)


def _fold_neighbours(group: _RingGroup, groups: list[_RingGroup], index: _EndpointIndex) -> None:
    """Absorb open groups that now touch ``group``'s open ends."""
    while not group.is_closed:
        successor = index.find_successor(group)
        predecessor = None if successor else index.find_predecessor(group)
        other = successor or predecessor
        if other is None:
            return

        index.remove(other)
        index.remove(group)
        groups.remove(other)
        if successor:
            group.nodes.extend(other.nodes[1:])
        else:
            group.nodes[:0] = other.nodes[:-1]
        index.add(group)


def assemble_rings(ways: Iterable[Way]) -> list[list[Node]]:
    """
    Merge way fragments sharing endpoints into node chains.

    Args:
        ways: Way fragments, e.g. all "outer" members of a multipolygon

    Returns:
        One ordered node list per group, in group creation order. A
        closed ring ends with its own first node.
    """
    queue = deque(way.nodes for way in ways if way.nodes)
    groups: list[_RingGroup] = []
    index = _EndpointIndex()
    created = 0

    while queue:
        nodes = list(queue.popleft())
        first_id, last_id = nodes[0].id, nodes[-1].id

        group = index.find(first_id, last_id)
        if group is None:
            group = _RingGroup(created, nodes)
            created += 1
            groups.append(group)
            index.add(group)
            continue

        index.remove(group)
        if first_id == group.last_id:
            # Extends forward. When the fragment also ends on the group's
            # first node this closes the ring, and the appended tail ends
            # with that node as the closing repeat.
            group.nodes.extend(nodes[1:])
        else:
            # Extends backward: fragment's last node is the group's first
            group.nodes[:0] = nodes[:-1]
        index.add(group)

        _fold_neighbours(group, groups, index)

    return [group.nodes for group in groups]
