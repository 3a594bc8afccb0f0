"""Kinds of celestial nodes and their allowed children."""

from __future__ import annotations

from enum import Enum


class NodeType(Enum):
    """The kind of a node; its value is the serialized name."""

    STAR = "Star"
    PLANET = "Planet"
    SATELLITE = "Satellite"
    ASTEROID = "Asteroid"

    def display_name(self) -> str:
        """Human readable name of the node kind."""
        return self.value

    def valid_children(self) -> list[NodeType]:
        """Node kinds that may be created as children of this kind."""
        return list(_VALID_CHILDREN[self])


_VALID_CHILDREN: dict[NodeType, tuple[NodeType, ...]] = {
    NodeType.STAR: (NodeType.PLANET,),
    NodeType.PLANET: (NodeType.SATELLITE,),
    NodeType.SATELLITE: (NodeType.ASTEROID,),
    NodeType.ASTEROID: (),
}