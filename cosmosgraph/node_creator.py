"""The dialog state for creating root, child and evolution nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from cosmosgraph.graph import Graph
from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D

Point = Tuple[float, float]

EVOLUTION_OFFSET = 50.0


@dataclass(frozen=True)
class CreateRoot:
    """Request to create a free-standing star."""

    title: str
    description: str
    position: Position2D


@dataclass(frozen=True)
class CreateChild:
    """Request to create a child of an existing node."""

    parent_id: str
    title: str
    description: str
    node_type: NodeType
    position: Position2D


@dataclass(frozen=True)
class CreateEvolution:
    """Request to create an evolution layer of an existing node."""

    base_id: str
    title: str
    description: str
    position: Position2D


CreationAction = Union[CreateRoot, CreateChild, CreateEvolution]


@dataclass
class NodeCreator:
    """Collects a title and description, then yields one creation request."""

    graph: Graph
    show_creator: bool = False
    new_node_title: str = ""
    description: str = ""
    hover_pos: Optional[Point] = None
    source_node_id: Optional[str] = field(default=None)

    def open(self, position: Optional[Point], source_node_id: Optional[str] = None) -> None:
        """Show the creator at ``position``, optionally for a source node."""
        self.show_creator = True
        self.hover_pos = position
        self.source_node_id = source_node_id

    def available_child_types(self) -> list[NodeType]:
        """Kinds of child that may be created under the source node."""
        if self.source_node_id is None:
            return []
        parent = self.graph.get_node(self.source_node_id)
        if parent is None:
            return []
        return parent.node_type.valid_children()

    def _position(self, dy: float = 0.0) -> Position2D:
        if self.hover_pos is None:
            raise ValueError("the creator has no position to place the node at")
        x, y = self.hover_pos
        return Position2D(x, y + dy)

    def create_root(self) -> Optional[CreateRoot]:
        """Request a new star; None while the creator is closed."""
        if not self.show_creator:
            return None
        if self.source_node_id is not None:
            raise ValueError("a root node cannot be created from a source node")
        action = CreateRoot(self.new_node_title, self.description, self._position())
        self.reset()
        return action

    def create_child(self, node_type: NodeType) -> Optional[CreateChild]:
        """Request a child of the source node; None while the creator is closed."""
        if not self.show_creator:
            return None
        if self.source_node_id is None:
            raise ValueError("a child node needs a source node")
        if node_type not in self.available_child_types():
            raise ValueError(f"{node_type.display_name()} is not a valid child here")
        action = CreateChild(
            self.source_node_id,
            self.new_node_title,
            self.description,
            node_type,
            self._position(),
        )
        self.reset()
        return action

    def create_evolution(self) -> Optional[CreateEvolution]:
        """Request an evolution layer below the position; None while closed."""
        if not self.show_creator:
            return None
        if self.source_node_id is None:
            raise ValueError("an evolution layer needs a source node")
        action = CreateEvolution(
            self.source_node_id,
            self.new_node_title,
            self.description,
            self._position(EVOLUTION_OFFSET),
        )
        self.reset()
        return action

    def reset(self) -> None:
        """Close the creator and clear everything entered."""
        self.show_creator = False
        self.new_node_title = ""
        self.description = ""
        self.hover_pos = None
        self.source_node_id = None