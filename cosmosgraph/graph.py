"""The graph of nodes and relations."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional

from cosmosgraph.node import Node
from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D
from cosmosgraph.relation import Relation, RelationType

_CHILD_OFFSET = 100.0
_EVOLUTION_OFFSET = 50.0


class Graph:
    """Nodes keyed by id, together with the relations between them."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._relations: list[Relation] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._relations == other._relations

    def __len__(self) -> int:
        return len(self._nodes)

    def create_node(self, title: str, node_type: NodeType, position: Position2D) -> str:
        """Add a new node and return its id."""
        node = Node(title, node_type, position)
        self._nodes[node.id] = node
        return node.id

    def get_node(self, node_id: str) -> Optional[Node]:
        """The node with this id, or None."""
        return self._nodes.get(node_id)

    def _require(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"no node with id {node_id!r}") from None

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def relations(self) -> Iterator[Relation]:
        return iter(self._relations)

    def create_child_node(self, title: str, node_type: NodeType, parent_id: str) -> str:
        """Add a child placed beside its parent, linked by a hierarchy relation."""
        parent = self._require(parent_id)
        position = Position2D(
            parent.position.x + _CHILD_OFFSET, parent.position.y + _CHILD_OFFSET
        )
        node = Node(title, node_type, position).with_parent(parent_id)
        self._nodes[node.id] = node
        self.add_relation(parent_id, node.id, RelationType.HIERARCHY)
        return node.id

    def evolve_node(
        self, base_node_id: str, title: str, position: Optional[Position2D] = None
    ) -> str:
        """Add a node of the same kind as the base, linked by an evolution relation."""
        base = self._require(base_node_id)
        if position is None:
            position = Position2D(
                base.position.x + _EVOLUTION_OFFSET, base.position.y + _EVOLUTION_OFFSET
            )
        node = Node(title, base.node_type, position)
        self._nodes[node.id] = node
        self.add_relation(base_node_id, node.id, RelationType.EVOLUTION)
        return node.id

    def add_relation(
        self, source_id: str, target_id: str, relation_type: RelationType
    ) -> Relation:
        relation = Relation(source_id, target_id, relation_type)
        self._relations.append(relation)
        return relation

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": {node_id: node.to_dict() for node_id, node in self._nodes.items()},
            "relations": [relation.to_dict() for relation in self._relations],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Graph:
        graph = cls()
        graph._nodes = {
            str(node_id): Node.from_dict(node) for node_id, node in data["nodes"].items()
        }
        graph._relations = [Relation.from_dict(item) for item in data["relations"]]
        return graph