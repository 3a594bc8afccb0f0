"""Relations between nodes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from cosmosgraph.node_type import NodeType


class RelationType(Enum):
    """The kind of link between two nodes."""

    ORBIT = "Orbit"
    EVOLUTION = "Evolution"
    REFERENCE = "Reference"
    HIERARCHY = "Hierarchy"


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Relation:
    """A directed, typed link from a source node to a target node."""

    source_id: str
    target_id: str
    relation_type: RelationType
    label: str | None = None
    weight: float = 1.0
    id: str = field(default_factory=_new_id)

    @staticmethod
    def is_valid_hierarchy(source_type: NodeType, target_type: NodeType) -> bool:
        """Whether a hierarchy link from ``source_type`` to ``target_type`` is allowed."""
        return (source_type, target_type) in {
            (NodeType.STAR, NodeType.PLANET),
            (NodeType.PLANET, NodeType.SATELLITE),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source_id": self.source_id,
            "target_id": self.target_id,
            "relation_type": self.relation_type.value,
            "label": self.label,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Relation:
        return cls(
            id=str(data["id"]),
            source_id=str(data["source_id"]),
            target_id=str(data["target_id"]),
            relation_type=RelationType(data["relation_type"]),
            label=data.get("label"),
            weight=float(data["weight"]),
        )