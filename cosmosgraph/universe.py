"""A named, saved graph."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from cosmosgraph.graph import Graph

DEFAULT_TITLE = "New Universe"


@dataclass
class Universe:
    """A graph together with its id and title."""

    id: str
    title: str
    graph: Graph

    @classmethod
    def from_graph(cls, graph: Graph) -> Universe:
        """Wrap a graph in a fresh universe with a new id and default title."""
        return cls(str(uuid.uuid4()), DEFAULT_TITLE, graph)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "graph": self.graph.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Universe:
        return cls(str(data["id"]), str(data["title"]), Graph.from_dict(data["graph"]))