"""Tracking which node is currently selected."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cosmosgraph.graph import Graph
from cosmosgraph.node import Node


@dataclass
class NodeSelector:
    """Holds the id of the selected node, if any."""

    selected_node: Optional[str] = None

    def select_node(self, node_id: str) -> None:
        self.selected_node = node_id

    def deselect(self) -> None:
        self.selected_node = None

    def is_selected(self, node_id: str) -> bool:
        """Whether ``node_id`` is the selected node."""
        return self.selected_node is not None and self.selected_node == node_id

    def selected(self, graph: Graph) -> Optional[Node]:
        """The selected node looked up in ``graph``, or None."""
        if self.selected_node is None:
            return None
        return graph.get_node(self.selected_node)