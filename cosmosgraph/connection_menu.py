"""The menu for choosing how to link two nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cosmosgraph.relation import RelationType

CHOICES = (RelationType.ORBIT, RelationType.EVOLUTION, RelationType.REFERENCE)


@dataclass(frozen=True)
class ConnectionAction:
    """A request to create a relation between two nodes."""

    source_id: str
    target_id: str
    relation_type: RelationType


@dataclass
class ConnectionMenu:
    """Open for a pair of nodes until a relation is chosen or it is cancelled."""

    show_menu: bool = False
    source_id: Optional[str] = None
    target_id: Optional[str] = None

    def show_for_nodes(self, source_id: str, target_id: str) -> None:
        self.source_id = source_id
        self.target_id = target_id
        self.show_menu = True

    def choose(self, relation_type: RelationType) -> Optional[ConnectionAction]:
        """Pick a relation kind; returns the action, or None if the menu is closed."""
        if relation_type not in CHOICES:
            raise ValueError(f"{relation_type.value} is not offered by the connection menu")
        if not self.show_menu or self.source_id is None or self.target_id is None:
            return None
        action = ConnectionAction(self.source_id, self.target_id, relation_type)
        self.cancel()
        return action

    def cancel(self) -> None:
        """Close the menu and forget the node pair."""
        self.show_menu = False
        self.source_id = None
        self.target_id = None