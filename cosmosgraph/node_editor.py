"""The state of the node editing panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple

from cosmosgraph.node import Node
from cosmosgraph.node_type import NodeType

Color = Tuple[int, int, int, int]

MIN_SIZE = 5.0
MAX_SIZE = 50.0

_DEFAULT_COLORS: dict[NodeType, Color] = {
    NodeType.STAR: (255, 223, 186, 255),
    NodeType.PLANET: (186, 223, 255, 255),
    NodeType.SATELLITE: (200, 200, 200, 255),
    NodeType.ASTEROID: (169, 169, 169, 255),
}

_DEFAULT_SIZES: dict[NodeType, float] = {
    NodeType.STAR: 20.0,
    NodeType.PLANET: 15.0,
    NodeType.SATELLITE: 8.0,
    NodeType.ASTEROID: 5.0,
}


def default_color(node_type: NodeType) -> Color:
    """The RGBA colour a node of this kind has without a custom one."""
    return _DEFAULT_COLORS[node_type]


def default_size(node_type: NodeType) -> float:
    """The size a node of this kind has without a custom one."""
    return _DEFAULT_SIZES[node_type]


def _check_color(color: Any) -> Color:
    channels = tuple(color)
    if len(channels) != 4 or not all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels
    ):
        raise ValueError("a colour is four integer channels between 0 and 255")
    return channels  # type: ignore[return-value]


@dataclass(frozen=True)
class EditorAction:
    """A change requested in the editor; ``value`` depends on ``kind``."""

    UPDATE_TITLE: ClassVar[str] = "update_title"
    UPDATE_DESCRIPTION: ClassVar[str] = "update_description"
    CREATE_EVOLUTION_LAYER: ClassVar[str] = "create_evolution_layer"
    UPDATE_COLOR: ClassVar[str] = "update_color"
    UPDATE_SIZE: ClassVar[str] = "update_size"

    kind: str
    value: Any = None


@dataclass
class NodeEditor:
    """Edits one node at a time: title, description, colour and size."""

    show_editor: bool = False
    editing_node: Optional[str] = None
    title: str = ""
    description: str = ""
    show_color_picker: bool = False
    size_edit_mode: bool = False
    temp_size: float = 0.0

    def open(self, node: Node) -> None:
        """Start editing ``node``."""
        self.show_editor = True
        self.editing_node = node.id
        self.title = node.title
        self.description = node.description or ""

    def toggle_color_picker(self) -> bool:
        self.show_color_picker = not self.show_color_picker
        return self.show_color_picker

    def toggle_size_edit(self, node: Node) -> bool:
        """Toggle size editing, starting from the node's current size."""
        self.size_edit_mode = not self.size_edit_mode
        self.temp_size = (
            node.custom_size if node.custom_size is not None else default_size(node.node_type)
        )
        return self.size_edit_mode

    def update_title(self, title: str) -> Optional[EditorAction]:
        if not self.show_editor:
            return None
        self.title = title
        return EditorAction(EditorAction.UPDATE_TITLE, title)

    def update_description(self, description: str) -> Optional[EditorAction]:
        if not self.show_editor:
            return None
        self.description = description
        return EditorAction(EditorAction.UPDATE_DESCRIPTION, description)

    def update_color(self, color: Color) -> Optional[EditorAction]:
        """Request a colour change; only while the colour picker is shown."""
        if not (self.show_editor and self.show_color_picker):
            return None
        return EditorAction(EditorAction.UPDATE_COLOR, _check_color(color))

    def update_size(self, size: float) -> Optional[EditorAction]:
        """Request a size change, clamped to the slider's range."""
        if not (self.show_editor and self.size_edit_mode):
            return None
        self.temp_size = min(MAX_SIZE, max(MIN_SIZE, float(size)))
        return EditorAction(EditorAction.UPDATE_SIZE, self.temp_size)

    def apply(self, node: Node, action: EditorAction) -> bool:
        """Apply an action to ``node``; False when the node itself is not changed."""
        if action.kind == EditorAction.UPDATE_TITLE:
            node.set_title(action.value)
        elif action.kind == EditorAction.UPDATE_DESCRIPTION:
            node.set_description(action.value)
        elif action.kind == EditorAction.UPDATE_COLOR:
            node.set_color(action.value)
        elif action.kind == EditorAction.UPDATE_SIZE:
            node.set_size(action.value)
        elif action.kind == EditorAction.CREATE_EVOLUTION_LAYER:
            return False
        else:
            raise ValueError(f"unknown editor action: {action.kind!r}")
        return True