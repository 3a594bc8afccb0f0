"""Turning pointer events on the canvas into graph actions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from cosmosgraph.graph import Graph
from cosmosgraph.node import Node

Point = Tuple[float, float]

NODE_HIT_RADIUS = 20.0


class DragMode(Enum):
    """What an ongoing drag is doing."""

    NONE = "none"
    VIEW_PAN = "view_pan"
    CREATE_NODE = "create_node"
    MOVE_NODE = "move_node"
    DRAW_CONNECTION = "draw_connection"


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class PointerEvent:
    """One frame of pointer input over the canvas."""

    pos: Optional[Point] = None
    button: Optional[PointerButton] = None
    clicked: bool = False
    double_clicked: bool = False
    drag_started: bool = False
    dragged: bool = False
    drag_released: bool = False
    drag_delta: Point = (0.0, 0.0)


class DragActionKind(Enum):
    SELECT_NODE = "select_node"
    DESELECT = "deselect"
    START_VIEW_PAN = "start_view_pan"
    START_DRAW_CONNECTION = "start_draw_connection"
    START_MOVE_NODE = "start_move_node"
    VIEW_PAN = "view_pan"
    DRAWING_CONNECTION = "drawing_connection"
    DRAGGING = "dragging"
    END_DRAW_CONNECTION = "end_draw_connection"
    END_MOVE_NODE = "end_move_node"
    REQUEST_CREATE_NODE = "request_create_node"
    NODE_DOUBLE_CLICKED = "node_double_clicked"
    CREATE_CHILD_NODE = "create_child_node"


@dataclass(frozen=True)
class DragAction:
    """An action requested by pointer input; unused fields stay None."""

    kind: DragActionKind
    node_id: Optional[str] = None
    position: Optional[Point] = None
    delta: Optional[Point] = None
    mode: Optional[DragMode] = None


def node_contains(node: Node, pos: Point) -> bool:
    """Whether ``pos`` lies strictly within the hit radius of ``node``."""
    distance = math.hypot(node.position.x - pos[0], node.position.y - pos[1])
    return distance < NODE_HIT_RADIUS


def _node_at(graph: Graph, pos: Point) -> Optional[Node]:
    return next((node for node in graph.nodes() if node_contains(node, pos)), None)


@dataclass
class DragHandler:
    """Tracks the drag state across pointer events."""

    drag_mode: DragMode = DragMode.NONE
    dragging: Optional[Tuple[str, Point]] = None

    def _reset(self) -> None:
        self.drag_mode = DragMode.NONE
        self.dragging = None

    def handle(self, event: PointerEvent, graph: Graph) -> Optional[DragAction]:
        """Process one event and return the resulting action, if any."""
        pos = event.pos
        if pos is None:
            return None

        if event.double_clicked:
            node = _node_at(graph, pos)
            if node is not None:
                return DragAction(DragActionKind.NODE_DOUBLE_CLICKED, node_id=node.id)
            return DragAction(DragActionKind.REQUEST_CREATE_NODE, position=pos)

        if event.drag_started:
            node = _node_at(graph, pos)
            if event.button is PointerButton.SECONDARY:
                if node is not None:
                    self.drag_mode = DragMode.DRAW_CONNECTION
                    self.dragging = (node.id, pos)
                    return DragAction(
                        DragActionKind.START_DRAW_CONNECTION, node_id=node.id, position=pos
                    )
            elif event.button is PointerButton.PRIMARY:
                if node is not None:
                    self.drag_mode = DragMode.MOVE_NODE
                    self.dragging = (node.id, pos)
                    return DragAction(DragActionKind.START_MOVE_NODE, node_id=node.id)
                self.drag_mode = DragMode.VIEW_PAN
                return DragAction(DragActionKind.START_VIEW_PAN)

        if event.dragged:
            if self.drag_mode is DragMode.VIEW_PAN:
                return DragAction(DragActionKind.VIEW_PAN, delta=event.drag_delta)
            if self.drag_mode is DragMode.DRAW_CONNECTION and self.dragging is not None:
                return DragAction(
                    DragActionKind.DRAWING_CONNECTION,
                    node_id=self.dragging[0],
                    position=pos,
                )
            if self.drag_mode is DragMode.MOVE_NODE and self.dragging is not None:
                return DragAction(
                    DragActionKind.DRAGGING,
                    node_id=self.dragging[0],
                    mode=self.drag_mode,
                    position=pos,
                )

        if event.drag_released:
            result: Optional[DragAction] = None
            if self.dragging is not None:
                if self.drag_mode is DragMode.DRAW_CONNECTION:
                    result = DragAction(
                        DragActionKind.CREATE_CHILD_NODE,
                        node_id=self.dragging[0],
                        position=pos,
                    )
                elif self.drag_mode is DragMode.MOVE_NODE:
                    result = DragAction(
                        DragActionKind.END_MOVE_NODE,
                        node_id=self.dragging[0],
                        position=pos,
                    )
            self._reset()
            return result

        if event.clicked:
            node = _node_at(graph, pos)
            if node is not None:
                return DragAction(DragActionKind.SELECT_NODE, node_id=node.id)
            return DragAction(DragActionKind.DESELECT)

        return None