"""Positions of nodes on the canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Position2D:
    """A point on the canvas; ``z`` orders nodes into layers."""

    x: float
    y: float
    z: float = 0.0

    def to_screen_pos(self) -> tuple[float, float]:
        """Return the ``(x, y)`` pair used for drawing."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position2D:
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))