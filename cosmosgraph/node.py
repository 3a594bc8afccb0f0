"""Nodes of the mind-map graph."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple

from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D

Color = Tuple[int, int, int, int]

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d)(?:\.(?P<frac>\d+))?"
    r"(?P<zone>Z|[+-]\d\d:\d\d)$"
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp as RFC 3339 in UTC with a ``Z`` suffix."""
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping at most microsecond precision."""
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    frac = match.group("frac")
    fraction = f".{frac[:6].ljust(6, '0')}" if frac else ""
    zone = match.group("zone")
    if zone == "Z":
        zone = "+00:00"
    parsed = datetime.fromisoformat(match.group("base") + fraction + zone)
    return parsed.astimezone(timezone.utc)


def _check_color(color: Any) -> Color:
    channels = tuple(color)
    if len(channels) != 4:
        raise ValueError("a colour needs exactly four channels (r, g, b, a)")
    for channel in channels:
        if not isinstance(channel, int) or isinstance(channel, bool):
            raise ValueError("colour channels must be integers")
        if not 0 <= channel <= 255:
            raise ValueError("colour channels must lie between 0 and 255")
    return channels  # type: ignore[return-value]


@dataclass
class Node:
    """A titled node placed on the canvas."""

    title: str
    node_type: NodeType
    position: Position2D
    id: str = field(default_factory=_new_id)
    description: Optional[str] = None
    parent_id: Optional[str] = None
    created_at: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None
    custom_color: Optional[Color] = None
    custom_size: Optional[float] = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def _touch(self) -> None:
        self.updated_at = _now()

    def set_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def with_parent(self, parent_id: str) -> Node:
        """Attach the node to a parent and return it."""
        self.parent_id = parent_id
        return self

    def set_title(self, title: str) -> None:
        self.title = title
        self._touch()

    def set_color(self, color: Color) -> None:
        """Set a custom RGBA colour; each channel is 0..255."""
        self.custom_color = _check_color(color)
        self._touch()

    def set_size(self, size: float) -> None:
        self.custom_size = float(size)
        self._touch()

    def get_color(self) -> Optional[Color]:
        """The custom RGBA colour, or None when the default applies."""
        return self.custom_color

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "position": self.position.to_dict(),
            "node_type": self.node_type.value,
            "parent_id": self.parent_id,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at or self.created_at),
            "custom_color_rgba": list(self.custom_color) if self.custom_color else None,
            "custom_size": self.custom_size,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Node:
        rgba = data.get("custom_color_rgba")
        size = data.get("custom_size")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            description=data.get("description"),
            position=Position2D.from_dict(data["position"]),
            node_type=NodeType(data["node_type"]),
            parent_id=data.get("parent_id"),
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data["updated_at"]),
            custom_color=_check_color(rgba) if rgba is not None else None,
            custom_size=float(size) if size is not None else None,
        )