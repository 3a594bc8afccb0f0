"""Mind maps as small universes: celestial nodes, relations, JSON storage and editor state."""

__version__ = "0.1.0"