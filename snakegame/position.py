"""Grid positions and a holder for a single mutable position."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pos:
    """A point in pixel coordinates."""

    x: int = 0
    y: int = 0


@dataclass
class PositionManager:
    """Holds the current position of a game object so several parts can share it."""

    position: Pos = field(default_factory=Pos)