from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    size: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.x + self.size, self.y + self.size)


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    vy: float
    size: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.x + self.size, self.y + self.size)


class GameStatus(enum.Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    OVER = "over"
