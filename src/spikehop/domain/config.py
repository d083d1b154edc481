from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    All tunables of a run. Distances are pixels, velocities px/tick,
    gravity px/tick^2. Fixed at startup.
    """
    width: int = 800
    height: int = 400
    gravity: float = 0.2
    jump_force: float = -7.0
    player_size: float = 40.0
    obstacle_size: float = 40.0
    obstacle_speed: float = 3.0
    spike_group_probability: float = 0.3

    # Timer cadence (milliseconds)
    tick_ms: int = 10
    spawn_interval_ms: int = 2000

    @property
    def floor_y(self) -> float:
        return self.height - self.player_size

    @property
    def player_start_x(self) -> float:
        return self.width / 2

    @property
    def obstacle_y(self) -> float:
        return self.height - self.obstacle_size

    @property
    def spawn_x(self) -> float:
        return self.width - self.obstacle_size
