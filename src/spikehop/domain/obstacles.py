from __future__ import annotations

from collections.abc import Iterator

from spikehop.domain.config import GameConfig
from spikehop.domain.game_state import Obstacle
from spikehop.domain.rng import RandomSource


class ObstacleField:
    """
    Obstacles in spawn order. `spawn()` runs on the slow timer, `tick()` on
    the fast one.
    """

    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self._cfg = config
        self._rng = rng
        self._obstacles: tuple[Obstacle, ...] = ()

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return self._obstacles

    def spawn(self) -> tuple[Obstacle, ...]:
        """Add a single obstacle or a spike group at the right edge; returns what was added."""
        cfg = self._cfg
        x = cfg.spawn_x

        if self._rng.random() < cfg.spike_group_probability:
            count = self._rng.randint(2, 3)
            # n spikes packed inside one obstacle width.
            gap = cfg.obstacle_size / (count - 1)
            xs = [x + i * gap for i in range(count)]
        else:
            xs = [x]

        spawned = tuple(Obstacle(x=sx, y=cfg.obstacle_y, size=cfg.obstacle_size) for sx in xs)
        self._obstacles = self._obstacles + spawned
        return spawned

    def tick(self) -> tuple[Obstacle, ...]:
        """Scroll everything left and drop what left the arena; returns the removed obstacles."""
        dx = self._cfg.obstacle_speed
        moved = [Obstacle(x=o.x - dx, y=o.y, size=o.size) for o in self._obstacles]

        # Rebuild rather than remove while iterating.
        self._obstacles = tuple(o for o in moved if o.x + o.size >= 0)
        return tuple(o for o in moved if o.x + o.size < 0)

    def clear(self) -> None:
        self._obstacles = ()
