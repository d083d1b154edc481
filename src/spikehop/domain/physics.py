from __future__ import annotations

from spikehop.domain.config import GameConfig
from spikehop.domain.game_state import Player
from spikehop.domain.input_state import InputState


class PhysicsState:
    """
    Owns the player. One `tick()` is one fixed time step of constant gravity
    plus an impulse jump that only fires while grounded (vy == 0).
    """

    def __init__(self, config: GameConfig, inp: InputState) -> None:
        self._cfg = config
        self._input = inp
        self.player = Player(
            x=config.player_start_x,
            y=config.floor_y,
            vy=0.0,
            size=config.player_size,
        )

    @property
    def grounded(self) -> bool:
        p = self.player
        return p.vy == 0.0 and p.y == self._cfg.floor_y

    def tick(self) -> None:
        p = self.player
        vy = p.vy

        # Holding the key does not re-trigger while airborne.
        if self._input.jump_held and vy == 0.0:
            vy = self._cfg.jump_force

        vy += self._cfg.gravity
        y = p.y + vy

        # Landing re-arms the jump. No ceiling.
        floor_y = self._cfg.floor_y
        if y > floor_y:
            y = floor_y
            vy = 0.0

        self.player = Player(x=p.x, y=y, vy=vy, size=p.size)
