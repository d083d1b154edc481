from __future__ import annotations

from spikehop.domain.collision import CollisionChecker
from spikehop.domain.config import GameConfig
from spikehop.domain.exceptions import PlayerDied
from spikehop.domain.game_state import GameStatus
from spikehop.domain.input_state import InputState
from spikehop.domain.obstacles import ObstacleField
from spikehop.domain.physics import PhysicsState
from spikehop.domain.rng import RandomSource


class GameSession:
    """
    Everything that belongs to one run. Never reused: a reset builds a new one.
    """

    def __init__(self, config: GameConfig, rng: RandomSource, inp: InputState) -> None:
        self.config = config
        self.input = inp
        self.physics = PhysicsState(config, inp)
        self.field = ObstacleField(config, rng)
        self.status = GameStatus.INITIALIZING


class World:
    def __init__(self) -> None:
        self._collisions = CollisionChecker()

    def step(self, session: GameSession) -> None:
        session.physics.tick()
        session.field.tick()

        player_rect = session.physics.player.rect
        if self._collisions.check(player_rect, (o.rect for o in session.field)):
            raise PlayerDied()
