from __future__ import annotations

import logging
from typing import Protocol

from spikehop.app.game_loop import RepeatingTimer, Scheduler
from spikehop.domain.config import GameConfig
from spikehop.domain.exceptions import PlayerDied
from spikehop.domain.game_state import GameStatus
from spikehop.domain.input_state import InputState
from spikehop.domain.rng import RandomSource
from spikehop.domain.world import GameSession, World

logger = logging.getLogger(__name__)


class GameView(Protocol):
    def render(self, session: GameSession) -> None:
        ...

    def show_game_over(self) -> None:
        ...

    def clear(self) -> None:
        ...


class GameDriver:
    """
    Owns the session, both timers and the input flag.

    Lifecycle: INITIALIZING -> RUNNING via `init()`, RUNNING -> OVER on the
    first collision, OVER (or RUNNING) -> INITIALIZING -> RUNNING via `reset()`.
    Timers keep firing while OVER; only `reset()` or `shutdown()` cancels them.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        view: GameView,
        config: GameConfig,
        rng: RandomSource,
    ) -> None:
        self.config = config
        self.view = view
        self.rng = rng
        self.world = World()
        self.input = InputState()
        self.session: GameSession | None = None

        self.tick_timer = RepeatingTimer(
            scheduler=scheduler,
            interval_ms=config.tick_ms,
            callback=self._on_tick,
            name="tick",
        )
        self.spawn_timer = RepeatingTimer(
            scheduler=scheduler,
            interval_ms=config.spawn_interval_ms,
            callback=self._on_spawn,
            name="spawn",
        )

    @property
    def status(self) -> GameStatus:
        if self.session is None:
            return GameStatus.INITIALIZING
        return self.session.status

    def init(self) -> None:
        self.session = GameSession(self.config, self.rng, self.input)
        self.tick_timer.start()
        self.spawn_timer.start()
        self.session.status = GameStatus.RUNNING
        logger.info("Run started")
        self.view.render(self.session)

    def reset(self) -> None:
        self.tick_timer.stop()
        self.spawn_timer.stop()
        self.view.clear()
        self.session = None
        self.input.jump_held = False
        logger.info("Reset")
        self.init()

    def shutdown(self) -> None:
        self.tick_timer.stop()
        self.spawn_timer.stop()

    # ---------- Input ----------

    def jump_pressed(self) -> None:
        self.input.jump_held = True

    def jump_released(self) -> None:
        self.input.jump_held = False

    # ---------- Timer bodies ----------

    def _on_tick(self) -> None:
        session = self.session
        if session is None or session.status is not GameStatus.RUNNING:
            return

        try:
            self.world.step(session)
        except PlayerDied:
            session.status = GameStatus.OVER
            p = session.physics.player
            logger.info("Game over at y=%.1f with %d obstacles on screen", p.y, len(session.field))
            self.view.render(session)
            self.view.show_game_over()
            return

        self.view.render(session)

    def _on_spawn(self) -> None:
        session = self.session
        if session is None or session.status is not GameStatus.RUNNING:
            return

        spawned = session.field.spawn()
        logger.debug("Spawned %d obstacle(s)", len(spawned))
