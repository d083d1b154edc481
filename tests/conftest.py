from __future__ import annotations

import itertools

import pytest

from spikehop.domain.config import GameConfig


class FakeScheduler:
    """Deterministic stand-in for Tk's after/after_cancel."""

    def __init__(self) -> None:
        self.now = 0
        self.pending: dict[str, tuple[int, int, object]] = {}
        self._seq = itertools.count()

    def after(self, ms, func):
        seq = next(self._seq)
        after_id = f"after#{seq}"
        self.pending[after_id] = (self.now + ms, seq, func)
        return after_id

    def after_cancel(self, after_id):
        self.pending.pop(after_id, None)

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [(when, seq, aid) for aid, (when, seq, _) in self.pending.items() if when <= target]
            if not due:
                break
            when, _, aid = min(due)
            _, _, func = self.pending.pop(aid)
            self.now = when
            func()
        self.now = target


class ScriptedRandom:
    """Replays fixed random() and randint() values."""

    def __init__(self, randoms=(), ints=()):
        self._randoms = list(randoms)
        self._ints = list(ints)

    def random(self):
        return self._randoms.pop(0)

    def randint(self, a, b):
        value = self._ints.pop(0)
        assert a <= value <= b
        return value


class RecordingView:
    def __init__(self) -> None:
        self.renders = 0
        self.game_overs = 0
        self.clears = 0

    def render(self, session):
        self.renders += 1

    def show_game_over(self):
        self.game_overs += 1

    def clear(self):
        self.clears += 1


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def singles_only():
    """An rng that always picks the single-obstacle branch."""
    class _Rng:
        def random(self):
            return 0.99

        def randint(self, a, b):
            raise AssertionError("randint should not be called for singles")

    return _Rng()


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng(randoms=[...], ints=[...])."""
    return ScriptedRandom
