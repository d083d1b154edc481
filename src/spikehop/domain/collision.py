from __future__ import annotations

from collections.abc import Iterable

from spikehop.domain.game_state import Rect


class CollisionChecker:
    def check(self, player: Rect, obstacles: Iterable[Rect]) -> bool:
        # Open intervals: shared edges are not a hit.
        for o in obstacles:
            if (player.left < o.right and player.right > o.left
                    and player.top < o.bottom and player.bottom > o.top):
                return True
        return False
