from __future__ import annotations
import tkinter as tk
from collections.abc import Callable


class TkInputMapper:
    """Maps the Space key to jump pressed / released. Other keys are ignored."""

    def __init__(
        self,
        root: tk.Misc,
        *,
        on_jump_pressed: Callable[[], None],
        on_jump_released: Callable[[], None],
    ) -> None:
        self._on_pressed = on_jump_pressed
        self._on_released = on_jump_released

        root.bind("<KeyPress-space>", self._on_space_down)
        root.bind("<KeyRelease-space>", self._on_space_up)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_space_down(self, _evt: tk.Event) -> None:
        self._on_pressed()

    def _on_space_up(self, _evt: tk.Event) -> None:
        self._on_released()
