from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from spikehop.domain.world import GameSession


class TkCanvasView:
    def __init__(
        self,
        root: tk.Misc,
        *,
        width: int,
        height: int,
        on_reset: Callable[[], None],
    ) -> None:
        self._w = width
        self._h = height
        self._on_reset = on_reset
        self._overlay_button: tk.Button | None = None

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#fff")
        self.canvas.pack(fill="both", expand=True)

        self._player_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="red")
        self._text_id = self.canvas.create_text(10, 10, anchor="nw", text="", font=("TkDefaultFont", 12))

        # Standing reset, bottom-right. takefocus=0 so Space never "clicks" it.
        reset = tk.Button(self.canvas, text="Reset", command=on_reset, takefocus=0)
        self.canvas.create_window(width - 10, height - 10, anchor="se", window=reset)

    def render(self, session: GameSession) -> None:
        p = session.physics.player
        self.canvas.coords(self._player_id, p.x, p.y, p.x + p.size, p.y + p.size)

        # Redraw obstacles (cheap at this count)
        self.canvas.delete("obstacle")
        for o in session.field:
            self.canvas.create_rectangle(
                o.x, o.y, o.x + o.size, o.y + o.size,
                fill="green", outline="", tags=("obstacle",),
            )

        self.canvas.itemconfigure(
            self._text_id,
            text=f"obstacles={len(session.field)} y={p.y:.1f} vy={p.vy:.1f}",
        )

    def show_game_over(self) -> None:
        w, h = self._w, self._h
        # Tk has no alpha; a stippled fill stands in for the translucent veil.
        self.canvas.create_rectangle(0, 0, w, h, fill="black", stipple="gray50", outline="", tags=("overlay",))
        self.canvas.create_text(
            w / 2, h / 2 - 24,
            text="Game Over", fill="white", font=("TkDefaultFont", 24), tags=("overlay",),
        )
        self._overlay_button = tk.Button(self.canvas, text="Reset", command=self._on_reset, takefocus=0)
        self.canvas.create_window(w / 2, h / 2 + 20, window=self._overlay_button, tags=("overlay",))

    def clear(self) -> None:
        self.canvas.delete("obstacle", "overlay")
        self.canvas.coords(self._player_id, 0, 0, 0, 0)
        self.canvas.itemconfigure(self._text_id, text="")
        if self._overlay_button is not None:
            # Its own command may still be running; destroy once idle.
            self.canvas.after_idle(self._overlay_button.destroy)
            self._overlay_button = None
