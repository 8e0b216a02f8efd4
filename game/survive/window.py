"""
Arcade presentation layer: draws a Game snapshot and forwards player input.
"""

from __future__ import annotations

import arcade

from .game import Game
from .state import MAX_HEALTH
from .utils import clamp


class SurviveWindow(arcade.Window):
    """Arcade window for rendering (and optionally driving) a Game"""

    def __init__(self, game: Game, width: int, height: int, interactive: bool = False):
        super().__init__(width, height, "Click to Survive", resizable=interactive)
        self.game = game
        self.interactive = interactive

        # Colors
        self.BG = (15, 15, 31)
        self.ACCENT = (97, 181, 232)
        self.DANGER = (232, 77, 97)
        self.SUCCESS = (77, 232, 171)
        self.GOLD = (255, 214, 0)
        self.HUD_C = (230, 230, 230)

    def on_draw(self):
        """Draw the current game state"""
        self.clear(color=self.BG)
        snap = self.game.snapshot()
        tx, ty = snap["target"]

        if not snap["is_playing"]:
            self._draw_menu(snap)
            return

        for p in snap["particles"]:
            alpha = int(255 * clamp(p.opacity, 0.0, 1.0))
            arcade.draw_circle_filled(p.x, p.y, p.scale / 2, (*self.DANGER, alpha))

        for e in snap["enemies"]:
            arcade.draw_circle_filled(e.x, e.y, e.size / 2, self.DANGER)
            if e.health > 1:
                arcade.draw_text(str(e.health), e.x, e.y, self.HUD_C, 12,
                                 anchor_x="center", anchor_y="center", bold=True)

        if snap["shockwave"] > 0:
            arcade.draw_circle_outline(tx, ty, snap["shockwave"] * 2.5, (*self.ACCENT, 128), 2)

        # Defend button
        arcade.draw_circle_filled(tx, ty, 60, self.ACCENT)
        arcade.draw_text("DEFEND", tx, ty, self.HUD_C, 18, anchor_x="center", anchor_y="center", bold=True)

        if snap["is_wave_complete"]:
            arcade.draw_text(f"WAVE {snap['wave_number']} COMPLETE!", tx, ty + 120, self.GOLD, 28,
                             anchor_x="center", bold=True)

        # HUD - Health bar
        bar_w, bar_h = 180, 10
        x0, y0 = 12, self.height - 22
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
        fill = bar_w * clamp(snap["health"] / MAX_HEALTH, 0, 1)
        color = self.SUCCESS if snap["health"] > 30 else self.DANGER
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, color)

        txt = f"WAVE {snap['wave_number']}  SCORE: {snap['score']}"
        if snap["combo_multiplier"] > 1:
            txt += f"  COMBO x{snap['combo_multiplier']}"
        arcade.draw_text(txt, 12, self.height - 44, self.HUD_C, 14)

    def _draw_menu(self, snap):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text("CLICK TO SURVIVE", cx, cy + 80, self.ACCENT, 40, anchor_x="center", bold=True)
        if snap["game_over"]:
            arcade.draw_text("GAME OVER", cx, cy + 20, self.DANGER, 28, anchor_x="center", bold=True)
            arcade.draw_text(f"Score: {snap['score']}   Waves Survived: {snap['wave_number']}",
                             cx, cy - 20, self.GOLD, 18, anchor_x="center")
        arcade.draw_text("Press ENTER or click to start", cx, cy - 70, self.HUD_C, 16, anchor_x="center")

    # ----------------------------
    # Input (interactive mode only)
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.game.update(delta_time)

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        if self.interactive:
            self.game.set_viewport(width, height)

    def on_mouse_press(self, x, y, button, modifiers):
        if not self.interactive:
            return
        self._press()

    def on_key_press(self, symbol, modifiers):
        if not self.interactive:
            return
        if symbol in (arcade.key.SPACE, arcade.key.ENTER):
            self._press()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def _press(self):
        if self.game.state.is_playing:
            self.game.defend()
        else:
            self.game.start()


def play(width: int = 800, height: int = 600, seed=None):
    """Open a window and play with mouse or space bar"""
    game = Game(width=width, height=height, seed=seed)
    SurviveWindow(game, width, height, interactive=True)
    arcade.run()


if __name__ == "__main__":
    play()
