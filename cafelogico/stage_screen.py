"""Interstitial screen shown when a new stage begins."""

from __future__ import annotations

import time
from typing import Callable

from cafelogico.screen import SCRENDX, SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen

_TITLES = {
    2: "🌟 FASE 2  🌟",
    3: "🔥 FASE FINAL 🔥",
}
_DEFAULT_TITLE = "🌱 FASE 1 🌱"


def show_stage(screen: Screen, stage: int, sleep: Callable[[float], None] = time.sleep) -> None:
    """Draw the stage banner, then pause for two seconds."""
    screen.clear()
    screen.set_color(Color.WHITE, Color.BLACK)
    screen.draw_box(SCRSTARTX, SCRSTARTY, SCRENDX, SCRENDY)
    screen.set_color(Color.LIGHTCYAN, Color.BLACK)
    screen.gotoxy(30, 10)
    screen.write(_TITLES.get(stage, _DEFAULT_TITLE))
    screen.gotoxy(30, 12)
    screen.set_color(Color.YELLOW, Color.BLACK)
    screen.write("Prepare-se...")
    screen.update()
    sleep(2)