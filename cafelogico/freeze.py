"""Freeze pickup that stops the ghosts for a few seconds."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable

from cafelogico.screen import SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen

FREEZE_SYMBOL = "🥶"
FREEZE_SECONDS = 5.0


@dataclass
class FreezeItem:
    """A freeze pickup on the map; ``active`` while it can be taken."""

    x: int = 0
    y: int = 0
    active: bool = False

    def spawn(self, rng: random.Random | None = None) -> None:
        """Place the pickup somewhere in the upper-left part of the map."""
        chooser = rng if rng is not None else random
        self.x = 3 + chooser.randrange(30)
        self.y = 3 + chooser.randrange(15)
        self.active = True

    def draw(self, screen: Screen) -> None:
        """Draw the pickup if it is still on the map."""
        if self.active:
            screen.set_color(Color.LIGHTBLUE, Color.BLACK)
            screen.gotoxy(SCRSTARTX + 1 + self.x, SCRSTARTY + 1 + self.y)
            screen.write(FREEZE_SYMBOL)


class FreezeState:
    """Tracks whether the ghosts are frozen and since when."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.time
        self.frozen = False
        self.frozen_at = 0.0

    def check(self, item: FreezeItem, player_x: int, player_y: int, screen: Screen) -> bool:
        """Freeze the ghosts if the player stands on the item; return whether it did."""
        if not (item.active and (item.x, item.y) == (player_x, player_y)):
            return False
        self.frozen = True
        self.frozen_at = self._clock()
        item.active = False
        screen.gotoxy(SCRSTARTX + 2, SCRENDY + 1)
        screen.set_color(Color.CYAN, Color.BLACK)
        screen.write(f"{FREEZE_SYMBOL} Fantasmas congelados por 5s!")
        return True

    def update(self, screen: Screen) -> bool:
        """Unfreeze once the freeze has lasted long enough; return whether it ended."""
        if not self.frozen:
            return False
        if self._clock() - self.frozen_at < FREEZE_SECONDS:
            return False
        self.frozen = False
        screen.gotoxy(SCRSTARTX + 2, SCRENDY + 2)
        screen.set_color(Color.WHITE, Color.BLACK)
        screen.write("Fantasmas descongelados!      ")
        return True