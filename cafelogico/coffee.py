"""Coffee cup pickup that grants an extra life."""

from __future__ import annotations

import random
from dataclasses import dataclass

from cafelogico.screen import SCRSTARTX, SCRSTARTY, Color, Screen

COFFEE_SYMBOL = "☕"


@dataclass
class CoffeeItem:
    """A coffee cup on the map; ``active`` while it can be collected."""

    x: int = 0
    y: int = 0
    active: bool = False

    def spawn(
        self,
        max_cols: int,
        max_rows: int,
        player_x: int,
        player_y: int,
        rng: random.Random | None = None,
    ) -> None:
        """Place the cup inside the map borders, never on the player."""
        chooser = rng if rng is not None else random
        while True:
            x = chooser.randrange(max_cols - 2) + 1
            y = chooser.randrange(max_rows - 2) + 1
            if (x, y) != (player_x, player_y):
                break
        self.x, self.y = x, y
        self.active = True

    def draw(self, screen: Screen) -> None:
        """Draw the cup if it is still on the map."""
        if not self.active:
            return
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.gotoxy(SCRSTARTX + 1 + self.x, SCRSTARTY + 1 + self.y)
        screen.write(COFFEE_SYMBOL)

    def collect(self, player_x: int, player_y: int) -> bool:
        """Take the cup if the player stands on it; return whether it was taken."""
        if self.active and (self.x, self.y) == (player_x, player_y):
            self.active = False
            return True
        return False