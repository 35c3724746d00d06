"""Ghosts that chase the player across the map."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from cafelogico.screen import Color, Screen

GHOST_SYMBOL = "👻"


@dataclass
class Ghost:
    """One ghost with its current and starting position."""

    x: int = 0
    y: int = 0
    direction: int = 1
    origin_x: int = 0
    origin_y: int = 0


def _step(current: int, target: int) -> int:
    if current < target:
        return current + 1
    if current > target:
        return current - 1
    return current


@dataclass
class _Counter:
    value: int = 0


class GhostSquad:
    """A group of ghosts that move one step every ``delay`` calls."""

    def __init__(self, count: int = 2, delay: int = 6) -> None:
        self.delay = delay
        self.ghosts: list[Ghost] = [Ghost() for _ in range(count)]
        self._ticks = 0

    def reset(self, width: int, height: int, rng: random.Random | None = None) -> None:
        """Place the ghosts in their starting rows at random columns."""
        chooser = rng if rng is not None else random
        for i, ghost in enumerate(self.ghosts):
            ghost.y = 2 + i * 3
            ghost.x = chooser.randrange(width - 2) + 1
            ghost.direction = 1 if i % 2 == 0 else -1
            ghost.origin_x, ghost.origin_y = ghost.x, ghost.y

    def occupied(self, x: int, y: int, index: int) -> bool:
        """Whether a ghost other than ``index`` stands at (x, y)."""
        return any(
            j != index and (ghost.x, ghost.y) == (x, y)
            for j, ghost in enumerate(self.ghosts)
        )

    def move_towards(self, player_x: int, player_y: int, width: int, height: int) -> bool:
        """Advance the slowdown counter; step the ghosts when it fills. Return whether they moved."""
        self._ticks += 1
        if self._ticks < self.delay:
            return False
        self._ticks = 0

        for i, ghost in enumerate(self.ghosts):
            new_x = _step(ghost.x, player_x)
            new_y = _step(ghost.y, player_y)
            if not self.occupied(new_x, new_y, i):
                ghost.x, ghost.y = new_x, new_y

            if ghost.x < 1:
                ghost.x = 1
            if ghost.x >= width - 1:
                ghost.x = width - 2
            if ghost.y < 1:
                ghost.y = 1
            if ghost.y >= height - 1:
                ghost.y = height - 2
        return True

    def draw(self, screen: Screen, offset_x: int, offset_y: int) -> None:
        """Draw every ghost relative to the map origin."""
        screen.set_color(Color.RED, Color.BLACK)
        for ghost in self.ghosts:
            screen.gotoxy(offset_x + 1 + ghost.x, offset_y + 1 + ghost.y)
            screen.write(GHOST_SYMBOL)

    def return_to_origin(self) -> None:
        """Send every ghost back to where it started."""
        for ghost in self.ghosts:
            ghost.x, ghost.y = ghost.origin_x, ghost.origin_y

    def check_collision(self, player_x: int, player_y: int) -> bool:
        """If a ghost caught the player, send all ghosts home and return True."""
        if any((ghost.x, ghost.y) == (player_x, player_y) for ghost in self.ghosts):
            self.return_to_origin()
            return True
        return False