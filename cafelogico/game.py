"""Main game loop: collect the truth-table values in order while dodging ghosts."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

from cafelogico.coffee import CoffeeItem
from cafelogico.expressions import LogicalExpression, random_expression
from cafelogico.freeze import FreezeItem, FreezeState
from cafelogico.ghosts import GhostSquad
from cafelogico.keyboard import Keyboard
from cafelogico.screen import MAXY, SCRENDX, SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen
from cafelogico.stage_screen import show_stage
from cafelogico.timer import Timer

MAP_ROWS = SCRENDY - SCRSTARTY - 1
MAP_COLS = SCRENDX - SCRSTARTX - 1
MAX_ENTRIES = 100
RANKING_SHOWN = 10
MAX_TICKS = 1000
MAX_LEVEL = 3
STARTING_LIVES = 3
NAME_LENGTH = 49
RANKING_FILE = "ranking.txt"
PLAYER_SYMBOL = "🥐"
MESSAGE_WIDTH = 30

_MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


class _KeySource(Protocol):
    def hit(self) -> bool: ...

    def read(self) -> str: ...


class _Ticker(Protocol):
    def time_over(self) -> bool: ...


@dataclass(frozen=True)
class RankingEntry:
    """A player's name and final score."""

    name: str
    points: int


def save_ranking(path: str | Path, name: str, points: int) -> None:
    """Append a score to the ranking file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name} {points}\n")


def load_ranking(path: str | Path) -> list[RankingEntry]:
    """Read the ranking file, best score first.

    Reading stops at the first malformed entry or after the entry limit.
    Raises FileNotFoundError when the file does not exist.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()

    entries: list[RankingEntry] = []
    for name, points in zip(tokens[::2], tokens[1::2]):
        if len(entries) >= MAX_ENTRIES:
            break
        try:
            entries.append(RankingEntry(name, int(points)))
        except ValueError:
            break
    return sorted(entries, key=lambda entry: entry.points, reverse=True)


def render_ranking(screen: Screen, path: str | Path) -> None:
    """Draw the top scores, or a notice when no ranking exists yet."""
    try:
        entries = load_ranking(path)
    except FileNotFoundError:
        screen.gotoxy(5, 4)
        screen.write("Sem ranking salvo ainda.")
        return

    screen.gotoxy(5, 4)
    screen.write("=== RANKING ===")
    for place, entry in enumerate(entries[:RANKING_SHOWN], start=1):
        screen.gotoxy(5, 4 + place)
        screen.write(f"{place}° {entry.name} - {entry.points} pontos")


@dataclass
class TempMessage:
    """Two status lines shown until ``expires``."""

    line1: str = ""
    line2: str = ""
    expires: float = 0.0
    active: bool = False


@dataclass
class Player:
    x: int = MAP_COLS // 2
    y: int = MAP_ROWS // 2
    points: int = 0


@dataclass
class LogicItem:
    """A V/F tile on the map carrying one truth-table value."""

    x: int = 0
    y: int = 0
    expected_value: int = 0
    active: bool = False


class Game:
    """State and rules of one game session."""

    def __init__(
        self,
        screen: Screen | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.screen = screen if screen is not None else Screen()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.time
        self.sleep = sleep if sleep is not None else time.sleep
        self.ranking_path: str | Path = RANKING_FILE
        self._reset()

    def _reset(self) -> None:
        self.player = Player()
        self.logic_items = [LogicItem() for _ in range(4)]
        self.current_step = 0
        self.lives = STARTING_LIVES
        self.level = 1
        self.multiplier = 1
        self.expression: LogicalExpression | None = None
        self.freeze_item = FreezeItem()
        self.freeze = FreezeState(self.clock)
        self.coffee = CoffeeItem()
        self.ghosts = GhostSquad()
        self.message = TempMessage()
        self.needs_render = True
        self.ticks = 0

    def _show_message(self, line1: str, line2: str, seconds: int) -> None:
        self.message = TempMessage(line1, line2, self.clock() + seconds, True)

    def _draw_expression(self) -> None:
        self.screen.set_color(Color.LIGHTCYAN, Color.BLACK)
        self.screen.gotoxy(SCRSTARTX + 2, SCRSTARTY)
        self.screen.write(f"Resolva: {self.expression.text}")

    def start_level(self) -> None:
        """Pick an expression for the current level and lay out its pickups."""
        self.expression = random_expression(self.level, self.rng)
        self._draw_expression()
        self.place_logic_items(self.expression)
        self.freeze_item.spawn(self.rng)
        self.coffee.spawn(MAP_COLS, MAP_ROWS, self.player.x, self.player.y, self.rng)

    def _occupied(self, x: int, y: int) -> bool:
        return any(item.active and (item.x, item.y) == (x, y) for item in self.logic_items)

    def place_logic_items(self, expression: LogicalExpression) -> None:
        """Scatter the four truth-table tiles on free cells and restart the sequence."""
        for item, value in zip(self.logic_items, expression.truth_table):
            while True:
                x = self.rng.randrange(MAP_COLS - 2) + 1
                y = self.rng.randrange(MAP_ROWS - 2) + 1
                if not self._occupied(x, y) and (x, y) != (self.player.x, self.player.y):
                    break
            item.x, item.y = x, y
            item.expected_value = value
            item.active = True
        self.current_step = 0

    def move_player(self, key: str) -> None:
        """Move with w/a/s/d, staying inside the map."""
        dx, dy = _MOVES.get(key, (0, 0))
        new_x, new_y = self.player.x + dx, self.player.y + dy
        if 0 <= new_x < MAP_COLS and 0 <= new_y < MAP_ROWS:
            self.player.x, self.player.y = new_x, new_y

    def check_logic_collision(self) -> None:
        """Handle the player stepping on the coffee or on a truth-table tile."""
        if self.coffee.collect(self.player.x, self.player.y):
            self.lives += 1
            self._show_message("☕ Vida extra!", "", 2)
            self.needs_render = True
            return

        expression = self.expression
        for item in self.logic_items:
            if not (item.active and (item.x, item.y) == (self.player.x, self.player.y)):
                continue
            self.needs_render = True
            if item.expected_value == expression.truth_table[self.current_step]:
                item.active = False
                self.current_step += 1
                self.player.points += 100 * self.multiplier
                self.multiplier += 1
                self._show_message("✔ Correto!", "", 2)
                if self.current_step == 4:
                    self._show_message("Expressão resolvida!", "Avançando fase...", 2)
                    self.level += 1
                    if self.level > MAX_LEVEL:
                        self.screen.gotoxy(SCRSTARTX + 2, SCRENDY + 3)
                        self.screen.write("Parabéns! Você zerou o jogo!")
                        self.sleep(2)
                        self.lives = 0
                        return
                    show_stage(self.screen, self.level, self.sleep)
                    self.start_level()
            else:
                self.multiplier = 1
                self._show_message("✘ Ordem errada!", "Reiniciando...", 3)
                self.place_logic_items(expression)
                self.freeze_item.spawn(self.rng)
                self.current_step = 0
                self.lives -= 1
            break

    def tick(self) -> None:
        """Advance one timer step: freeze countdown, ghost movement and capture."""
        self.ticks += 1
        self.freeze.update(self.screen)
        if not self.freeze.frozen:
            self.ghosts.move_towards(self.player.x, self.player.y, MAP_COLS, MAP_ROWS)
        if self.ghosts.check_collision(self.player.x, self.player.y):
            self.lives -= 1
            self.multiplier = 1
            self.player.x, self.player.y = MAP_COLS // 2, MAP_ROWS // 2
            self.screen.gotoxy(3, 24)
            self.screen.set_color(Color.RED, Color.BLACK)
            self.screen.write(f"💀 Você perdeu 1 vida! Vidas restantes: {self.lives}")
        self.needs_render = True

    def render(self) -> None:
        """Redraw the map, pickups, ghosts, player, status bar and message."""
        screen = self.screen
        for row in range(MAP_ROWS):
            for col in range(MAP_COLS):
                screen.gotoxy(SCRSTARTX + 1 + col, SCRSTARTY + 1 + row)
                screen.write(" ")

        screen.set_color(Color.WHITE, Color.BLACK)
        for item in self.logic_items:
            if item.active:
                screen.gotoxy(SCRSTARTX + 1 + item.x, SCRSTARTY + 1 + item.y)
                screen.write("V" if item.expected_value else "F")

        self.freeze_item.draw(screen)
        self.coffee.draw(screen)
        self.ghosts.draw(screen, SCRSTARTX, SCRSTARTY)

        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.gotoxy(SCRSTARTX + 1 + self.player.x, SCRSTARTY + 1 + self.player.y)
        screen.write(PLAYER_SYMBOL)

        screen.set_color(Color.CYAN, Color.BLACK)
        screen.gotoxy(SCRSTARTX + 2, SCRENDY)
        screen.write(f"Pontuação: {self.player.points}  x{self.multiplier}")

        screen.set_color(Color.LIGHTRED, Color.BLACK)
        screen.gotoxy(SCRSTARTX + 25, SCRENDY)
        screen.write(f"Vidas: {self.lives}")

        if self.message.active:
            if self.clock() <= self.message.expires:
                screen.gotoxy(SCRSTARTX + 2, SCRENDY + 1)
                screen.set_color(Color.GREEN, Color.BLACK)
                screen.write(f"{self.message.line1:<{MESSAGE_WIDTH}}")
                screen.gotoxy(SCRSTARTX + 2, SCRENDY + 2)
                screen.write(f"{self.message.line2:<{MESSAGE_WIDTH}}")
            else:
                self.message.active = False
                blank = " " * MESSAGE_WIDTH
                screen.gotoxy(SCRSTARTX + 2, SCRENDY + 1)
                screen.write(blank)
                screen.gotoxy(SCRSTARTX + 2, SCRENDY + 2)
                screen.write(blank)

        screen.update()

    def run(self, name: str, keyboard: _KeySource, timer: _Ticker) -> int:
        """Play until quit, out of lives or out of time; save and show the ranking.

        Returns the final score.
        """
        self._reset()
        self.start_level()
        self.ghosts.reset(MAP_COLS, MAP_ROWS, self.rng)

        key = ""
        while key != "q" and self.ticks <= MAX_TICKS and self.lives > 0:
            if self.needs_render:
                self.render()
                self.needs_render = False

            if keyboard.hit():
                key = keyboard.read()
                self.move_player(key)
                self.freeze.check(self.freeze_item, self.player.x, self.player.y, self.screen)
                self.needs_render = True
                self.check_logic_collision()

            if timer.time_over():
                self.tick()

        save_ranking(self.ranking_path, name, self.player.points)

        screen = self.screen
        screen.clear()
        screen.set_color(Color.CYAN, Color.BLACK)
        screen.gotoxy(5, 2)
        screen.write(f"🎮 Fim de jogo, {name}! Sua pontuação final: {self.player.points}")
        render_ranking(screen, self.ranking_path)
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.gotoxy(5, MAXY - 2)
        screen.write("Pressione ENTER para sair...")
        screen.show_cursor()
        screen.update()
        return self.player.points


def _read_name() -> str:
    while True:
        try:
            line = input()
        except EOFError:
            return ""
        words = line.split()
        if words:
            return words[0][:NAME_LENGTH]


def main(argv: list[str] | None = None) -> int:
    """Start the game in the current terminal."""
    parser = argparse.ArgumentParser(description="Resolva expressões lógicas fugindo dos fantasmas.")
    parser.parse_args(argv)

    screen = Screen()
    try:
        screen.init(True)
        screen.hide_cursor()
        screen.gotoxy(10, 10)
        screen.set_color(Color.WHITE, Color.BLACK)
        screen.write("Digite seu nome: ")
        screen.update()
        name = _read_name()

        with Keyboard() as keyboard:
            game = Game(screen)
            game.run(name, keyboard, Timer(100))
            try:
                while keyboard.read() not in ("\n", "\r"):
                    pass
            except EOFError:
                pass
    finally:
        screen.destroy()
        screen.update()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())