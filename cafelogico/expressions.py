"""Logic expressions and their truth tables, grouped by difficulty."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class LogicalExpression:
    """An expression in A and B with its truth table for (A,B) = 00, 01, 10, 11."""

    text: str
    truth_table: tuple[int, int, int, int]


_EASY = (
    LogicalExpression("A ∧ B", (0, 0, 0, 1)),
    LogicalExpression("A ∨ B", (0, 1, 1, 1)),
)

_MEDIUM = (
    LogicalExpression("A ∧ ¬B", (0, 0, 1, 0)),
    LogicalExpression("¬A ∨ B", (1, 1, 0, 1)),
    LogicalExpression("(A ∧ B) ∨ A", (0, 0, 1, 1)),
)

_HARD = (
    LogicalExpression("¬(A ∨ B)", (1, 0, 0, 0)),
    LogicalExpression("(A ∧ B) ∨ ¬A", (1, 1, 0, 1)),
    LogicalExpression("¬(A ∧ B) ∧ B", (0, 1, 0, 0)),
)


def expressions_for_level(level: int) -> tuple[LogicalExpression, ...]:
    """Expressions for a level: 1 is easy, 2 medium, anything else hard."""
    if level == 1:
        return _EASY
    if level == 2:
        return _MEDIUM
    return _HARD


def random_expression(level: int, rng: random.Random | None = None) -> LogicalExpression:
    """Pick a random expression of the given level."""
    chooser = rng if rng is not None else random
    return chooser.choice(expressions_for_level(level))