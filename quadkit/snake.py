"""Grid snake game logic: steering, timed movement, fruit and collisions."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum

Point = tuple[int, int]

_START_SPEED = 0.3
_FRUIT_SCORE = 100
_SPEEDUP = 0.9


class Direction(Enum):
    """A unit step on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


class SnakeGame:
    """Snake on a square board of squares x squares cells."""

    def __init__(self, squares: int = 16, rng: random.Random | None = None, now: float = 0.0) -> None:
        if squares <= 0:
            raise ValueError("board size must be positive")
        self.squares = squares
        self._rng = rng or random.Random()
        self.reset(now)

    def _random_cell(self) -> Point:
        return (self._rng.randrange(self.squares), self._rng.randrange(self.squares))

    def reset(self, now: float) -> None:
        """Start a new game at time now."""
        self.head: Point = (0, 0)
        self.body: deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.fruit = self._random_cell()
        self.score = 0
        self.speed = _START_SPEED
        self.last_update = now
        self.game_over = False

    def steer(self, direction: Direction) -> None:
        """Turn, unless that would reverse straight back into the body."""
        if not self.game_over and direction is not self.direction.opposite:
            self.direction = direction

    def tick(self, now: float) -> bool:
        """Move one cell if the step interval has passed; return True if it moved."""
        if self.game_over or now - self.last_update <= self.speed:
            return False

        self.last_update = now
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction.dx, self.head[1] + self.direction.dy)
        if self.head == self.fruit:
            self.fruit = self._random_cell()
            self.score += _FRUIT_SCORE
            self.speed *= _SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares) or self.head in self.body:
            self.game_over = True
        return True