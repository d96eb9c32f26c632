"""Snake movement, eating and collision rules."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import TextIO

from .board import APPLE, EMPTY, Board, Point
from .tail import Tail
from .terminal import clear_screen, overwrite

HEAD = "@"
SEGMENT = "O"
START_DELAY_MS = 500


class Direction(str, Enum):
    """Heading of the snake, keyed by the letter that selects it."""

    LEFT = "A"
    UP = "W"
    DOWN = "S"
    RIGHT = "D"


_DELTAS = {
    Direction.LEFT: (-2, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (2, 0),
}


def _parse_direction(key: str | Direction) -> Direction:
    if isinstance(key, Direction):
        return key
    return Direction(key.upper())


def next_delay(delay: int, score: int) -> int:
    """Return the tick delay in milliseconds after the score changed to ``score``."""
    if score <= 10:
        step = 10
    elif score <= 20:
        step = 9
    elif score <= 30:
        step = 8
    elif score <= 40:
        step = 7
    elif score <= 50:
        step = 6
    else:
        step = 1
    return delay - step


class Game:
    """A snake on a board, advanced one cell per :meth:`step`."""

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        *,
        direction: str | Direction = Direction.UP,
        rng: random.Random | None = None,
        stream: TextIO | None = None,
        apples: bool = True,
    ) -> None:
        if width % 2:
            raise ValueError("board width must be even")
        self.board = Board(width, height, rng=rng, stream=stream)
        self.stream = stream
        self.tail = Tail()
        self.direction = _parse_direction(direction)
        self.position = Point(width, height // 2)
        self.board[self.position] = HEAD
        if apples:
            self.board.place_initial_apples()

    @property
    def score(self) -> int:
        return self.board.score

    @property
    def _status(self) -> Point:
        return Point(7, self.board.height)

    def set_direction(self, key: str | Direction) -> bool:
        """Turn the snake if ``key`` names a direction; report whether it did."""
        try:
            direction = _parse_direction(key)
        except ValueError:
            return False
        with self.board.lock:
            self.direction = direction
        return True

    def _at_wall(self) -> bool:
        x, y = self.position
        if self.direction is Direction.UP:
            return y == 0
        if self.direction is Direction.DOWN:
            return y == self.board.height - 1
        if self.direction is Direction.RIGHT:
            return x == self.board.width * 2 - 2
        return x == 0

    def step(self) -> bool:
        """Move one cell in the current direction; return ``True`` when the game is over."""
        with self.board.lock:
            if self._at_wall():
                return True
            dx, dy = _DELTAS[self.direction]
            target = Point(self.position.x + dx, self.position.y + dy)
            return self._move(target)

    def _move(self, target: Point) -> bool:
        board = self.board
        cell = board[target]
        if cell == SEGMENT:
            return True

        ate = cell == APPLE
        if ate:
            self.tail.grow(self.position)
            board.score += 1
            overwrite(self._status, self._status, str(board.score), self.stream)

        left_behind = SEGMENT if self.tail else EMPTY
        board[target] = HEAD
        board[self.position] = left_behind

        if ate:
            board.spawn_apple()

        overwrite(self.position, self._status, left_behind, self.stream)
        if self.direction in (Direction.LEFT, Direction.RIGHT):
            head_cursor = Point(7, board.height + 1)
        else:
            head_cursor = self._status
        overwrite(target, head_cursor, HEAD, self.stream)

        if not ate:
            freed = self.tail.advance(self.position)
            if freed is not None:
                board[freed] = EMPTY
                overwrite(freed, board.cursor_rest, EMPTY, self.stream)

        self.position = target
        return False

    def render(self) -> None:
        """Clear the screen and draw the whole board followed by the score."""
        out = sys.stdout if self.stream is None else self.stream
        clear_screen(out)
        with self.board.lock:
            for row in self.board.rows():
                out.write(row + "\n")
            out.write(f"Score: {self.score}")
        out.flush()