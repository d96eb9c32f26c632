"""The playing field: a grid of cells, apples and the shared score."""

from __future__ import annotations

import math
import random
import threading
from typing import Iterator, NamedTuple, TextIO

from .terminal import overwrite

EMPTY = "."
APPLE = "+"
GAP = " "


class Point(NamedTuple):
    """A position in character columns (``x``) and rows (``y``)."""

    x: int
    y: int


class Board:
    """Grid of ``height`` rows, each ``2 * width - 1`` characters wide.

    Playable cells sit on even columns; odd columns are spacing.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        *,
        rng: random.Random | None = None,
        stream: TextIO | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.score = 0
        self.rng = rng if rng is not None else random.Random()
        self.stream = stream
        self.lock = threading.RLock()
        row_len = width * 2 - 1
        self._cells = [
            [EMPTY if col % 2 == 0 else GAP for col in range(row_len)]
            for _ in range(height)
        ]

    def _check(self, point: Point) -> tuple[int, int]:
        x, y = point
        if not (0 <= y < self.height and 0 <= x < len(self._cells[0])):
            raise IndexError(f"cell {tuple(point)} is outside the board")
        return x, y

    def __getitem__(self, point: Point) -> str:
        x, y = self._check(point)
        return self._cells[y][x]

    def __setitem__(self, point: Point, value: str) -> None:
        x, y = self._check(point)
        if len(value) != 1:
            raise ValueError("a cell holds exactly one character")
        self._cells[y][x] = value

    def rows(self) -> Iterator[str]:
        """Yield each row as the text shown on screen."""
        for row in self._cells:
            yield "".join(row)

    @property
    def cursor_rest(self) -> Point:
        return Point(self.width, self.height)

    def random_free_cell(self) -> Point:
        """Pick a random empty cell on every other playable column."""
        candidates = [
            Point(w * 2, h)
            for h in range(self.height)
            for w in range(0, self.width, 2)
            if self._cells[h][w * 2] == EMPTY
        ]
        if not candidates:
            raise ValueError("no free cell left for an apple")
        return self.rng.choice(candidates)

    def _apple_limit(self) -> float:
        area = self.width * self.height
        return area - math.sqrt(area) / 2 - 1

    def place_initial_apples(self) -> list[Point]:
        """Scatter the opening apples; their number grows with the board's size."""
        count = int(math.sqrt(self.height * self.width) / 2)
        placed = []
        for _ in range(count):
            point = self.spawn_apple(self.random_free_cell())
            if point is not None:
                placed.append(point)
        return placed

    def spawn_apple(self, point: Point | None = None) -> Point | None:
        """Put an apple at ``point`` (or a random free cell) and draw it.

        Returns the apple's position, or ``None`` once the score leaves no room.
        """
        if self._apple_limit() <= self.score:
            return None
        if point is None:
            point = self.random_free_cell()
        point = Point(*point)
        with self.lock:
            self[point] = APPLE
            overwrite(point, self.cursor_rest, APPLE, self.stream)
        return point