"""The snake's body as a first-in, first-out queue of cells."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .board import Point


class Tail:
    """Body segments ordered from the oldest to the newest."""

    def __init__(self, segments: Iterable[Point] = ()) -> None:
        self._segments: deque[Point] = deque(Point(*s) for s in segments)

    def grow(self, point: Point) -> None:
        """Add a new segment at ``point`` without dropping one."""
        self._segments.append(Point(*point))

    def advance(self, point: Point) -> Point | None:
        """Drop the oldest segment and add ``point``; return the cell freed.

        An empty tail stays empty and ``None`` is returned.
        """
        if not self._segments:
            return None
        freed = self._segments.popleft()
        self._segments.append(Point(*point))
        return freed

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._segments)