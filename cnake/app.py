"""Command-line entry: runs the game with one thread for movement and one for keys."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from typing import Callable

from .game import START_DELAY_MS, Game, next_delay

_POLL_SECONDS = 0.1


def _read_key_windows() -> str | None:
    import msvcrt

    if not msvcrt.kbhit():
        time.sleep(_POLL_SECONDS)
        return None
    return msvcrt.getwch()


def _read_key_posix() -> str | None:
    import select

    fd = sys.stdin.fileno()
    if not os.isatty(fd):
        return os.read(fd, 1).decode(errors="ignore")

    import termios
    import tty

    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ready, _, _ = select.select([fd], [], [], _POLL_SECONDS)
        if not ready:
            return None
        return os.read(fd, 1).decode(errors="ignore")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def read_key() -> str | None:
    """Read one key without echo.

    Returns ``None`` when no key arrived within a short poll and ``""`` at end of input.
    """
    if sys.platform == "win32":
        return _read_key_windows()
    return _read_key_posix()


def movement_loop(
    game: Game,
    stop: threading.Event,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Advance the snake until it crashes or ``stop`` is set; return the final score."""
    delay = START_DELAY_MS
    seen_score = game.score
    while not stop.is_set():
        if game.step():
            stop.set()
            break
        if game.score != seen_score:
            delay = next_delay(delay, game.score)
            seen_score = game.score
        sleep(delay / 1000)
    return game.score


def input_loop(
    game: Game,
    stop: threading.Event,
    read_key: Callable[[], str | None] = read_key,
) -> None:
    """Feed direction keys to ``game`` until ``stop`` is set or input ends."""
    while not stop.is_set():
        key = read_key()
        if key is None:
            continue
        if key == "":
            break
        game.set_direction(key)


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cnake", description="Snake in the terminal.")
    parser.add_argument("--width", type=_positive, default=20, help="cells per row (even)")
    parser.add_argument("--height", type=_positive, default=20, help="number of rows")
    args = parser.parse_args(argv)

    try:
        game = Game(args.width, args.height)
    except ValueError as exc:
        parser.error(str(exc))

    game.render()
    stop = threading.Event()
    mover = threading.Thread(target=movement_loop, args=(game, stop), name="movement")
    reader = threading.Thread(
        target=input_loop, args=(game, stop), name="direction", daemon=True
    )
    mover.start()
    reader.start()

    try:
        while mover.is_alive():
            mover.join(_POLL_SECONDS)
    except KeyboardInterrupt:
        stop.set()
        mover.join()
    stop.set()
    reader.join()

    print("Game over!")
    return 0


if __name__ == "__main__":
    sys.exit(main())