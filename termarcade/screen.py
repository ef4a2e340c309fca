"""Character screen buffers and a terminal window driven by ANSI escapes."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

TITLE = "Terminal Arcade"


class ScreenBuffer:
    """A width by height grid of single characters, addressed as (x, y)."""

    def __init__(self, width: int = 0, height: int = 0, fill: str = " ") -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid size {width}x{height}")
        _check_char(fill)
        self.width = width
        self.height = height
        self._rows = [[fill] * width for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside a {self.width}x{self.height} buffer")

    def get(self, x: int, y: int) -> str:
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, value: str) -> None:
        self._check(x, y)
        _check_char(value)
        self._rows[y][x] = value

    def fill(self, value: str) -> None:
        _check_char(value)
        for row in self._rows:
            row[:] = [value] * self.width

    def copy(self) -> ScreenBuffer:
        other = ScreenBuffer(self.width, self.height)
        other._rows = [list(row) for row in self._rows]
        return other

    def lines(self) -> Iterator[str]:
        """Yield each row as a string, top to bottom."""
        for row in self._rows:
            yield "".join(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScreenBuffer):
            return NotImplemented
        return (self.width, self.height, self._rows) == (
            other.width,
            other.height,
            other._rows,
        )

    def __repr__(self) -> str:
        return f"ScreenBuffer({self.width}, {self.height})"


def _check_char(value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")


class ConsoleWindow:
    """The terminal the game draws into."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = 0
        self.height = 0

    def configure(self, width: int, height: int) -> None:
        """Record the play area, set the title, resize and hide the cursor."""
        self.width = width
        self.height = height
        self.stream.write(f"\x1b]0;{TITLE}\x07")
        self.stream.write(f"\x1b[8;{height};{width}t")
        self.stream.write("\x1b[?25l")
        self.stream.flush()

    def move_cursor(self, x: int, y: int) -> None:
        self.stream.flush()
        self.stream.write(f"\x1b[{y + 1};{x + 1}H")

    def clear(self) -> None:
        self.stream.write("\x1b[2J\x1b[H")
        self.stream.flush()