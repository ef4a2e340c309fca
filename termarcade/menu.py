"""The start screen where the player picks a game."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from termarcade.screen import ConsoleWindow

PROMPT = (
    "Start Screen:\n"
    "1. Space Invaders\n"
    "2. Frogger\n"
    "3. Quit\n"
    "Enter your choice: "
)
INVALID = "Invalid choice. Please try again.\n"
CONTINUE = "Press any key to continue...\n"


class MenuChoice(IntEnum):
    """What the start screen can hand back."""

    SPACE_INVADERS = 1
    FROGGER = 2
    QUIT = 3


def _parse(line: str) -> MenuChoice | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return MenuChoice(int(tokens[0]))
    except ValueError:
        return None


class Menu:
    """Asks for a game until a valid choice is made."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None) -> None:
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self._window = ConsoleWindow(self.output)

    def run(self) -> MenuChoice:
        """Show the menu and return the chosen entry.

        Raises EOFError when the input runs out before a valid choice.
        """
        while True:
            self._window.clear()
            self.output.write(PROMPT)
            self.output.flush()
            line = self.input.readline()
            if not line:
                raise EOFError("input ended before a menu choice was made")
            choice = _parse(line)
            if choice is not None:
                self._window.clear()
                return choice
            self.output.write(INVALID)
            self.output.write(CONTINUE)
            self.output.flush()
            if not self.input.readline():
                raise EOFError("input ended before a menu choice was made")