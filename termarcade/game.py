"""The game loop shared by the invaders and frog crossing games."""

from __future__ import annotations

import os
import random
import sys
import time
from contextlib import contextmanager, nullcontext
from enum import IntEnum
from typing import Callable, ContextManager, Iterable, Iterator

from termarcade.entities import (
    Alien,
    AlienAttack,
    Barrier,
    FroggerPlayer,
    Missile,
    Player,
)
from termarcade.menu import Menu
from termarcade.obstacles import ObstacleField
from termarcade.screen import ConsoleWindow, ScreenBuffer

GROUND = 29
PLAYER = 28
BARRIER = 22
SPEED = 20

ALIEN_COUNT = 20
INVADERS_SIZE = (80, 30)
FROGGER_SIZE = (30, 16)
FROGGER_START = (15, 14)
INVADERS_START_X = 15
FROGGER_GROUND = 15
OBSTACLE_POOL = 300
BARRIER_OFFSETS = (10, 25, 40, 55)
BARRIER_GROUP = 5
RIVER_ROWS = frozenset({1, 2, 3, 4})
FRAME_DELAY = 1 / 30

GAME_OVER_TEXT = "GAME OVER! Please quit the game!\n"
WIN_TEXT = "YOU WIN! Please quit the game!\n"

# (pool base, first column, end column, row, speed, direction)
LANES = (
    (0, 0, 28, 1, 0.08, 1),
    (28, 0, 27, 2, 0.08, -1),
    (55, 0, 3, 3, 0.08, 1),
    (55, 6, 26, 3, 0.08, 1),
    (81, 0, 4, 4, 0.08, -1),
    (81, 6, 17, 4, 0.08, -1),
    (81, 19, 23, 4, 0.08, -1),
    (104, 8, 13, 6, 0.16, 1),
    (117, 4, 8, 7, 0.14, -1),
    (117, 16, 18, 7, 0.14, -1),
    (117, 21, 25, 7, 0.14, -1),
    (142, 2, 8, 8, 0.14, 1),
    (142, 20, 26, 8, 0.14, 1),
    (168, 7, 9, 9, 0.16, -1),
    (168, 23, 25, 9, 0.16, -1),
    (193, 13, 23, 10, 0.12, 1),
    (216, 9, 16, 11, 0.06, -1),
    (216, 24, 27, 11, 0.06, -1),
    (243, 17, 19, 12, 0.04, 1),
)

KeyPoll = Callable[[], Iterable[str]]


class GameState(IntEnum):
    STARTSCREEN = 0
    LEVEL1 = 1
    FROGGER = 2
    EXIT = 3
    FINISH = 4


PLAYING = (GameState.LEVEL1, GameState.FROGGER)


@contextmanager
def terminal_keys() -> Iterator[KeyPoll]:
    """Yield a function returning the keys typed since it was last called."""
    if sys.platform == "win32":
        import msvcrt

        def poll_windows() -> set[str]:
            keys = set()
            while msvcrt.kbhit():
                keys.add(msvcrt.getwch())
            return keys

        yield poll_windows
        return

    if not sys.stdin.isatty():
        yield set
        return

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)

    def poll_posix() -> set[str]:
        keys = set()
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 1)
            if not data:
                break
            keys.add(data.decode(errors="ignore"))
        return keys

    try:
        yield poll_posix
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class Game:
    """Both games, their pieces and the double-buffered screen."""

    def __init__(
        self,
        window: ConsoleWindow | None = None,
        menu: Menu | None = None,
        keys: KeyPoll | None = None,
        rng: random.Random | None = None,
        frame_delay: float = FRAME_DELAY,
    ) -> None:
        self.window = window if window is not None else ConsoleWindow()
        self.menu = menu if menu is not None else Menu()
        self.keys = keys
        self.rng = rng if rng is not None else random.Random()
        self.frame_delay = frame_delay

        self.state = GameState.STARTSCREEN
        self.setup_complete = False
        self.game_over = False
        self.win = False

        self.player = Player()
        self.missile = Missile()
        self.frogger = FroggerPlayer()
        self.aliens = [Alien() for _ in range(ALIEN_COUNT)]
        self.alien_attacks = [AlienAttack(rng=self.rng) for _ in range(ALIEN_COUNT)]
        self.barriers: list[Barrier] = []
        self.obstacles = ObstacleField(OBSTACLE_POOL)

        self.front = ScreenBuffer()
        self.back = ScreenBuffer()
        self.blank = ScreenBuffer()

    def initialise(self) -> None:
        self.window.configure(*INVADERS_SIZE)
        self.create_buffers(*INVADERS_SIZE)
        self.state = GameState.STARTSCREEN

    def setup(self) -> None:
        """Lay out the chosen game once."""
        if self.setup_complete:
            return
        if self.state is GameState.LEVEL1:
            self.window.configure(*INVADERS_SIZE)
            self.create_buffers(*INVADERS_SIZE)
            self.reset_player_position()
            self.place_aliens()
            self.place_barriers()
        elif self.state is GameState.FROGGER:
            self.window.configure(*FROGGER_SIZE)
            self.create_buffers(*FROGGER_SIZE)
            self.reset_player_position()
            self.place_cars()
        self.setup_complete = True

    def reset_player_position(self) -> None:
        if self.state is GameState.LEVEL1:
            self.player.x = INVADERS_START_X
            self.player.y = PLAYER
        if self.state is GameState.FROGGER:
            self.frogger.x, self.frogger.y = FROGGER_START

    def place_aliens(self) -> None:
        for index, alien in enumerate(self.aliens):
            alien.x = index * 3
            alien.y = 1

    def place_barriers(self) -> None:
        self.barriers = [
            Barrier(x=group * BARRIER_GROUP + part + offset, y=BARRIER)
            for group, offset in enumerate(BARRIER_OFFSETS)
            for part in range(BARRIER_GROUP)
        ]

    def place_cars(self) -> None:
        self.obstacles = ObstacleField(OBSTACLE_POOL)
        for obstacle in self.obstacles:
            obstacle.active = False
        for base, first, end, row, speed, direction in LANES:
            self.obstacles.set_lane(base + first, base + end, -base, row, speed, direction)
            for index in range(base + first, base + end):
                self.obstacles[index].active = True

    def create_buffers(self, width: int, height: int) -> None:
        self.blank = ScreenBuffer(width, height, " ")
        self.front = self.blank.copy()
        self.back = self.blank.copy()

    def process_input(self, pressed: Iterable[str]) -> None:
        keys = set(pressed)
        if self.state is GameState.LEVEL1:
            self.player.update(keys)
            self.missile.fire(self.player, keys)
        if self.state is GameState.FROGGER:
            self.frogger.update(keys)

    def update(self) -> None:
        if self.state is GameState.LEVEL1:
            self.missile.update()
            for alien, attack in zip(self.aliens, self.alien_attacks):
                if alien.active:
                    alien.update()
                    attack.attack(alien)
                    attack.update()
                else:
                    attack.active = False
            if not any(alien.active for alien in self.aliens):
                self.win = True
                self.state = GameState.FINISH
        if self.state is GameState.FROGGER:
            self.obstacles.update()
            width = self.window.width
            for obstacle in self.obstacles:
                if obstacle.col >= width:
                    obstacle.x = 0
                elif obstacle.col < 0:
                    obstacle.x = width

    def check_collisions(self) -> None:
        if self.state is GameState.LEVEL1:
            self._check_invaders()
        if self.state is GameState.FROGGER:
            self._check_frogger()

    def _check_invaders(self) -> None:
        if self.missile.active:
            shot = self.missile.cell
            for alien in self.aliens:
                if alien.active and alien.cell == shot:
                    alien.active = False
                    self.missile.active = False
            for barrier in self.barriers:
                if barrier.active and barrier.cell == shot:
                    self.missile.active = False

        for attack in self.alien_attacks:
            if not attack.active:
                continue
            if attack.cell == self.player.cell:
                self.game_over = True
                self.state = GameState.FINISH
            for barrier in self.barriers:
                if barrier.active and barrier.cell == attack.cell:
                    barrier.active = False
                    attack.active = False

    def _check_frogger(self) -> None:
        frog = self.frogger.cell
        if any(car.active and car.cell == frog for car in self.obstacles):
            self.game_over = True
            self.state = GameState.FINISH
        if self.frogger.row == 0:
            self.win = True
            self.state = GameState.FINISH

    def _plot(self, x: int, y: int, char: str) -> None:
        if 0 <= x < self.back.width and 0 <= y < self.back.height:
            self.back.set(x, y, char)

    def render(self) -> None:
        """Draw every visible piece into the back buffer."""
        if self.state is GameState.LEVEL1:
            self._plot(self.player.col, PLAYER, "^")
            for alien in self.aliens:
                if alien.active:
                    self._plot(alien.col, alien.row, "X")
            for barrier in self.barriers:
                if barrier.active:
                    self._plot(barrier.col, BARRIER, "=")
            if self.missile.active:
                self._plot(self.missile.col, self.missile.row, "|")
            for attack in self.alien_attacks:
                if attack.active:
                    self._plot(attack.col, attack.row, "$")
            for x in range(self.back.width):
                self._plot(x, GROUND, "-")
        if self.state is GameState.FROGGER:
            for car in self.obstacles:
                if car.active:
                    self._plot(car.col, car.row, "~" if car.row in RIVER_ROWS else "=")
            self._plot(self.frogger.col, self.frogger.row, "8")
            for x in range(self.back.width):
                self._plot(x, FROGGER_GROUND, "-")

    def swap_buffers(self) -> None:
        self.front = self.back
        self.back = self.blank.copy()

    def draw(self) -> None:
        stream = self.window.stream
        for y, line in enumerate(self.front.lines()):
            self.window.move_cursor(0, y)
            stream.write(line)
        stream.flush()

    def set_state(self, value: int) -> None:
        """Switch state; raises ValueError for an unknown state number."""
        self.state = GameState(int(value))

    def step(self, pressed: Iterable[str] = ()) -> None:
        """Run one frame of the current game."""
        self.setup()
        self.process_input(pressed)
        self.update()
        self.check_collisions()
        self.render()
        self.swap_buffers()
        self.draw()

    def _key_source(self) -> ContextManager[KeyPoll]:
        if self.keys is not None:
            return nullcontext(self.keys)
        return terminal_keys()

    def _play(self) -> None:
        with self._key_source() as poll:
            while self.state in PLAYING:
                self.step(poll())
                if self.frame_delay > 0:
                    time.sleep(self.frame_delay)

    def _finish(self) -> None:
        stream = self.window.stream
        if self.game_over:
            self.window.clear()
            stream.write(GAME_OVER_TEXT)
            self.game_over = False
        if self.win:
            self.window.clear()
            stream.write(WIN_TEXT)
            self.win = False
        stream.flush()
        self.state = GameState.EXIT

    def run(self) -> None:
        """Show the menu, play the chosen game and report how it ended."""
        try:
            while self.state is not GameState.EXIT:
                if self.state is GameState.STARTSCREEN:
                    self.set_state(self.menu.run())
                elif self.state in PLAYING:
                    self._play()
                else:
                    self._finish()
        finally:
            self.window.stream.write("\x1b[?25h")
            self.window.stream.flush()