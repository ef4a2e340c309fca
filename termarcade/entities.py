"""Moving pieces of the arcade games: aliens, shots, barriers and players."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import ClassVar, Iterable

KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_UP = "w"
KEY_DOWN = "s"
KEY_FIRE = " "

ALIEN_FIRE_ROLL = 200
ATTACK_FLOOR = 29
INVADERS_MAX_X = 79
FROGGER_MAX_X = 29
FROGGER_MAX_Y = 14


def _normalise(pressed: Iterable[str]) -> set[str]:
    return {key.lower() for key in pressed}


@dataclass
class GameObject:
    """Something with a position on the playfield."""

    x: float = 0.0
    y: float = 0.0

    @property
    def col(self) -> int:
        """Column of the object, truncated towards zero."""
        return int(self.x)

    @property
    def row(self) -> int:
        """Row of the object, truncated towards zero."""
        return int(self.y)

    @property
    def cell(self) -> tuple[int, int]:
        return self.col, self.row

    def update(self) -> None:
        """Advance one frame; plain objects stay put."""

    def draw(self) -> None:
        sys.stdout.write("called from base\n")


@dataclass
class Alien(GameObject):
    """An invader. Speed and direction are shared by every alien."""

    active: bool = True

    speed: ClassVar[float] = 0.0
    direction: ClassVar[float] = 1.0

    def update(self) -> None:
        cls = type(self)
        self.x += cls.speed * cls.direction

    def move_down(self) -> None:
        self.y += 1

    def draw(self) -> None:
        sys.stdout.write("X")


@dataclass
class AlienAttack(GameObject):
    """A bomb dropped by an alien."""

    active: bool = False
    chance_to_fire: int = 1
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def attack(self, alien: Alien) -> None:
        """Maybe drop a bomb from just below the alien."""
        if self.active:
            return
        roll = self.rng.randint(1, ALIEN_FIRE_ROLL)
        if roll <= self.chance_to_fire:
            self.x = alien.col
            self.y = alien.row + 1
            self.active = True

    def update(self) -> None:
        if not self.active:
            return
        if self.y < ATTACK_FLOOR:
            self.y += 1
        else:
            self.active = False


@dataclass
class Barrier(GameObject):
    """One block of a defensive barrier."""

    active: bool = True


@dataclass
class Missile(GameObject):
    """The player's shot, travelling upwards."""

    active: bool = False

    def fire(self, player: GameObject, pressed: Iterable[str]) -> None:
        """Launch from just above the player when fire is held and no shot is in flight."""
        if self.active:
            return
        if KEY_FIRE in _normalise(pressed):
            self.x = player.col
            self.y = player.row - 1
            self.active = True

    def update(self) -> None:
        if not self.active:
            return
        if self.y > 0:
            self.y -= 1
        else:
            self.active = False


@dataclass
class Player(GameObject):
    """The cannon at the bottom of the invaders screen."""

    x: float = 10

    def update(self, pressed: Iterable[str] = ()) -> None:
        keys = _normalise(pressed)
        if KEY_LEFT in keys:
            if self.x > 0:
                self.x -= 1
        elif KEY_RIGHT in keys:
            if self.x < INVADERS_MAX_X:
                self.x += 1


@dataclass
class FroggerPlayer(GameObject):
    """The frog; moves one cell per key press, not per frame."""

    x: float = 10
    key_held: bool = False

    def update(self, pressed: Iterable[str] = ()) -> None:
        keys = _normalise(pressed)
        if KEY_LEFT in keys:
            if self.x > 0 and not self.key_held:
                self.x -= 1
                self.key_held = True
        elif KEY_RIGHT in keys:
            if self.x < FROGGER_MAX_X and not self.key_held:
                self.x += 1
                self.key_held = True
        elif KEY_DOWN in keys:
            if self.y < FROGGER_MAX_Y and not self.key_held:
                self.y += 1
                self.key_held = True
        elif KEY_UP in keys:
            if self.y > 0 and not self.key_held:
                self.y -= 1
                self.key_held = True
        else:
            self.key_held = False


@dataclass
class Ground:
    """The floor line."""

    def draw(self) -> None:
        sys.stdout.write("_")