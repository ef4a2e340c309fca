"""Lanes of moving obstacles for the frog crossing game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from termarcade.entities import GameObject


@dataclass
class Obstacle(GameObject):
    """A single cell of a car or a log."""

    active: bool = True
    speed: float = 0.0
    direction: int = 0

    def set_lane_properties(self, speed: float, direction: int) -> None:
        self.speed = speed
        self.direction = direction


class ObstacleField:
    """A fixed-size pool of obstacle cells, filled lane by lane."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.obstacles = [Obstacle() for _ in range(size)]

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        return self.obstacles[index]

    def set_lane(
        self,
        min_x: int,
        max_x: int,
        offset: int,
        y: int,
        speed: float,
        direction: int,
    ) -> None:
        """Place obstacles min_x..max_x-1 at column index + offset on row y."""
        if min_x < 0 or max_x > len(self.obstacles):
            raise IndexError(
                f"lane {min_x}..{max_x} outside a field of {len(self.obstacles)}"
            )
        for index in range(min_x, max_x):
            obstacle = self.obstacles[index]
            obstacle.x = index + offset
            obstacle.y = y
            obstacle.set_lane_properties(speed, direction)

    def update(self) -> None:
        for obstacle in self.obstacles:
            obstacle.x += obstacle.speed * obstacle.direction