"""The apple: placement, detection of the snake's head, drawing and eating."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

import pygame

from snakegame.channels import Drawer, Notifiable
from snakegame.position import Pos, PositionManager

_APPLE_COLOUR = (255, 0, 0, 255)


class Rander:
    """A source of uniformly distributed random integers."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Return an integer in the closed range [low, high]."""
        return self._random.randint(low, high)


class AppleMover(ABC):
    """Something that places the apple somewhere new."""

    @abstractmethod
    def move_apple(self) -> None:
        """Put the apple at a new position."""


class SnakeDetecting(ABC):
    """Something that knows whether the snake has reached the apple."""

    @abstractmethod
    def is_eaten(self) -> bool:
        """Return True if the snake's head touches the apple."""


class Mover(AppleMover):
    """Places the apple at a random spot at least one square from each window edge."""

    def __init__(
        self,
        win_width: int,
        win_height: int,
        square_size: int,
        rander: Rander,
        apple_pos: PositionManager,
    ) -> None:
        self.win_width = win_width
        self.win_height = win_height
        self.square_size = square_size
        self.rander = rander
        self.apple_pos = apple_pos

    def move_apple(self) -> None:
        x = self.rander.randint(self.square_size, self.win_width - self.square_size)
        y = self.rander.randint(self.square_size, self.win_height - self.square_size)
        self.apple_pos.position = Pos(x, y)


class SnakeDetector(SnakeDetecting):
    """Reports the apple eaten when the head overlaps it by any amount."""

    def __init__(
        self,
        snake_positions: list[Pos],
        apple_pos: PositionManager,
        square_length: int,
    ) -> None:
        self.snake_positions = snake_positions
        self.apple_pos = apple_pos
        self.square_length = square_length

    def is_eaten(self) -> bool:
        head = self.snake_positions[0]
        apple = self.apple_pos.position
        return (
            abs(head.x - apple.x) < self.square_length
            and abs(head.y - apple.y) < self.square_length
        )


class AppleDrawer(Drawer):
    """Draws the apple as a red square."""

    def __init__(
        self, apple_pos: PositionManager, square_length: int, surface: pygame.Surface
    ) -> None:
        self.apple_pos = apple_pos
        self.square_length = square_length
        self.surface = surface

    def draw(self) -> None:
        pos = self.apple_pos.position
        rect = pygame.Rect(pos.x, pos.y, self.square_length, self.square_length)
        pygame.draw.rect(self.surface, _APPLE_COLOUR, rect)


class AppleGO:
    """The apple game object: announces being eaten, moves on, and draws itself."""

    def __init__(
        self,
        snake_detector: SnakeDetecting,
        mover: AppleMover,
        drawer: Drawer,
        channel: Notifiable,
    ) -> None:
        self.snake_detector = snake_detector
        self.mover = mover
        self.drawer = drawer
        self.channel = channel
        self.mover.move_apple()

    def update(self) -> None:
        if self.snake_detector.is_eaten():
            self.channel.notify()
            self.mover.move_apple()
        self.drawer.draw()


class AppleCreator:
    """Builds an apple wired to the snake's positions and the apple channel."""

    def __init__(
        self,
        win_width: int,
        win_height: int,
        square_length: int,
        apple_eat_channel: Notifiable,
        surface: pygame.Surface,
        snake_positions: list[Pos],
    ) -> None:
        self.win_width = win_width
        self.win_height = win_height
        self.square_length = square_length
        self.apple_eat_channel = apple_eat_channel
        self.surface = surface
        self.snake_positions = snake_positions

    def create_apple(self) -> AppleGO:
        apple_pos = PositionManager()
        detector = SnakeDetector(self.snake_positions, apple_pos, self.square_length)
        mover = Mover(
            self.win_width, self.win_height, self.square_length, Rander(), apple_pos
        )
        drawer = AppleDrawer(apple_pos, self.square_length, self.surface)
        return AppleGO(detector, mover, drawer, self.apple_eat_channel)