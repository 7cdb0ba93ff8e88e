"""The snake: steering, movement, growth and drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import pygame

from snakegame.channels import AppleEatChannel, Drawer, Key, KeyDownChannel
from snakegame.position import Pos

Direction = tuple[int, int]

_SNAKE_COLOUR = (0, 255, 0, 255)
_INITIAL_X = 128
_INITIAL_Y = 128
_GROWTH_POS = Pos(-100, -100)

_KEY_DIRECTIONS: dict[int, Direction] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


class DirectionSource(ABC):
    """Supplies the direction the snake moves in each step."""

    @property
    @abstractmethod
    def direction(self) -> Direction:
        """The current direction as (dx, dy)."""

    @abstractmethod
    def process_queued_direction(self) -> None:
        """Advance to the next step, applying any buffered input."""


def _turn_allowed(current: Direction, wanted: Direction) -> bool:
    # Vertical turns need horizontal motion (or none), and vice versa.
    if wanted[0] == 0:
        return current[1] == 0
    return current[0] == 0


class DirectionManager(DirectionSource):
    """Turns arrow-key presses into a direction, one turn per step plus one buffered turn."""

    def __init__(self, key_down_channel: KeyDownChannel) -> None:
        self._direction: Direction = (0, 0)
        self._queued: Optional[Direction] = None
        self._set_this_turn = False
        key_down_channel.subscribe_to_key_down(self._set_direction)

    @property
    def direction(self) -> Direction:
        return self._direction

    def _set_direction(self, key: int) -> None:
        wanted = _KEY_DIRECTIONS.get(key)
        if wanted is None or not _turn_allowed(self._direction, wanted):
            return
        if self._set_this_turn:
            self._queued = wanted
        else:
            self._direction = wanted
            self._set_this_turn = True

    def process_queued_direction(self) -> None:
        if self._queued is not None:
            self._direction = self._queued
            self._queued = None
        else:
            self._set_this_turn = False


class HeadUpdater:
    """Moves the head one square from the segment behind it."""

    def __init__(
        self,
        positions: list[Pos],
        direction_manager: DirectionSource,
        square_length: int,
    ) -> None:
        self.positions = positions
        self.direction_manager = direction_manager
        self.square_length = square_length

    def update_head(self) -> None:
        dx, dy = self.direction_manager.direction
        self.direction_manager.process_queued_direction()
        neck = self.positions[1]
        self.positions[0] = Pos(
            neck.x + self.square_length * dx,
            neck.y + self.square_length * dy,
        )


class TailRemover:
    """Shifts every segment into the place of the one ahead of it."""

    def __init__(self, positions: list[Pos]) -> None:
        self.positions = positions

    def remove_tail(self) -> None:
        self.positions[1:] = self.positions[:-1]


class SnakeDrawer(Drawer):
    """Draws each segment as a green square."""

    def __init__(
        self, positions: list[Pos], square_length: int, surface: pygame.Surface
    ) -> None:
        self.positions = positions
        self.square_length = square_length
        self.surface = surface

    def draw(self) -> None:
        for segment in self.positions:
            rect = pygame.Rect(
                segment.x, segment.y, self.square_length, self.square_length
            )
            pygame.draw.rect(self.surface, _SNAKE_COLOUR, rect)


class SnakeGO:
    """The snake game object: moves, draws and grows when an apple is eaten."""

    def __init__(
        self,
        head_updater: HeadUpdater,
        drawer: Drawer,
        apple_eat_channel: AppleEatChannel,
        positions: list[Pos],
        tail_remover: TailRemover,
    ) -> None:
        self.head_updater = head_updater
        self.drawer = drawer
        self.positions = positions
        self.tail_remover = tail_remover
        apple_eat_channel.subscribe(self._handle_apple_eaten)

    def _handle_apple_eaten(self) -> None:
        self.positions.append(_GROWTH_POS)

    def update(self) -> None:
        self.tail_remover.remove_tail()
        self.head_updater.update_head()
        self.drawer.draw()


class SnakeCreator:
    """Builds a three-segment snake wired to input and the apple channel."""

    def __init__(
        self,
        square_length: int,
        key_down_channel: KeyDownChannel,
        apple_eat_channel: AppleEatChannel,
        surface: pygame.Surface,
    ) -> None:
        self.square_length = square_length
        self.key_down_channel = key_down_channel
        self.apple_eat_channel = apple_eat_channel
        self.surface = surface

    def create_snake(self) -> SnakeGO:
        length = self.square_length
        positions = [
            Pos(_INITIAL_X - i * length, _INITIAL_Y) for i in range(3)
        ]
        direction_manager = DirectionManager(self.key_down_channel)
        head_updater = HeadUpdater(positions, direction_manager, length)
        drawer = SnakeDrawer(positions, length, self.surface)
        tail_remover = TailRemover(positions)
        return SnakeGO(
            head_updater, drawer, self.apple_eat_channel, positions, tail_remover
        )