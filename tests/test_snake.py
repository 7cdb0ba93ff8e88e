import pygame
import pytest

from snakegame.channels import AppleEatChannel, Drawer, Key, KeyDownChannel
from snakegame.position import Pos
from snakegame.snake import (
    DirectionManager,
    DirectionSource,
    HeadUpdater,
    SnakeCreator,
    SnakeDrawer,
    SnakeGO,
    TailRemover,
)


class MockKeyDownChannel(KeyDownChannel):
    def __init__(self):
        self.callbacks = []

    def subscribe_to_key_down(self, callback):
        self.callbacks.append(callback)

    def press(self, key):
        for callback in self.callbacks:
            callback(key)


class MockDirectionSource(DirectionSource):
    def __init__(self, direction=(0, 0)):
        self._direction = direction
        self.processed = 0

    @property
    def direction(self):
        return self._direction

    def set_direction(self, direction):
        self._direction = direction

    def process_queued_direction(self):
        self.processed += 1


class RecordingDrawer(Drawer):
    def __init__(self):
        self.calls = 0

    def draw(self):
        self.calls += 1


@pytest.fixture
def keys():
    return MockKeyDownChannel()


def test_sets_direction(keys):
    manager = DirectionManager(keys)
    keys.press(Key.UP)
    assert manager.direction == (0, -1)


def test_sets_allowed_directions_with_no_queues(keys):
    manager = DirectionManager(keys)

    keys.press(Key.UP)
    assert manager.direction == (0, -1)
    manager.process_queued_direction()

    keys.press(Key.RIGHT)
    assert manager.direction == (1, 0)
    manager.process_queued_direction()

    keys.press(Key.LEFT)  # can't reverse
    assert manager.direction == (1, 0)


def test_sets_allowed_directions_with_queues(keys):
    manager = DirectionManager(keys)

    keys.press(Key.UP)
    assert manager.direction == (0, -1)

    keys.press(Key.RIGHT)
    assert manager.direction == (0, -1)  # queue not processed yet

    manager.process_queued_direction()

    keys.press(Key.LEFT)
    assert manager.direction == (1, 0)

    manager.process_queued_direction()
    assert manager.direction == (1, 0)  # can't reverse

    manager.process_queued_direction()
    assert manager.direction == (1, 0)  # no new inputs


def test_ignores_queues_beyond_first(keys):
    manager = DirectionManager(keys)

    keys.press(Key.UP)
    assert manager.direction == (0, -1)

    keys.press(Key.RIGHT)
    assert manager.direction == (0, -1)

    keys.press(Key.UP)
    assert manager.direction == (0, -1)

    manager.process_queued_direction()
    assert manager.direction == (1, 0)

    manager.process_queued_direction()
    assert manager.direction == (1, 0)

    manager.process_queued_direction()
    assert manager.direction == (1, 0)


def test_other_keys_are_ignored(keys):
    manager = DirectionManager(keys)
    keys.press(pygame.K_a)
    assert manager.direction == (0, 0)
    keys.press(Key.DOWN)
    assert manager.direction == (0, 1)


def test_updates_head():
    square_length = 16
    positions = [Pos(128, 128), Pos(128, 128), Pos(128 - square_length, 128)]
    source = MockDirectionSource()
    updater = HeadUpdater(positions, source, square_length)
    source.set_direction((1, 0))

    updater.update_head()

    assert positions == [Pos(144, 128), Pos(128, 128), Pos(112, 128)]
    assert source.processed == 1


def test_removes_last_segment():
    square_length = 16
    positions = [
        Pos(128, 128),
        Pos(128 - square_length, 128),
        Pos(128 - 2 * square_length, 128),
    ]
    remover = TailRemover(positions)

    remover.remove_tail()

    assert positions[0] == Pos(128, 128)
    assert positions[1] == Pos(128, 128)
    assert positions[2] == Pos(128 - square_length, 128)
    assert len(positions) == 3


def test_snake_drawer_paints_green_squares():
    surface = pygame.Surface((64, 64))
    surface.fill((0, 0, 0))
    drawer = SnakeDrawer([Pos(0, 0), Pos(16, 0)], 16, surface)

    drawer.draw()

    assert surface.get_at((0, 0)) == pygame.Color(0, 255, 0, 255)
    assert surface.get_at((20, 5)) == pygame.Color(0, 255, 0, 255)
    assert surface.get_at((40, 40)) == pygame.Color(0, 0, 0, 255)


def test_snake_grows_when_apple_eaten():
    positions = [Pos(128, 128), Pos(112, 128), Pos(96, 128)]
    channel = AppleEatChannel()
    drawer = RecordingDrawer()
    snake = SnakeGO(
        HeadUpdater(positions, MockDirectionSource(), 16),
        drawer,
        channel,
        positions,
        TailRemover(positions),
    )

    channel.notify()

    assert snake.positions[-1] == Pos(-100, -100)
    assert len(snake.positions) == 4


def test_snake_update_moves_and_draws():
    positions = [Pos(128, 128), Pos(112, 128), Pos(96, 128)]
    drawer = RecordingDrawer()
    snake = SnakeGO(
        HeadUpdater(positions, MockDirectionSource((1, 0)), 16),
        drawer,
        AppleEatChannel(),
        positions,
        TailRemover(positions),
    )

    snake.update()

    assert positions == [Pos(144, 128), Pos(128, 128), Pos(112, 128)]
    assert drawer.calls == 1


def test_snake_creator_builds_initial_snake(keys):
    creator = SnakeCreator(16, keys, AppleEatChannel(), pygame.Surface((256, 256)))
    snake = creator.create_snake()
    assert snake.positions == [Pos(128, 128), Pos(112, 128), Pos(96, 128)]


def test_created_snake_follows_keys(keys):
    creator = SnakeCreator(16, keys, AppleEatChannel(), pygame.Surface((256, 256)))
    snake = creator.create_snake()

    keys.press(Key.UP)
    snake.update()

    assert snake.positions[0] == Pos(128, 112)
    assert snake.positions[1] == Pos(128, 128)
    assert snake.positions[2] == Pos(112, 128)


def test_created_snake_grows_via_channel(keys):
    channel = AppleEatChannel()
    creator = SnakeCreator(16, keys, channel, pygame.Surface((256, 256)))
    snake = creator.create_snake()

    channel.notify()

    assert len(snake.positions) == 4
    assert snake.positions[3] == Pos(-100, -100)