"""Window setup, image loading and the main game loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol, Sequence

import pygame

from snakegame.apple import AppleCreator
from snakegame.channels import AppleEatChannel
from snakegame.events import Event, EventPoller, KeyDownEvent, Quitter, QuitEvent
from snakegame.snake import SnakeCreator

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
WINDOW_TITLE = "Hello SDL"
SQUARE_LENGTH = 16
FRAME_DELAY_MS = 125
_BACKGROUND = (0, 0, 0, 255)


class _Updatable(Protocol):
    def update(self) -> None: ...


def init_display(
    width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT, title: str = WINDOW_TITLE
) -> pygame.Surface:
    """Start pygame and open a window; raises pygame.error if that fails."""
    pygame.init()
    try:
        surface = pygame.display.set_mode((width, height))
    except pygame.error:
        pygame.quit()
        raise
    pygame.display.set_caption(title)
    return surface


def load_image(path: str | Path) -> pygame.Surface:
    """Load an image file; raises FileNotFoundError or pygame.error on failure."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"unable to load image: {path}")
    image = pygame.image.load(str(path))
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def render_frame(
    surface: pygame.Surface,
    background: Optional[pygame.Surface],
    snake: _Updatable,
    apple: _Updatable,
) -> None:
    """Clear to black, stretch the background over the surface, then update the objects."""
    surface.fill(_BACKGROUND)
    if background is not None:
        surface.blit(pygame.transform.scale(background, surface.get_size()), (0, 0))
    snake.update()
    apple.update()


def _translate(raw_events: Iterable[pygame.event.Event]) -> Iterator[Event]:
    for event in raw_events:
        if event.type == pygame.QUIT:
            yield QuitEvent()
        elif event.type == pygame.KEYDOWN:
            yield KeyDownEvent(event.key)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake.")
    parser.add_argument(
        "--image", type=Path, default=None, help="background image to draw each frame"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    args = _parse_args(argv)
    surface = init_display()

    event_poller = EventPoller()
    Quitter(event_poller)

    apple_eat_channel = AppleEatChannel()
    snake = SnakeCreator(
        SQUARE_LENGTH, event_poller, apple_eat_channel, surface
    ).create_snake()
    width, height = surface.get_size()
    apple = AppleCreator(
        width, height, SQUARE_LENGTH, apple_eat_channel, surface, snake.positions
    ).create_apple()

    background = load_image(args.image) if args.image is not None else None

    while True:
        if event_poller.poll_buffered_events(_translate(pygame.event.get())):
            break
        render_frame(surface, background, snake, apple)
        pygame.display.flip()
        pygame.time.delay(FRAME_DELAY_MS)
    return 0