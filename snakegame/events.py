"""Dispatching of input events to subscribers, and shutting down on quit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Union

import pygame

from snakegame.channels import Key, KeyCallback, KeyDownChannel


@dataclass(frozen=True)
class QuitEvent:
    """The user asked to close the game."""


@dataclass(frozen=True)
class KeyDownEvent:
    """A key was pressed."""

    key: int


Event = Union[QuitEvent, KeyDownEvent]


class EventPoller(KeyDownChannel):
    """Hands queued input events to key-down and quit subscribers."""

    def __init__(self) -> None:
        self._key_down_callbacks: list[KeyCallback] = []
        self._quit_callbacks: list[Callable[[], None]] = []

    def poll_buffered_events(self, events: Iterable[Event]) -> bool:
        """Dispatch ``events`` in order; return True as soon as a quit is seen.

        Escape counts as a quit. Events after a quit are not dispatched.
        """
        for event in events:
            if isinstance(event, QuitEvent):
                self._on_quit()
                return True
            if isinstance(event, KeyDownEvent):
                if event.key == Key.ESCAPE:
                    self._on_quit()
                    return True
                self._on_key_down(event.key)
        return False

    def subscribe_to_key_down(self, callback: KeyCallback) -> None:
        self._key_down_callbacks.append(callback)

    def unsubscribe_to_key_down(self, callback: KeyCallback) -> None:
        """Remove ``callback``; raises ValueError if it was not subscribed."""
        self._key_down_callbacks.remove(callback)

    def subscribe_to_quit(self, callback: Callable[[], None]) -> None:
        self._quit_callbacks.append(callback)

    def unsubscribe_to_quit(self, callback: Callable[[], None]) -> None:
        """Remove ``callback``; raises ValueError if it was not subscribed."""
        self._quit_callbacks.remove(callback)

    def _on_key_down(self, key: int) -> None:
        for callback in self._key_down_callbacks:
            callback(key)

    def _on_quit(self) -> None:
        for callback in self._quit_callbacks:
            callback()


class Quitter:
    """Shuts pygame down when the event poller reports a quit."""

    def __init__(self, event_poller: EventPoller) -> None:
        self.has_quit = False
        event_poller.subscribe_to_quit(self._handle_quit)

    def _handle_quit(self) -> None:
        pygame.quit()
        self.has_quit = True