"""Key codes and the small interfaces through which game parts talk to each other."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable


class Key(IntEnum):
    """Key codes the game reacts to (SDL2 key code values)."""

    ESCAPE = 27
    RIGHT = 1073741903
    LEFT = 1073741904
    DOWN = 1073741905
    UP = 1073741906


KeyCallback = Callable[[int], None]


class Notifiable(ABC):
    """Something that can be told that an event happened."""

    @abstractmethod
    def notify(self) -> None:
        """Announce the event."""


class Drawer(ABC):
    """Something that can draw itself."""

    @abstractmethod
    def draw(self) -> None:
        """Draw onto the target surface."""


class KeyDownChannel(ABC):
    """A source of key-down events."""

    @abstractmethod
    def subscribe_to_key_down(self, callback: KeyCallback) -> None:
        """Register ``callback`` to receive the key code of each key press."""


class AppleEatChannel(Notifiable):
    """Broadcasts to its subscribers that an apple was eaten."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def notify(self) -> None:
        for callback in self._callbacks:
            callback()