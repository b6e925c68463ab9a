"""The base class every game scene derives from."""

from __future__ import annotations

import abc
import logging
import os
from typing import TYPE_CHECKING, Any

import pygame

if TYPE_CHECKING:
    from .game import Game

log = logging.getLogger(__name__)


class Scene(abc.ABC):
    """One screen of the game: it loads, updates, draws and reacts to events."""

    def __init__(self, game: "Game | Any") -> None:
        self.game = game

    @abc.abstractmethod
    def init(self) -> None:
        """Load resources and start the scene."""

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene by ``delta_time`` seconds."""

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the scene."""

    @abc.abstractmethod
    def clean(self) -> None:
        """Release what ``init`` acquired."""

    @abc.abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""

    def _asset(self, *parts: str) -> str:
        return os.path.join(self.game.assets_dir, *parts)

    def _play_music(self, *parts: str) -> None:
        path = self._asset(*parts)
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.play(-1)
        except pygame.error as exc:
            log.error("Failed to load music %s: %s", path, exc)

    @staticmethod
    def _stop_music() -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()