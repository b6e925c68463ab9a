"""The title screen."""

from __future__ import annotations

import pygame

from .scene import Scene


class SceneTitle(Scene):
    """Shows the game's name and a blinking prompt to start."""

    TITLE = "飞机大战"
    PROMPT = "按J进入游戏"

    def __init__(self, game) -> None:
        super().__init__(game)
        self.time = 0.0

    def init(self) -> None:
        self._play_music("music", "06_Battle_in_Space_Intro.ogg")

    def update(self, delta_time: float) -> None:
        self.time += delta_time
        if self.time > 1.0:
            self.time -= 1.0

    def render(self) -> None:
        self.game.render_text_center(self.TITLE, 0.4, True)
        if self.time < 0.5:
            self.game.render_text_center(self.PROMPT, 0.8, False)

    def clean(self) -> None:
        self._stop_music()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_j:
            from .scene_main import SceneMain

            self.game.change_scene(SceneMain(self.game))