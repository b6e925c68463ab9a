"""The game-over screen: name entry followed by the scoreboard."""

from __future__ import annotations

import pygame

from .scene import Scene


class SceneEnd(Scene):
    """Asks for the player's name, records the score and shows the table."""

    DEFAULT_NAME = "Player"
    ROW_SPACING = 45
    ROW_MARGIN = 100

    def __init__(self, game) -> None:
        super().__init__(game)
        self.is_typing = True
        self.name = ""
        self.blink_time = 1.0

    def init(self) -> None:
        self._play_music("music", "06_Battle_in_Space_Intro.ogg")
        pygame.key.start_text_input()

    def update(self, delta_time: float) -> None:
        self.blink_time -= delta_time
        if self.blink_time < 0:
            self.blink_time += 1.0

    def render(self) -> None:
        if self.is_typing:
            self._render_name_entry()
        else:
            self._render_scoreboard()

    def clean(self) -> None:
        self._stop_music()

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.is_typing:
            if event.type == pygame.TEXTINPUT:
                self.name += event.text
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    self.is_typing = False
                    pygame.key.stop_text_input()
                    if not self.name:
                        self.name = self.DEFAULT_NAME
                    self.game.insert_leaderboard(self.game.final_score, self.name)
                if event.key == pygame.K_BACKSPACE:
                    self.name = self.name[:-1]
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_j:
            from .scene_main import SceneMain

            self.game.change_scene(SceneMain(self.game))

    def _render_name_entry(self) -> None:
        game = self.game
        game.render_text_center(f"your score is : {game.final_score}", 0.1, False)
        game.render_text_center("游戏结束", 0.4, True)
        game.render_text_center("请输入你的名字，按回车键确认:", 0.6, False)
        cursor_on = self.blink_time < 0.5
        if self.name:
            x, y = game.render_text_center(self.name, 0.8, False)
            if cursor_on:
                game.render_text_at("_", x, y, False)
        elif cursor_on:
            game.render_text_center("_", 0.8, False)

    def _render_scoreboard(self) -> None:
        game = self.game
        pos_y = 0.2 * game.height
        game.render_text_center("Scoreboard", 0.05, True)
        for rank, (score, name) in enumerate(game.leaderboard, start=1):
            game.render_text_at(f"{rank}.{name}", self.ROW_MARGIN, pos_y, False)
            game.render_text_at(str(score), self.ROW_MARGIN, pos_y, False, False)
            pos_y += self.ROW_SPACING
        if self.blink_time < 0.5:
            game.render_text_center("按J重新进入游戏", 0.85, False)