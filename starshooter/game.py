"""The application: window, shared assets, scrolling background and scenes."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

import pygame

from .leaderboard import LeaderBoard
from .objects import Background
from .scene import Scene
from .scene_title import SceneTitle

log = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class Game:
    """Owns the window and the current scene, and runs the frame loop."""

    WIDTH = 600
    HEIGHT = 800
    FPS = 60
    LEADERBOARD_SIZE = 8
    CHANNELS = 32

    def __init__(self, assets_dir: "str | os.PathLike[str]" = "assets") -> None:
        self.assets_dir = os.fspath(assets_dir)
        self.width = self.WIDTH
        self.height = self.HEIGHT
        self.frame_time = 1000 // self.FPS
        self.delta_time = 0.0
        self.is_running = True
        self.is_full_screen = False
        self.final_score = 0
        self.leaderboard = LeaderBoard(self.LEADERBOARD_SIZE)
        self.current_scene: Optional[Scene] = None
        self.screen: Optional[pygame.Surface] = None
        self.near_stars = Background()
        self.far_stars = Background(speed=20)
        self._title_font: Optional[pygame.font.Font] = None
        self._text_font: Optional[pygame.font.Font] = None

    def _asset(self, *parts: str) -> str:
        return os.path.join(self.assets_dir, *parts)

    def _save_path(self) -> str:
        return self._asset("save.dat")

    def _save_data(self) -> None:
        try:
            self.leaderboard.save(self._save_path())
        except OSError as exc:
            log.error("Unable to write %s: %s", self._save_path(), exc)

    def _load_data(self) -> None:
        try:
            self.leaderboard.load(self._save_path())
        except OSError as exc:
            log.info("Unable to read %s: %s", self._save_path(), exc)

    def init(self) -> None:
        """Open the window and audio, load shared assets and show the title."""
        pygame.mixer.pre_init(44100, -16, 2, 2048)
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.SCALED)
        pygame.display.set_caption("SDL")
        if not pygame.mixer.get_init():
            raise pygame.error("audio device could not be opened")
        pygame.mixer.set_num_channels(self.CHANNELS)
        pygame.mixer.music.set_volume(0.25)
        for index in range(self.CHANNELS):
            pygame.mixer.Channel(index).set_volume(0.125)

        near = pygame.image.load(self._asset("image", "Stars-A.png")).convert_alpha()
        near_size = (near.get_width() // 2, near.get_height() // 2)
        self.near_stars.texture = pygame.transform.scale(near, near_size)
        self.near_stars.width, self.near_stars.height = near_size

        far = pygame.image.load(self._asset("image", "Stars-B.png")).convert_alpha()
        self.far_stars.texture = far
        self.far_stars.width, self.far_stars.height = far.get_size()

        font_path = self._asset("font", "VonwaonBitmap-16px.ttf")
        self._title_font = pygame.font.Font(font_path, 64)
        self._text_font = pygame.font.Font(font_path, 32)

        self._load_data()
        self.change_scene(SceneTitle(self))

    def run(self) -> None:
        """Run frames until the game is asked to quit."""
        while self.is_running:
            frame_start = pygame.time.get_ticks()
            self.handle_events()
            self.update(self.delta_time)
            self.render()
            diff = pygame.time.get_ticks() - frame_start
            if diff < self.frame_time:
                pygame.time.delay(self.frame_time - diff)
                self.delta_time = self.frame_time / 1000.0
            else:
                self.delta_time = diff / 1000.0

    def clean(self) -> None:
        """Save the leaderboard, end the current scene and shut pygame down."""
        self._save_data()
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.near_stars.texture = None
        self.far_stars.texture = None
        self._title_font = None
        self._text_font = None
        self.screen = None
        pygame.quit()

    def change_scene(self, scene: Scene) -> None:
        """Clean up the current scene and start ``scene``."""
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.current_scene = scene
        scene.init()

    def handle_events(self) -> None:
        """Process pending events: quit, full-screen toggle, then the scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                self.is_full_screen = not self.is_full_screen
                if self.screen is not None:
                    pygame.display.toggle_fullscreen()
            if self.current_scene is not None:
                self.current_scene.handle_event(event)

    def update(self, delta_time: float) -> None:
        """Scroll the background and update the current scene."""
        self.background_update(delta_time)
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def render(self) -> None:
        """Draw the background and the current scene, then show the frame."""
        if self.screen is None:
            return
        self.screen.fill(BLACK)
        self.render_background()
        if self.current_scene is not None:
            self.current_scene.render()
        pygame.display.flip()

    def background_update(self, delta_time: float) -> None:
        """Scroll both star layers."""
        self.near_stars.advance(delta_time)
        self.far_stars.advance(delta_time)

    def render_background(self) -> None:
        """Tile the far star layer, then the near one, over the window."""
        if self.screen is None:
            return
        for layer in (self.far_stars, self.near_stars):
            if layer.texture is None or layer.width <= 0 or layer.height <= 0:
                continue
            pos_y = int(layer.offset)
            while pos_y < self.height:
                for pos_x in range(0, self.width, layer.width):
                    self.screen.blit(layer.texture, (pos_x, pos_y))
                pos_y += layer.height

    def _render_text(self, text: str, is_title: bool) -> pygame.Surface:
        font = self._title_font if is_title else self._text_font
        if font is None:
            raise RuntimeError("fonts are not loaded; call init() first")
        return font.render(text, False, WHITE)

    def render_text_center(self, text: str, pos_y: float, is_title: bool) -> Tuple[int, int]:
        """Draw text centred horizontally at a fraction of the height.

        Returns the point just right of the text's top edge.
        """
        surface = self._render_text(text, is_title)
        width, height = surface.get_size()
        x = self.width // 2 - width // 2
        y = int(pos_y * (self.height - height))
        if self.screen is not None:
            self.screen.blit(surface, (x, y))
        return (x + width, y)

    def render_text_at(
        self, text: str, pos_x: float, pos_y: float, is_title: bool, is_left: bool = True
    ) -> None:
        """Draw text at ``pos_x`` from the left edge, or from the right one."""
        surface = self._render_text(text, is_title)
        x = int(pos_x) if is_left else self.width - surface.get_width() - int(pos_x)
        if self.screen is not None:
            self.screen.blit(surface, (x, int(pos_y)))

    def insert_leaderboard(self, score: int, name: str) -> None:
        """Record a finished game's score."""
        self.leaderboard.insert(score, name)