"""The playing scene: drives the world and draws it."""

from __future__ import annotations

import math
import random
from typing import Dict, Optional, Tuple

import pygame

from .objects import (
    Enemy,
    Explosion,
    Item,
    Player,
    ProjectileEnemy,
    ProjectilePlayer,
)
from .scene import Scene
from .world import SOUND_PLAYER_SHOOT, Controls, Templates, World

WHITE = (255, 255, 255)

_SOUND_FILES = {
    "player_shoot": "laser_shoot4.wav",
    "enemy_shoot": "xs_laser.wav",
    "player_explosion": "explosion1.wav",
    "enemy_explosion": "explosion3.wav",
    "hit": "eff11.wav",
    "get_thing": "eff5.wav",
}


class SceneMain(Scene):
    """Runs the battle until the player has been dead for a few seconds."""

    END_DELAY = 3.0
    HEALTH_ICON_SIZE = 32
    HEALTH_ICON_SPACING = 40
    HEALTH_ICON_MARGIN = 10

    def __init__(self, game) -> None:
        super().__init__(game)
        self.world = World(game.width, game.height)
        self.time_end = 0.0
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._health_icon: Optional[pygame.Surface] = None
        self._health_icon_dark: Optional[pygame.Surface] = None
        self._score_font: Optional[pygame.font.Font] = None

    def _load_scaled(self, divisor: int, *parts: str) -> Tuple[pygame.Surface, int, int]:
        surface = pygame.image.load(self._asset(*parts)).convert_alpha()
        width = surface.get_width() // divisor
        height = surface.get_height() // divisor
        return pygame.transform.scale(surface, (width, height)), width, height

    def init(self) -> None:
        self._play_music("music", "03_Racing_Through_Asteroids_Loop.ogg")

        icon = pygame.image.load(self._asset("image", "Health UI Black.png")).convert_alpha()
        size = (self.HEALTH_ICON_SIZE, self.HEALTH_ICON_SIZE)
        self._health_icon = pygame.transform.scale(icon, size)
        self._health_icon_dark = self._health_icon.copy()
        self._health_icon_dark.fill((0, 0, 0), special_flags=pygame.BLEND_RGB_MULT)
        self._score_font = pygame.font.Font(self._asset("font", "VonwaonBitmap-12px.ttf"), 24)
        self._sounds = {
            name: pygame.mixer.Sound(self._asset("sound", filename))
            for name, filename in _SOUND_FILES.items()
        }

        player_tex, player_w, player_h = self._load_scaled(5, "image", "SpaceShip.png")
        laser_tex, laser_w, laser_h = self._load_scaled(4, "image", "laser-1.png")
        enemy_tex, enemy_w, enemy_h = self._load_scaled(4, "image", "insect-2.png")
        bullet_tex, bullet_w, bullet_h = self._load_scaled(2, "image", "bullet-1.png")
        item_tex, item_w, item_h = self._load_scaled(4, "image", "bonus_life.png")
        sheet = pygame.image.load(self._asset("effect", "explosion.png")).convert_alpha()
        frame = sheet.get_height()
        templates = Templates(
            player=Player(texture=player_tex, width=player_w, height=player_h),
            projectile_player=ProjectilePlayer(texture=laser_tex, width=laser_w, height=laser_h),
            enemy=Enemy(texture=enemy_tex, width=enemy_w, height=enemy_h),
            projectile_enemy=ProjectileEnemy(texture=bullet_tex, width=bullet_w, height=bullet_h),
            explosion=Explosion(
                texture=sheet,
                width=frame * 2,
                height=frame * 2,
                total_frame=sheet.get_width() // frame if frame else 0,
            ),
            item=Item(texture=item_tex, width=item_w, height=item_h),
        )
        self.world = World(self.game.width, self.game.height, templates, random.Random())

    def clean(self) -> None:
        self._sounds.clear()
        self._health_icon = None
        self._health_icon_dark = None
        self._score_font = None
        self._stop_music()

    def update(self, delta_time: float) -> None:
        was_dead = self.world.is_dead
        self.world.step(self._read_controls(), delta_time, pygame.time.get_ticks())
        self._play_sounds()
        if self.world.is_dead and not was_dead:
            self.game.final_score = self.world.score
        if self.world.is_dead:
            self._change_scene_delayed(delta_time, self.END_DELAY)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            from .scene_title import SceneTitle

            self.game.change_scene(SceneTitle(self.game))

    @staticmethod
    def _read_controls() -> Controls:
        pressed = pygame.key.get_pressed()
        return Controls(
            up=bool(pressed[pygame.K_w]),
            down=bool(pressed[pygame.K_s]),
            left=bool(pressed[pygame.K_a]),
            right=bool(pressed[pygame.K_d]),
            fire=bool(pressed[pygame.K_j]),
        )

    def _play_sounds(self) -> None:
        for name in self.world.drain_sounds():
            sound = self._sounds.get(name)
            if sound is None:
                continue
            if name == SOUND_PLAYER_SHOOT:
                pygame.mixer.Channel(0).play(sound)
            else:
                sound.play()

    def _change_scene_delayed(self, delta_time: float, delay: float) -> None:
        self.time_end += delta_time
        if self.time_end > delay:
            from .scene_end import SceneEnd

            self.game.change_scene(SceneEnd(self.game))

    def render(self) -> None:
        screen = self.game.screen
        if screen is None:
            return
        world = self.world
        for projectile in world.player_projectiles:
            self._blit(screen, projectile)
        for bullet in world.enemy_projectiles:
            self._blit_rotated(screen, bullet)
        if not world.is_dead:
            self._blit(screen, world.player)
        for enemy in world.enemies:
            self._blit(screen, enemy)
        for item in world.items:
            self._blit(screen, item)
        for explosion in world.explosions:
            self._blit_explosion(screen, explosion)
        self._render_ui(screen)

    @staticmethod
    def _blit(screen: pygame.Surface, entity) -> None:
        if entity.texture is not None:
            screen.blit(entity.texture, (int(entity.x), int(entity.y)))

    @staticmethod
    def _blit_rotated(screen: pygame.Surface, bullet: ProjectileEnemy) -> None:
        if bullet.texture is None:
            return
        angle = math.degrees(math.atan2(bullet.dy, bullet.dx)) - 90
        rotated = pygame.transform.rotate(bullet.texture, -angle)
        centre = (int(bullet.x) + bullet.width / 2, int(bullet.y) + bullet.height / 2)
        screen.blit(rotated, rotated.get_rect(center=centre))

    @staticmethod
    def _blit_explosion(screen: pygame.Surface, explosion: Explosion) -> None:
        sheet = explosion.texture
        if sheet is None:
            return
        frame = sheet.get_height()
        source = pygame.Rect(explosion.current_frame * frame, 0, frame, frame)
        if frame <= 0 or source.right > sheet.get_width():
            return
        image = pygame.transform.scale(
            sheet.subsurface(source), (explosion.width, explosion.height)
        )
        screen.blit(image, (int(explosion.x), int(explosion.y)))

    def _render_ui(self, screen: pygame.Surface) -> None:
        player = self.world.player
        margin = self.HEALTH_ICON_MARGIN
        spacing = self.HEALTH_ICON_SPACING
        if self._health_icon is not None and self._health_icon_dark is not None:
            for index in range(player.max_health):
                screen.blit(self._health_icon_dark, (margin + index * spacing, margin))
            for index in range(player.current_health):
                screen.blit(self._health_icon, (margin + index * spacing, margin))
        if self._score_font is not None:
            surface = self._score_font.render(f"SCORE: {self.world.score}", False, WHITE)
            screen.blit(surface, (self.game.width - 200, 10))