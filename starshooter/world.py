"""The simulation behind the main playing scene, free of any rendering."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Protocol, Tuple

from .objects import (
    Enemy,
    Explosion,
    Item,
    ItemType,
    Player,
    ProjectileEnemy,
    ProjectilePlayer,
    entity_rect,
    rects_intersect,
)

SOUND_PLAYER_SHOOT = "player_shoot"
SOUND_ENEMY_SHOOT = "enemy_shoot"
SOUND_PLAYER_EXPLOSION = "player_explosion"
SOUND_ENEMY_EXPLOSION = "enemy_explosion"
SOUND_HIT = "hit"
SOUND_GET_THING = "get_thing"


class _Random(Protocol):
    def random(self) -> float: ...


@dataclass
class Templates:
    """Prototype entities that new objects are copied from."""

    player: Player = field(default_factory=Player)
    projectile_player: ProjectilePlayer = field(default_factory=ProjectilePlayer)
    enemy: Enemy = field(default_factory=Enemy)
    projectile_enemy: ProjectileEnemy = field(default_factory=ProjectileEnemy)
    explosion: Explosion = field(default_factory=Explosion)
    item: Item = field(default_factory=Item)


@dataclass(frozen=True)
class Controls:
    """Which control keys are held down this frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False


class World:
    """Player, enemies, bullets, explosions and items on a fixed-size field."""

    PROJECTILE_MARGIN = 32
    SPAWN_CHANCE = 1 / 60.0
    DROP_CHANCE = 0.5
    ENEMY_KILL_SCORE = 10
    ITEM_SCORE = 5

    def __init__(
        self,
        width: int,
        height: int,
        templates: Optional[Templates] = None,
        rng: Optional[_Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.templates = templates if templates is not None else Templates()
        self.rng = rng if rng is not None else random.Random()
        self.player = replace(self.templates.player)
        self.player.x = float(width) / 2 - float(self.player.width) / 2
        self.player.y = float(height) - float(self.player.height)
        self.score = 0
        self.is_dead = False
        self.player_projectiles: List[ProjectilePlayer] = []
        self.enemy_projectiles: List[ProjectileEnemy] = []
        self.enemies: List[Enemy] = []
        self.explosions: List[Explosion] = []
        self.items: List[Item] = []
        self._sounds: List[str] = []

    def _player_hit(self, rect) -> bool:
        return rects_intersect(rect, entity_rect(self.player))

    def keyboard_control(self, controls: Controls, delta_time: float, now: int) -> None:
        """Move the ship within the field and fire when the cool-down allows."""
        if self.is_dead:
            return
        player = self.player
        step = delta_time * player.speed
        if controls.up:
            player.y -= step
        if controls.down:
            player.y += step
        if controls.left:
            player.x -= step
        if controls.right:
            player.x += step
        if player.x <= 0:
            player.x = 0.0
        if player.x >= self.width - player.width:
            player.x = float(self.width) - float(player.width)
        if player.y <= 0:
            player.y = 0.0
        if player.y >= self.height - player.height:
            player.y = float(self.height) - float(player.height)
        if controls.fire and now - player.last_shoot_time > player.cool_down:
            self.shoot_player()
            player.last_shoot_time = now

    def shoot_player(self) -> None:
        """Fire a laser from the top centre of the ship."""
        projectile = replace(self.templates.projectile_player)
        projectile.x = self.player.x + self.player.width // 2 - projectile.width // 2
        projectile.y = self.player.y
        self.player_projectiles.append(projectile)
        self._sounds.append(SOUND_PLAYER_SHOOT)

    def update_player_projectiles(self, delta_time: float) -> None:
        """Move lasers up; drop those off screen or that hit an enemy."""
        kept: List[ProjectilePlayer] = []
        for projectile in self.player_projectiles:
            projectile.y -= projectile.speed * delta_time
            if projectile.y + self.PROJECTILE_MARGIN < 0:
                continue
            rect = entity_rect(projectile)
            target = next(
                (e for e in self.enemies if rects_intersect(rect, entity_rect(e))), None
            )
            if target is not None:
                target.current_health -= projectile.damage
                self._sounds.append(SOUND_HIT)
                continue
            kept.append(projectile)
        self.player_projectiles = kept

    def update_enemy_projectiles(self, delta_time: float) -> None:
        """Move enemy bullets; drop those off screen or that hit the player."""
        margin = self.PROJECTILE_MARGIN
        kept: List[ProjectileEnemy] = []
        for projectile in self.enemy_projectiles:
            projectile.y += projectile.speed * projectile.dy * delta_time
            projectile.x += projectile.speed * projectile.dx * delta_time
            if (
                projectile.y > self.height + margin
                or projectile.y < -margin
                or projectile.x > self.width + margin
                or projectile.x < -margin
            ):
                continue
            if self._player_hit(entity_rect(projectile)) and not self.is_dead:
                self.player.current_health -= projectile.damage
                self._sounds.append(SOUND_HIT)
                continue
            kept.append(projectile)
        self.enemy_projectiles = kept

    def spawn_enemy(self) -> None:
        """With a small chance, add an enemy just above the top edge."""
        if self.rng.random() > self.SPAWN_CHANCE:
            return
        enemy = replace(self.templates.enemy)
        enemy.x = self.rng.random() * (self.width - enemy.width)
        enemy.y = float(-enemy.height)
        self.enemies.append(enemy)

    def update_enemies(self, delta_time: float, now: int) -> None:
        """Move enemies down, let them shoot, and explode the destroyed ones."""
        kept: List[Enemy] = []
        for enemy in self.enemies:
            enemy.y += enemy.speed * delta_time
            if enemy.y > self.height:
                continue
            if now - enemy.last_shoot_time > enemy.cool_down and not self.is_dead:
                self.shoot_enemy(enemy)
                enemy.last_shoot_time = now
            if enemy.current_health <= 0:
                self.enemy_explode(enemy, now)
                continue
            kept.append(enemy)
        self.enemies = kept

    def shoot_enemy(self, enemy: Enemy) -> None:
        """Fire a bullet from the enemy's centre towards the player."""
        projectile = replace(self.templates.projectile_enemy)
        projectile.x = enemy.x + enemy.width // 2 - projectile.width // 2
        projectile.y = enemy.y + enemy.height // 2 - projectile.height // 2
        projectile.dx, projectile.dy = self.direction_to_player(enemy)
        self.enemy_projectiles.append(projectile)
        self._sounds.append(SOUND_ENEMY_SHOOT)

    def direction_to_player(self, enemy: Enemy) -> Tuple[float, float]:
        """Unit vector from the enemy's centre to the player's centre."""
        x = (self.player.x + self.player.width // 2) - (enemy.x + enemy.width // 2)
        y = (self.player.y + self.player.height // 2) - (enemy.y + enemy.height // 2)
        length = math.hypot(x, y)
        if length == 0:
            return (0.0, 0.0)
        return (x / length, y / length)

    def update_player(self, now: int) -> None:
        """Handle the player's death and collisions with enemy ships."""
        if self.is_dead:
            return
        player = self.player
        if player.current_health <= 0:
            self.is_dead = True
            explosion = replace(self.templates.explosion)
            explosion.x = player.x + player.width // 2 - explosion.width // 2
            explosion.y = player.y + player.height // 2 - explosion.height // 2
            explosion.start_time = now
            self.explosions.append(explosion)
            self._sounds.append(SOUND_PLAYER_EXPLOSION)
            return
        player_rect = entity_rect(player)
        for enemy in self.enemies:
            if rects_intersect(entity_rect(enemy), player_rect):
                player.current_health -= 1
                enemy.current_health = 0

    def enemy_explode(self, enemy: Enemy, now: int) -> None:
        """Start an explosion at the enemy, maybe drop an item, and score it."""
        explosion = replace(self.templates.explosion)
        explosion.x = enemy.x + enemy.width // 2 - explosion.width // 2
        explosion.y = enemy.y + enemy.height // 2 - explosion.height // 2
        explosion.start_time = now
        self.explosions.append(explosion)
        self._sounds.append(SOUND_ENEMY_EXPLOSION)
        if self.rng.random() < self.DROP_CHANCE:
            self.drop_item(enemy)
        self.score += self.ENEMY_KILL_SCORE

    def drop_item(self, enemy: Enemy) -> None:
        """Drop an item at the enemy's centre moving in a random direction."""
        item = replace(self.templates.item)
        item.x = enemy.x + enemy.width // 2 - item.width // 2
        item.y = enemy.y + enemy.height // 2 - item.height // 2
        angle = self.rng.random() * 2 * math.pi
        item.dx = math.cos(angle)
        item.dy = math.sin(angle)
        self.items.append(item)

    def update_explosions(self, now: int) -> None:
        """Advance explosion frames and drop finished ones."""
        kept: List[Explosion] = []
        for explosion in self.explosions:
            explosion.current_frame = explosion.fps * (now - explosion.start_time) // 1000
            if explosion.current_frame < explosion.total_frame:
                kept.append(explosion)
        self.explosions = kept

    def update_items(self, delta_time: float) -> None:
        """Move and bounce items; drop those gone off screen or picked up."""
        kept: List[Item] = []
        for item in self.items:
            item.x += item.dx * item.speed * delta_time
            item.y += item.dy * item.speed * delta_time
            if item.x < 0 and item.bounce_count > 0:
                item.dx = -item.dx
                item.bounce_count -= 1
            if item.x + item.width > self.width and item.bounce_count > 0:
                item.dx = -item.dx
                item.bounce_count -= 1
            if item.y < 0 and item.bounce_count > 0:
                item.dy = -item.dy
                item.bounce_count -= 1
            if item.y + item.height > self.height and item.bounce_count > 0:
                item.dy = -item.dy
                item.bounce_count -= 1
            if (
                item.x + item.width < 0
                or item.x > self.height
                or item.y + item.height < 0
                or item.y > self.height
            ):
                continue
            if self._player_hit(entity_rect(item)) and not self.is_dead:
                self.player_get_item(item)
                continue
            kept.append(item)
        self.items = kept

    def player_get_item(self, item: Item) -> None:
        """Apply a picked-up item to the player and score it."""
        self.score += self.ITEM_SCORE
        if item.type is ItemType.HEART:
            self.player.current_health = min(
                self.player.current_health + 1, self.player.max_health
            )
        self._sounds.append(SOUND_GET_THING)

    def step(self, controls: Controls, delta_time: float, now: int) -> None:
        """Advance the whole world by one frame."""
        self.keyboard_control(controls, delta_time, now)
        self.update_player_projectiles(delta_time)
        self.update_enemy_projectiles(delta_time)
        self.spawn_enemy()
        self.update_enemies(delta_time, now)
        self.update_player(now)
        self.update_explosions(now)
        self.update_items(delta_time)

    def drain_sounds(self) -> List[str]:
        """Return the names of sounds triggered since the last call, and forget them."""
        sounds, self._sounds = self._sounds, []
        return sounds