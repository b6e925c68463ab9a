"""Game entities and the rectangle helpers used for collision checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol, Tuple

Rect = Tuple[int, int, int, int]


class ItemType(enum.Enum):
    """Kinds of pick-up an enemy can drop."""

    HEART = enum.auto()
    SHIELD = enum.auto()
    TIME = enum.auto()


@dataclass
class Player:
    """The player's ship."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 300
    current_health: int = 3
    max_health: int = 5
    cool_down: int = 300
    last_shoot_time: int = 0


@dataclass
class Enemy:
    """An enemy ship flying down the screen."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 150
    current_health: int = 2
    cool_down: int = 2000
    last_shoot_time: int = 0


@dataclass
class ProjectileEnemy:
    """A bullet fired by an enemy towards the player."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 400
    damage: int = 1


@dataclass
class ProjectilePlayer:
    """A laser shot fired straight up by the player."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 600
    damage: int = 1


@dataclass
class Explosion:
    """An animated explosion played from a horizontal sprite strip."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    current_frame: int = 0
    total_frame: int = 0
    start_time: int = 0
    fps: int = 10


@dataclass
class Item:
    """A pick-up that bounces off the screen edges a few times."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 200
    bounce_count: int = 3
    type: ItemType = ItemType.HEART


@dataclass
class Background:
    """A vertically scrolling, tiled star layer."""

    texture: Any = None
    offset: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 30

    def advance(self, delta_time: float) -> None:
        """Scroll down and wrap the offset back into [-height, 0)."""
        self.offset += self.speed * delta_time
        if self.offset >= 0:
            self.offset -= self.height


class _Positioned(Protocol):
    x: float
    y: float
    width: int
    height: int


def entity_rect(entity: _Positioned) -> Rect:
    """Return the integer (x, y, width, height) rectangle of an entity."""
    return (int(entity.x), int(entity.y), entity.width, entity.height)


def rects_intersect(a: Rect, b: Rect) -> bool:
    """True when two rectangles share a non-empty area; empty rectangles never do."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    if max(ax, bx) >= min(ax + aw, bx + bw):
        return False
    return max(ay, by) < min(ay + ah, by + bh)