"""Projectiles fired by the player."""

from __future__ import annotations

import math

from .entity import SPRITE_DIR, Entity

BULLET_SPEED = 15
BULLET_SIZE = 15


class Bullet(Entity):
    """A bullet travelling in a straight line at a fixed speed."""

    def __init__(self, x: int, y: int, rotation: float) -> None:
        super().__init__(x, y, BULLET_SIZE, BULLET_SIZE, SPRITE_DIR / "bullet.png")
        radians = rotation * 3.14 / 180
        self.dx = int(math.cos(radians) * BULLET_SPEED)
        self.dy = int(math.sin(radians) * BULLET_SPEED)

    def move(self) -> None:
        self.change_pos(self.dx, self.dy)

    def is_off_screen(self, screen_width: int, screen_height: int) -> bool:
        return (
            self.x + self.width < 0
            or self.x > screen_width
            or self.y + self.height < 0
            or self.y > screen_height
        )