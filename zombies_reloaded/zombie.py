"""Zombies that chase the player."""

from __future__ import annotations

import random

from .entity import SPRITE_DIR, Entity

Z_SPEED = 3
ZOMBIE_WIDTH = 36
ZOMBIE_HEIGHT = 54


class Zombie(Entity):
    """An enemy whose health grows slowly with difficulty."""

    def __init__(self, x: int, y: int, difficulty: int = 0) -> None:
        super().__init__(x, y, ZOMBIE_WIDTH, ZOMBIE_HEIGHT, SPRITE_DIR / "zombie.png")
        self.health = int(5 + difficulty * 0.1)

    def take_damage(self, damage: int) -> None:
        self.health -= damage

    def is_dead(self) -> bool:
        return self.health <= 0

    def path_find(self, target: Entity) -> None:
        """Step one move towards ``target`` on each axis."""
        self.change_pos(-Z_SPEED if self.x > target.x else Z_SPEED, 0)
        self.change_pos(0, -Z_SPEED if self.y > target.y else Z_SPEED)


def random_zombie(difficulty: int = 0, rng: random.Random | None = None) -> Zombie:
    """A zombie at a random x between 150 and 600 on the line y = 150."""
    rng = rng or random.Random()
    return Zombie(rng.randint(150, 600), 150, difficulty)