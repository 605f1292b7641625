"""The horde: keeps a steady number of zombies on the field."""

from __future__ import annotations

import random

import pygame

from .entity import Entity
from .zombie import Zombie

INITIAL_ZOMBIES = 10
SPAWN_MARGIN = 150


class ZombieList:
    """Zombies spawned just outside the screen; each kill raises the difficulty."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        rng: random.Random | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng or random.Random()
        self.difficulty = 0
        self.zombies: list[Zombie] = []
        for _ in range(INITIAL_ZOMBIES):
            self.spawn_zombie()

    def spawn_zombie(self) -> Zombie:
        """Add a zombie just beyond a random edge of the screen."""
        side = self.rng.randint(0, 3)
        if side == 0:
            x, y = self.rng.randint(0, self.screen_width), -SPAWN_MARGIN
        elif side == 1:
            x, y = -SPAWN_MARGIN, self.rng.randint(0, self.screen_height)
        elif side == 2:
            x, y = self.rng.randint(0, self.screen_width), self.screen_height + SPAWN_MARGIN
        else:
            x, y = self.screen_width + SPAWN_MARGIN, self.rng.randint(0, self.screen_height)
        zombie = Zombie(x, y, self.difficulty)
        self.zombies.append(zombie)
        return zombie

    def draw_all(self, surface: pygame.Surface) -> None:
        for zombie in self.zombies:
            zombie.draw(surface)

    def check_dead_all(self) -> None:
        """Remove dead zombies, replacing each with a tougher one."""
        dead = [z for z in self.zombies if z.is_dead()]
        self.zombies = [z for z in self.zombies if not z.is_dead()]
        for _ in dead:
            self.difficulty += 1
            self.spawn_zombie()

    def path_find_all(self, target: Entity) -> None:
        for zombie in self.zombies:
            zombie.path_find(target)

    def __iter__(self):
        return iter(self.zombies)

    def __len__(self) -> int:
        return len(self.zombies)