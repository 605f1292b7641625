"""The player: moves, shoots, scores and takes damage from zombies."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

import pygame

from .bullet import Bullet
from .entity import SPRITE_DIR, Entity
from .weapon import Weapon
from .zombie import Zombie

PLAYER_WIDTH = 36
PLAYER_HEIGHT = 54
MOVEMENT_SPEED = 8
MAX_HEALTH = 100.0
REGENERATION = 0.1
MUZZLE_OFFSET = 20

BLACK = (0, 0, 0)
GREEN = (0, 228, 48)
BLOOD_RED = (169, 50, 38)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Player(Entity):
    """The character controlled by the keyboard and mouse."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, PLAYER_WIDTH, PLAYER_HEIGHT, SPRITE_DIR / "player.png")
        self.weapon: Weapon | None = None
        self.bullets: list[Bullet] = []
        self.score = 0
        self.health = MAX_HEALTH

    def movement(
        self, up: bool = False, down: bool = False, left: bool = False, right: bool = False
    ) -> None:
        """Move according to the held direction keys."""
        if up:
            self.change_pos(0, -MOVEMENT_SPEED)
        if down:
            self.change_pos(0, MOVEMENT_SPEED)
        if left:
            self.change_pos(-MOVEMENT_SPEED, 0)
        if right:
            self.change_pos(MOVEMENT_SPEED, 0)

    def set_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon

    def _require_weapon(self) -> Weapon:
        if self.weapon is None:
            raise RuntimeError("the player has no weapon")
        return self.weapon

    def shoot(self) -> Bullet:
        """Fire a bullet in the weapon's current direction."""
        weapon = self._require_weapon()
        bullet = Bullet(self.x + MUZZLE_OFFSET, self.y + MUZZLE_OFFSET, weapon.rotation)
        self.bullets.append(bullet)
        weapon.play_shoot()
        return bullet

    def draw_weapon(
        self, surface: pygame.Surface | None, mouse_x: int, mouse_y: int
    ) -> None:
        """Aim the weapon at the mouse, drawing it when a surface is given."""
        weapon = self._require_weapon()
        if surface is None:
            weapon.aim(self, mouse_x, mouse_y)
        else:
            weapon.draw(surface, self, mouse_x, mouse_y)

    def draw_score(self, surface: pygame.Surface) -> None:
        text = _font(30).render(f"Score : {self.score}", True, BLACK)
        surface.blit(text, (5, 40))

    def draw_health(self, surface: pygame.Surface) -> None:
        """Draw the health bar in the top-left corner."""
        pygame.draw.rect(surface, BLACK, pygame.Rect(5, 5, 200, 35))
        pygame.draw.rect(surface, BLOOD_RED, pygame.Rect(8, 8, 194, 29))
        bar_width = int(193 * self.health / 100)
        if bar_width > 0:
            pygame.draw.rect(surface, GREEN, pygame.Rect(8, 8, bar_width, 28))

    def take_zombie_damage(self, zombies: Iterable[Zombie]) -> None:
        """Lose one point per touching zombie, then regenerate slightly."""
        for zombie in zombies:
            if self.collides_with(zombie) and self.health > 0:
                self.health -= 1
        self.health = min(self.health + REGENERATION, MAX_HEALTH)

    def refresh_bullets(
        self,
        zombies: Iterable[Zombie],
        screen_width: int,
        screen_height: int,
        surface: pygame.Surface | None = None,
    ) -> None:
        """Move and draw bullets, score hits, drop stray bullets, then take damage."""
        horde = list(zombies)
        remaining: list[Bullet] = []
        for index, bullet in enumerate(self.bullets):
            bullet.move()
            if surface is not None:
                bullet.draw(surface)
            for zombie in horde:
                if bullet.collides_with(zombie) and zombie.health > 0:
                    self.score += 1
                    # The kill bonus looks at the zombie sharing the bullet's index.
                    if index < len(horde) and horde[index].is_dead():
                        self.score += 10
                    zombie.take_damage(1)
            if not bullet.is_off_screen(screen_width, screen_height):
                remaining.append(bullet)
        self.bullets = remaining
        self.take_zombie_damage(horde)