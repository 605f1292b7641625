"""The weapon carried by the player, aimed at the mouse."""

from __future__ import annotations

import math
import os
from pathlib import Path

import pygame

from .entity import Entity

WEAPON_SCALE = 3


class Weapon(Entity):
    """A weapon sprite that rotates towards the cursor and plays a shot sound."""

    def __init__(
        self,
        name: str,
        sprite_path: str | os.PathLike,
        reload_path: str | os.PathLike,
        rakk_path: str | os.PathLike,
        shoot_path: str | os.PathLike,
    ) -> None:
        super().__init__(50, 50, 200, 50, sprite_path)
        self.name = name
        self.rotation = 0.0
        self.reload_path = Path(reload_path)
        self.rakk_path = Path(rakk_path)
        self.shoot_path = Path(shoot_path)
        self.damage = 0
        self._shoot_sound: pygame.mixer.Sound | None = None

    def aim(self, holder: Entity, mouse_x: int, mouse_y: int) -> float:
        """Point at the mouse from ``holder``; returns the angle in degrees."""
        self.rotation = (
            math.atan2(mouse_y - holder.y + 20, mouse_x - holder.x + 10) * 180 / 3.14
        )
        return self.rotation

    def draw(
        self, surface: pygame.Surface, holder: Entity, mouse_x: int, mouse_y: int
    ) -> None:
        """Aim, then draw the sprite scaled up and rotated about the holder's hand."""
        rotation = self.aim(holder, mouse_x, mouse_y)
        texture = self._ensure_texture()
        if texture is None:
            return
        tw, th = texture.get_size()
        scaled = pygame.transform.scale(texture, (tw * WEAPON_SCALE, th * WEAPON_SCALE))
        anchor = pygame.math.Vector2(holder.x + 10, holder.y + 20)
        pivot_from_center = pygame.math.Vector2(
            tw - scaled.get_width() / 2, th - scaled.get_height() / 2
        )
        rotated = pygame.transform.rotate(scaled, -rotation)
        center = anchor - pivot_from_center.rotate(rotation)
        rect = rotated.get_rect(center=(round(center.x), round(center.y)))
        surface.blit(rotated, rect)

    def play_shoot(self) -> bool:
        """Play the shot sound; returns False when audio or the sound is unavailable."""
        if pygame.mixer.get_init() is None:
            return False
        if self._shoot_sound is None:
            try:
                self._shoot_sound = pygame.mixer.Sound(os.fspath(self.shoot_path))
            except (pygame.error, OSError):
                return False
        self._shoot_sound.play()
        return True