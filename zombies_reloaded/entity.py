"""Base class for everything that has a position, a size and a sprite."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

ASSET_DIR = Path(__file__).resolve().parent / "assets"
SPRITE_DIR = ASSET_DIR / "sprites"


class Entity:
    """A rectangle on screen with an optional texture."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        texture_path: str | os.PathLike | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.texture: pygame.Surface | None = None
        self.texture_path: Path | None = Path(texture_path) if texture_path else None

    def load_texture(self, path: str | os.PathLike) -> pygame.Surface:
        """Load the sprite at ``path`` now; raises if it cannot be read."""
        self.texture = pygame.image.load(os.fspath(path))
        self.texture_path = Path(path)
        return self.texture

    def _ensure_texture(self) -> pygame.Surface | None:
        """Load the configured sprite on first use; a missing file draws nothing."""
        if self.texture is None and self.texture_path is not None:
            try:
                self.texture = pygame.image.load(os.fspath(self.texture_path))
            except (pygame.error, OSError):
                self.texture_path = None
        return self.texture

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the sprite stretched to the entity's size.

        The sprite is offset by its own unscaled size, as the origin of the
        drawing is the texture's bottom-right corner.
        """
        texture = self._ensure_texture()
        if texture is None:
            return
        scaled = pygame.transform.scale(texture, (max(self.width, 0), max(self.height, 0)))
        surface.blit(scaled, (self.x - texture.get_width(), self.y - texture.get_height()))

    def change_pos(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def collides_with_rect(self, x: int, y: int, width: int, height: int) -> bool:
        """True if this entity's rectangle overlaps the given one."""
        return (
            self.x < x + width
            and self.x + self.width > x
            and self.y < y + height
            and self.y + self.height > y
        )

    def collides_with(self, other: Entity) -> bool:
        return self.collides_with_rect(other.x, other.y, other.width, other.height)