"""Full-screen start and game-over menus."""

from __future__ import annotations

from functools import lru_cache

import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLOOD_RED = (169, 50, 38)
TITLE_SIZE = 50

DEAD_MESSAGES = (
    "Well that's unfortunate",
    "Skill issue",
    "Git gud",
    "The reaper always wins",
)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_centered(surface: pygame.Surface, text: str, y: int) -> None:
    rendered = _font(TITLE_SIZE).render(text, True, BLACK)
    surface.blit(rendered, ((surface.get_width() - rendered.get_width()) // 2, y))


def dead_message(score: int) -> str:
    """The taunt shown on the game-over screen, picked by the score."""
    return DEAD_MESSAGES[score % len(DEAD_MESSAGES)]


def start_menu(surface: pygame.Surface) -> None:
    surface.fill(WHITE)
    _draw_centered(surface, "Press SPACE to start", surface.get_height() // 2 - 150)


def dead_menu(surface: pygame.Surface, score: int) -> None:
    surface.fill(BLOOD_RED)
    _draw_centered(surface, dead_message(score), surface.get_height() // 2 - 150)
    _draw_centered(surface, f"Score : {score}", surface.get_height() // 2 - 100)