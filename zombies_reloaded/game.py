"""Game loop and state machine."""

from __future__ import annotations

import argparse
import enum
import os
import random

import pygame

from .entity import ASSET_DIR, SPRITE_DIR
from .menus import dead_menu, start_menu
from .player import Player
from .weapon import Weapon
from .zombie_list import ZombieList

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Numworks Zombies Reloaded"
WHITE = (255, 255, 255)


class GameState(enum.Enum):
    NOT_STARTED = -1
    OVER = 0
    PLAYING = 1


def _default_weapon() -> Weapon:
    sfx = ASSET_DIR / "sfx" / "shotgun"
    return Weapon(
        "gex",
        SPRITE_DIR / "shotgun.png",
        sfx / "shotgun_reload.wav",
        sfx / "shotgun_rakk.wav",
        sfx / "shotgun_shoot.wav",
    )


class Game:
    """One session: a start screen, rounds of play and a game-over screen."""

    def __init__(
        self,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        rng: random.Random | None = None,
        weapon: Weapon | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng or random.Random()
        self.weapon = weapon or _default_weapon()
        self.state = GameState.NOT_STARTED
        self.new_round()

    def new_round(self) -> None:
        """Fresh player in the centre and a fresh horde."""
        self.player = Player(self.screen_width // 2, self.screen_height // 2)
        self.player.set_weapon(self.weapon)
        self.zombies = ZombieList(self.screen_width, self.screen_height, self.rng)
        self.zombies.spawn_zombie()

    def press_space(self) -> GameState:
        """Start from the title screen, or restart after dying."""
        if self.state is GameState.NOT_STARTED:
            self.state = GameState.PLAYING
        elif self.state is GameState.OVER:
            self.new_round()
            self.state = GameState.PLAYING
        return self.state

    def step(
        self,
        up: bool = False,
        down: bool = False,
        left: bool = False,
        right: bool = False,
        fire: bool = False,
        mouse_x: int = 0,
        mouse_y: int = 0,
        surface: pygame.Surface | None = None,
    ) -> GameState:
        """Advance one frame, drawing to ``surface`` when given."""
        if self.state is GameState.NOT_STARTED:
            if surface is not None:
                start_menu(surface)
            return self.state
        if self.state is GameState.OVER:
            if surface is not None:
                dead_menu(surface, self.player.score)
            return self.state

        player = self.player
        if surface is not None:
            surface.fill(WHITE)
            player.draw(surface)
        player.movement(up, down, left, right)
        player.draw_weapon(surface, mouse_x, mouse_y)
        if surface is not None:
            player.draw_score(surface)
            player.draw_health(surface)
        player.refresh_bullets(self.zombies, self.screen_width, self.screen_height, surface)
        if fire:
            player.shoot()

        self.zombies.check_dead_all()
        self.zombies.path_find_all(player)
        if surface is not None:
            self.zombies.draw_all(surface)

        if int(player.health) <= 0:
            self.state = GameState.OVER
        return self.state


def _play_music() -> None:
    if pygame.mixer.get_init() is None:
        return
    try:
        pygame.mixer.music.load(os.fspath(ASSET_DIR / "ost" / "bg_music.ogg"))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _stop_music() -> None:
    if pygame.mixer.get_init() is not None:
        pygame.mixer.music.stop()


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed or ESC is pressed."""
    argparse.ArgumentParser(prog="zombies-reloaded", description=TITLE).parse_args(argv)
    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error:
        pass
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    game = Game(SCREEN_WIDTH, SCREEN_HEIGHT)

    running = True
    while running:
        fire = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    before = game.state
                    if game.press_space() is GameState.PLAYING and before is not GameState.PLAYING:
                        _play_music()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                fire = True
        if not running:
            break

        keys = pygame.key.get_pressed()
        mouse_x, mouse_y = pygame.mouse.get_pos()
        before = game.state
        state = game.step(
            up=keys[pygame.K_z] or keys[pygame.K_w],
            down=keys[pygame.K_s],
            left=keys[pygame.K_q] or keys[pygame.K_a],
            right=keys[pygame.K_d],
            fire=fire and before is GameState.PLAYING,
            mouse_x=mouse_x,
            mouse_y=mouse_y,
            surface=screen,
        )
        if before is GameState.PLAYING and state is GameState.OVER:
            _stop_music()
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()
    return 0