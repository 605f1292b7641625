import pygame
import pytest

from zombies_reloaded.entity import Entity
from zombies_reloaded.weapon import Weapon


@pytest.fixture
def weapon(tmp_path):
    image = pygame.Surface((4, 2))
    image.fill((255, 0, 0))
    sprite = tmp_path / "gun.bmp"
    pygame.image.save(image, str(sprite))
    return Weapon(
        "gex",
        sprite,
        tmp_path / "reload.wav",
        tmp_path / "rakk.wav",
        tmp_path / "shoot.wav",
    )


def test_initial_state(weapon):
    assert weapon.name == "gex"
    assert weapon.rotation == 0.0
    assert (weapon.width, weapon.height) == (200, 50)


def test_aim_straight_right_is_zero(weapon):
    holder = Entity(0, 0, 36, 54)
    assert weapon.aim(holder, 90, -20) == 0.0
    assert weapon.rotation == 0.0


def test_aim_down_slightly_over_ninety(weapon):
    holder = Entity(0, 0, 36, 54)
    angle = weapon.aim(holder, -10, 80)
    assert 90.0 < angle < 90.1


def test_aim_left_is_negative_or_large(weapon):
    holder = Entity(100, 100, 36, 54)
    up = weapon.aim(holder, 90, -200)
    down = weapon.aim(holder, 90, 400)
    assert up < 0 < down


def test_draw_places_sprite_at_hand(weapon):
    holder = Entity(50, 50, 36, 54)
    surface = pygame.Surface((120, 120))
    surface.fill((0, 0, 0))
    weapon.draw(surface, holder, 200, 30)
    assert weapon.rotation == 0.0
    assert surface.get_at((60, 70))[:3] == (255, 0, 0)
    assert surface.get_at((50, 50))[:3] == (0, 0, 0)
    assert surface.get_at((90, 70))[:3] == (0, 0, 0)


def test_draw_without_texture_only_aims(tmp_path):
    w = Weapon("x", tmp_path / "none.bmp", "r", "k", "s")
    holder = Entity(0, 0, 36, 54)
    surface = pygame.Surface((50, 50))
    surface.fill((0, 0, 0))
    w.draw(surface, holder, -10, 80)
    assert w.rotation > 90.0
    assert surface.get_at((10, 20))[:3] == (0, 0, 0)


def test_play_shoot_without_mixer(weapon):
    if pygame.mixer.get_init() is not None:
        pygame.mixer.quit()
    assert weapon.play_shoot() is False