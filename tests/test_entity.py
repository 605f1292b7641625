import pygame
import pytest

from zombies_reloaded.entity import Entity


@pytest.fixture
def red_bmp(tmp_path):
    image = pygame.Surface((10, 10))
    image.fill((255, 0, 0))
    path = tmp_path / "red.bmp"
    pygame.image.save(image, str(path))
    return path


def test_change_pos_accumulates():
    e = Entity(10, 20, 5, 5)
    e.change_pos(3, -4)
    e.change_pos(-1, 2)
    assert (e.x, e.y) == (12, 18)


def test_collision_overlapping():
    e = Entity(0, 0, 10, 10)
    assert e.collides_with_rect(5, 5, 10, 10)
    assert e.collides_with_rect(-5, -5, 10, 10)


def test_touching_edges_do_not_collide():
    e = Entity(0, 0, 10, 10)
    assert not e.collides_with_rect(10, 0, 10, 10)
    assert not e.collides_with_rect(0, 10, 10, 10)


def test_collision_is_symmetric():
    a = Entity(0, 0, 10, 10)
    b = Entity(9, 9, 3, 3)
    c = Entity(20, 20, 3, 3)
    assert a.collides_with(b) and b.collides_with(a)
    assert not a.collides_with(c) and not c.collides_with(a)


def test_load_texture_missing_file_raises(tmp_path):
    e = Entity(0, 0, 10, 10)
    with pytest.raises((FileNotFoundError, pygame.error)):
        e.load_texture(tmp_path / "nope.bmp")


def test_load_texture_returns_surface(red_bmp):
    e = Entity(0, 0, 10, 10)
    texture = e.load_texture(red_bmp)
    assert texture.get_size() == (10, 10)
    assert e.texture is texture


def test_draw_offsets_by_texture_size(red_bmp):
    e = Entity(50, 50, 20, 20)
    e.load_texture(red_bmp)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    e.draw(surface)
    assert surface.get_at((45, 45))[:3] == (255, 0, 0)
    assert surface.get_at((59, 59))[:3] == (255, 0, 0)
    assert surface.get_at((65, 65))[:3] == (0, 0, 0)


def test_draw_lazy_path(red_bmp):
    e = Entity(50, 50, 20, 20, texture_path=red_bmp)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    e.draw(surface)
    assert surface.get_at((50, 50))[:3] == (255, 0, 0)


def test_draw_missing_texture_draws_nothing(tmp_path):
    e = Entity(50, 50, 20, 20, texture_path=tmp_path / "missing.bmp")
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    e.draw(surface)
    assert surface.get_at((50, 50))[:3] == (0, 0, 0)
    assert e.texture is None