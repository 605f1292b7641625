import random

from zombies_reloaded.game import Game, GameState
from zombies_reloaded.weapon import Weapon


def make_game():
    weapon = Weapon("gex", "missing.png", "r.wav", "k.wav", "s.wav")
    return Game(1280, 720, rng=random.Random(1), weapon=weapon)


def test_starts_on_title_screen():
    game = make_game()
    assert game.state is GameState.NOT_STARTED
    assert (game.player.x, game.player.y) == (640, 360)


def test_round_has_eleven_zombies():
    game = make_game()
    assert len(game.zombies) == 11


def test_step_does_nothing_before_start():
    game = make_game()
    assert game.step(up=True) is GameState.NOT_STARTED
    assert (game.player.x, game.player.y) == (640, 360)


def test_press_space_starts_game():
    game = make_game()
    assert game.press_space() is GameState.PLAYING
    assert game.press_space() is GameState.PLAYING


def test_step_moves_player():
    game = make_game()
    game.press_space()
    game.step(up=True)
    assert game.player.y == 352


def test_fire_adds_bullet():
    game = make_game()
    game.press_space()
    game.step(fire=True, mouse_x=1000, mouse_y=380)
    assert len(game.player.bullets) == 1


def test_zombies_close_in():
    game = make_game()
    game.press_space()
    player = game.player
    before = [abs(z.x - player.x) + abs(z.y - player.y) for z in game.zombies]
    game.step()
    after = [abs(z.x - player.x) + abs(z.y - player.y) for z in game.zombies]
    assert all(a < b for a, b in zip(after, before))


def test_death_and_restart():
    game = make_game()
    game.press_space()
    game.player.health = 0.5
    game.player.score = 7
    assert game.step() is GameState.OVER
    assert game.step(up=True) is GameState.OVER
    assert game.press_space() is GameState.PLAYING
    assert game.player.score == 0
    assert game.player.health == 100.0
    assert game.player.weapon is game.weapon