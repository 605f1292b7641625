# zombies-reloaded

A small top-down arcade shooter. You stand in the middle of the screen and
zombies come at you from every edge. Aim with the mouse, shoot them down, and
stay alive as long as you can.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, draws the game and plays the sound.

## Playing

```
zombies-reloaded
```

The game opens a 1280×720 window at 60 frames per second.

- **Space** starts a game. After you die, it starts a new one.
- **W / Z** moves up, **S** down, **A / Q** left and **D** right. QWERTY and AZERTY layouts both work.
- **Mouse** aims the shotgun. **Left click** fires.
- **Esc**, or closing the window, quits.

### Rules

- A round starts with eleven zombies placed just outside a random edge of the
  screen. Every frame, each zombie takes one step towards you on both axes.
- A bullet that touches a living zombie scores 1 point and does 1 damage.
  A bullet stays in flight until it leaves the screen.
- A dead zombie is removed and a new one spawns at a random edge. Each kill
  raises the difficulty by one. Zombie health is 5 plus a tenth of the
  difficulty, rounded down.
- Each zombie that touches you costs 1 health per frame. Every frame you
  also regenerate 0.1 health, up to a maximum of 100. The round ends when
  your health reaches zero, and the game-over screen shows your score.

### Assets

Sprites, sound effects and music are read from an `assets` directory inside the
`zombies_reloaded` package:

- `sprites/player.png`, `zombie.png`, `bullet.png` and `shotgun.png`
- `sfx/shotgun/shotgun_shoot.wav`
- `ost/bg_music.ogg`

The package does not ship these files. You have to put them there yourself.
The game still runs without them: a missing sprite is not drawn, and a missing
sound or missing music is silent.

## Using the pieces

The game logic does not need a window, so you can drive it from code or from tests:

```python
from zombies_reloaded.game import Game, GameState

game = Game()
game.press_space()           # start a round
assert game.state is GameState.PLAYING
game.step(left=True, fire=True, mouse_x=0, mouse_y=360, surface=None)
print(game.player.score, game.player.health)
```

`Game.step` advances one frame and returns the current `GameState`
(`NOT_STARTED`, `PLAYING` or `OVER`). If you pass a `pygame.Surface`, it draws
the frame onto it.

These are the building blocks:

| Class or function | Module |
|---|---|
| `Entity` (position, size, sprite, rectangle collision) | `zombies_reloaded.entity` |
| `Bullet` | `zombies_reloaded.bullet` |
| `Zombie` and `random_zombie` | `zombies_reloaded.zombie` |
| `ZombieList` (the horde) | `zombies_reloaded.zombie_list` |
| `Weapon` | `zombies_reloaded.weapon` |
| `Player` | `zombies_reloaded.player` |
| `start_menu`, `dead_menu` and `dead_message` | `zombies_reloaded.menus` |
| `Game`, `GameState` and `main` | `zombies_reloaded.game` |

## Tests

```
pip install .[test]
pytest
```