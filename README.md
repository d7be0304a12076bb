# airdefense

A small arcade game. An air-defence launcher sits on the ground while
airplanes cross the upper part of the sky from either side. Press the space
bar to fire a missile. The missile locks on to the oldest airplane still in
the air and steers towards it. A hit sets off an explosion animation and
adds to the "Destroyed" count shown in the top-left corner.

## Installing

```
pip install .
```

The game draws, reads input and plays sound with pygame, which is
installed as a dependency.

## Playing

```
airdefense --assets PATH
```

Options:

- `--assets PATH`: the directory holding the game's images and sounds.
  It defaults to a `data` directory beside the installed `airdefense`
  package.
- `--seed N`: seed for the random generator that decides when and where
  airplanes appear. Two runs with the same seed get the same airplanes.

The assets directory must have this layout:

```
PATH/
  assets/
    airdefense.png  irondome.png  airplane.png  bomb.png  missile.png
    fire1.png  fire2.png  fire3.png  ground.png
  sounds/
    missile.mp3  explosion.mp3
```

If an image is not a PNG file, loading fails with `ValueError`. If the
audio device cannot be opened, or a sound cannot be decoded, the game
still runs and simply stays silent.

Controls:

- **Space**: launch a missile. The game runs at 60 ticks per second and
  a launch needs 60 ticks since the last one, so you get at most one
  launch per second. The first launch becomes possible after about one
  second.
- Close the window to quit.

While no airplane is in the sky, a launched missile waits where it was
fired. It moves once an airplane appears.

## Using the game logic

The simulation runs without a window. Sprites need only a name and a
pixel size:

```python
import random

from airdefense.entities import Sprite, Sprites
from airdefense.game import new_game

sprites = Sprites(
    airdefense=Sprite("airdefense", 32, 32),
    irondome=Sprite("irondome", 32, 32),
    airplane=Sprite("airplane", 48, 24),
    bomb=Sprite("bomb", 8, 8),
    missile=Sprite("missile", 8, 16),
    fire1=Sprite("fire1", 8, 8),
    fire2=Sprite("fire2", 8, 8),
    fire3=Sprite("fire3", 8, 8),
    ground=Sprite("ground", 32, 16),
)
game = new_game(sprites, random.Random(1))
for tick in range(600):
    events = game.update(fire_pressed=tick % 60 == 0)
print(game.airplanes_destroyed)
```

`Game.update(fire_pressed)` advances the game by one tick. It returns a
list of the `SoundEvent` values (`LAUNCH`, `EXPLOSION`) produced during
that tick, so a front end can play the matching sounds.

The game is built from these modules:

- `airdefense.game`: `Game`, `new_game` and `SoundEvent`.
- `airdefense.entities`: `Airplane`, `Projectile`, `Weapon`, `Explosion`,
  `check_collision`, `spawn_airplane`, `new_airdefense`, `new_irondome`
  and `fire_offset`. Collisions use the projectile's full box against the
  top-left quarter of the airplane's image.
- `airdefense.geometry`: `Vector`, `Affine` and `rotate_about_center`.
- `airdefense.assets`: `load_assets(directory)`, which returns an
  `Assets` holding the `Sprites` and the raw sound bytes.
- `airdefense.app`: `draw(screen, game, assets)`, `ground_positions` and
  `main`.

## What it does not do

- The package ships no images or sounds. You must pass `--assets` a
  directory laid out as shown above, unless you place one at the default
  location yourself.
- `new_irondome` builds a second, slower bomb launcher. A `Game` does not
  use it: only the missile launcher is placed on the field and fires.
- There is no score saving, no levels and no game over. The game runs
  until the window is closed.

## Running the tests

```
pip install .[test]
pytest
```