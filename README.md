# defender

A small arcade shooter built on pygame. You fly a ship over a strip of
ground where five humanoids stand. Landers appear one after another, fire
missiles at you and try to carry the humanoids off the top of the screen.
Shoot all five landers to win; you lose if a missile or a lander hits you,
if your fuel runs out and the ship falls to the bottom of the window, or if
the last humanoid is lost.

## Installing

```
pip install .
```

## Playing

```
defender
```

The command takes no options other than `--help`. It opens a 1600×900
window titled "The Defender".

The game looks for its fonts, images and the high-score file in a
`resources/` directory under the current working directory, so start it
from the directory that holds `resources/`. Fonts are `GameName.ttf`,
`GameOver.ttf`, `GameInstructions.ttf`, `YouLost.ttf`, `HighestScore.otf`
and `Play.ttf`; images are `Lander.png`, `Spaceship.png`, `Missile.png`,
`bullet1.png`, `Splashbackground.jpg`, `Humanoid.png` and `GasPump.png`.

On the splash screen, click **Play** to start.

| Key        | Action                                   |
|------------|------------------------------------------|
| Arrow keys | Move the ship                            |
| Space      | Fire a laser in the direction you face   |
| S          | Raise a shield for five seconds          |
| R          | Restart after the game is over           |
| Escape     | Quit (the highest score is saved)        |

Closing the window also saves the highest score.

Things to know while playing:

- Fuel drains by one unit every tenth of a second, starting from 100.
  When it reaches zero the ship can no longer be steered and falls.
- A gas pump appears on the ground and disappears again every five
  seconds. Flying over it while it is shown adds 50 units of fuel.
- You have three shields, shown as circles at the top left. While one is
  up, missiles and landers cannot hurt you; when it runs out, that circle
  is removed.
- Landers pick humanoids as targets and carry them upwards. Shooting a
  lander that holds a humanoid drops the humanoid; fly into the falling
  humanoid to catch it. Shooting a humanoid that is being carried off
  kills it.
- A missile shot down scores 10 points and a lander 20. The highest score
  is kept in `resources/HighestScore.txt`.

## Using it from Python

Start the game as the command does:

```python
from defender.app import main

main()
```

The game can also be driven without a window. `Game` takes an optional
`World`, `StarField`, `Assets`, a pygame `Surface` to draw on and a clock
function; `handle_key(key, now)`, `handle_click(x, y)` and `step(now)`
advance it by hand:

```python
import pygame
from defender.app import Game

game = Game(surface=pygame.Surface((1600, 900)))
game.handle_click(660, 710)          # the Play button
game.step(0.0)
game.handle_key(pygame.K_SPACE, 0.0)  # fire a laser
print(len(game.world.lasers))
```

The game rules live in plain classes that need no display:
`defender.world.World` (ship, landers, missiles, lasers, humanoids, score,
fuel, shields, gas pump), `defender.collisions.CollisionSystem`,
`defender.movement.Mover` and `defender.director.Director`, whose
`update(now)` runs one frame of timed events and movement.

## What it does not do

- It does not ship any fonts, images or a high-score file. When a font
  file is missing pygame's default font is used, and when an image is
  missing a plain coloured block of the expected size is drawn instead.
- There is no sound.

## Running the tests

```
pip install .[test]
pytest
```