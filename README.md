# starshooter

A small vertical-scrolling space shooter built on pygame. Fly your ship
around the screen, shoot down the insects that swarm from above, dodge their
aimed bullets, and pick up bouncing hearts to restore your health. When your
ship is destroyed, type your name to enter the top-eight leaderboard.

## Installing

```
pip install .
```

This installs the game and pygame, which it depends on. To run the test
suite, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Playing

```
starshooter
starshooter --assets path/to/assets
```

The game reads its images, fonts, music and sound effects from an assets
directory, `assets` in the current directory unless `--assets` names another
one. It expects this layout:

* `image/`: `Stars-A.png`, `Stars-B.png`, `SpaceShip.png`, `laser-1.png`,
  `insect-2.png`, `bullet-1.png`, `bonus_life.png`, `Health UI Black.png`
* `effect/explosion.png`: a horizontal strip of square explosion frames
* `font/`: `VonwaonBitmap-16px.ttf`, `VonwaonBitmap-12px.ttf`
* `music/`: `06_Battle_in_Space_Intro.ogg`,
  `03_Racing_Through_Asteroids_Loop.ogg`
* `sound/`: `laser_shoot4.wav`, `xs_laser.wav`, `explosion1.wav`,
  `explosion3.wav`, `eff11.wav`, `eff5.wav`

### Controls

| Key       | Action                                                     |
|-----------|------------------------------------------------------------|
| W A S D   | Move the ship                                              |
| J         | Fire. On the title and scoreboard screens, J starts a game |
| Esc       | Leave the current game and return to the title             |
| F         | Switch between full screen and windowed mode               |
| Enter     | Confirm your name on the game-over screen                  |
| Backspace | Delete the last character of your name                     |

### Rules

* Enemies appear at random at the top of the screen, fly down, and fire at
  your ship every two seconds.
* Each destroyed enemy scores 10 points. Half of them drop a heart. A heart
  bounces off the screen edges up to three times. Collecting a heart scores 5
  points and restores one health point, up to a maximum of five.
* You start with three health points. A bullet or a collision with an enemy
  costs one.
* Three seconds after your ship explodes, the game-over screen appears. If you
  leave your name empty, it is recorded as `Player`.

### Leaderboard

The eight best scores are kept in `save.dat` inside the assets directory, one
`score name` pair per line, highest first. The file is read at start-up (a
missing file just means an empty table) and written when the game closes.

## Using the pieces

The game logic does not need a window, so you can use it on its own:

* `starshooter.leaderboard.LeaderBoard(capacity)` keeps a bounded score table
  in descending order, with `insert`, `entries`, `load`, `save`, iteration and
  `len`.
* `starshooter.world.World(width, height, templates, rng)` holds the whole
  state of a round: the player, enemies, projectiles, explosions, items and
  the score. `Templates` gives the prototype entities new objects are copied
  from, and `Controls` says which keys are held. Advance the world with
  `World.step(controls, delta_time, now)`; `World.drain_sounds()` returns the
  names of the sound effects triggered since the last call.
* `starshooter.objects` defines the entity types (`Player`, `Enemy`,
  `ProjectilePlayer`, `ProjectileEnemy`, `Explosion`, `Item`, `Background`,
  `ItemType`), together with `entity_rect` and `rects_intersect`, which the
  game uses for collision checks.
* `starshooter.game.Game` opens the window and runs the frame loop over the
  scenes in `scene_title`, `scene_main` and `scene_end`.

## What it does not include

The package ships no assets. Without an assets directory laid out as above,
the game cannot open its window and stops with an error at start-up.