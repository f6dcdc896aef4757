# nichelite

A small top-down action game built on pygame. A sword-wielding character
walks around a tile map, and the camera follows. The animation changes with
the character's state (idle, running, attacking) and the direction it faces.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds an `assets/` folder:

```
nichelite
```

The game reads these files, relative to the current directory:

- `assets/lazy.map`: the level. It has 64 × 40 whitespace-separated
  integers, read row by row. `0` is a floor tile and `1` is a wall tile.
  Anything after the first 2560 values is ignored.
- `assets/peaceful_pixels/tiles_free.png`: the tile sheet. The floor tile is
  drawn from the 32 × 32 square at (0, 0), the wall tile from the one at
  (0, 32).
- `assets/TDTA/Sheets/Sword/...`: one horizontal sprite strip of 128 × 128
  frames for each state and direction (for example `Sword_1_ID.png` for idle
  facing down, `Sword_2_RL.png` for running left, `Sword_6_A1U.png` for
  attacking up).

If the tile sheet cannot be loaded, the game prints `Failed to load media!`
and stops. A missing player sheet is only logged; that animation is then not
drawn. If the level file is missing or bad, the error is printed and the game
runs with no tiles.

Controls:

- Arrow keys move the character, 4 pixels per frame.
- `Q` attacks.
- Close the window to quit.

The loop runs at up to 60 frames per second in a 1280 × 800 window.

## Using the pieces

The modules can also be used on their own:

- `nichelite.constants` holds the screen, level and tile sizes and the
  `State` (`IDLE`, `RUN`, `ATTACK`) and `Direction` (`LEFT`, `RIGHT`, `UP`,
  `DOWN`) enums.
- `nichelite.collision` has `check_collision(a, b)`, which tells whether two
  rectangles (anything with `x`, `y`, `w`, `h`) overlap; rectangles that only
  share an edge do not. `touches_wall(box, tiles)` tells whether a box
  overlaps any wall tile.
- `nichelite.timer.Timer` is a millisecond stopwatch with `start`, `stop`,
  `pause`, `unpause`, `ticks`, `is_started` and `is_paused`. It takes a clock
  function, so any tick source can drive it.
- `nichelite.textures.TextureManager` loads images with `load_texture(key,
  file_path)` and returns them with `get_texture(key)`. Keys are any hashable
  value, such as a `(State, Direction)` pair or a name. A file that cannot be
  loaded raises `TextureLoadError`; an unknown key raises
  `MissingTextureError`.
- `nichelite.tile.Tile` is one map cell with a collision `box`, a `tile_type`
  and a `clip` into the tile sheet. `render` draws it, tinted dark, when it
  is inside the camera and returns whether it was drawn.
- `nichelite.level.Level` reads a level file with `load_from_file` and draws
  the visible tiles with `render`. Bad or short files raise `LevelError` and
  leave the tiles already loaded in place.
- `nichelite.character.Character` reads held keys in `update`, moves one axis
  at a time in `move` (undoing a step that leaves the screen or enters a
  wall), advances its `Animation` frames and draws them with `render`.
  `Enemy` is a `Character` subclass with no behaviour of its own.
- `nichelite.player.Player` adds `set_camera`, which centres a camera on the
  player and keeps it within the level, and `handle_event`, which reports
  whether an event concerns a control key.
- `nichelite.game.Game` opens the window (`init`, raising `GameInitError` on
  failure), loads the sprite sheets (`load_media`), loads a level
  (`load_level`) and runs the main loop (`run`). `main()` is the entry point
  of the `nichelite` command.

## What it does not do

The game has one player character and nothing else to interact with: there
are no enemies on the map, attacks do not hit anything, and there is no
sound, score or saving. No images or level files come with the package.
The character is kept within the 1280 × 800 screen area, while the camera
may scroll over the full 2048 × 1280 level.

## Running the tests

```
pip install ".[test]"
pytest
```