# arcadebox

A small arcade for the terminal and the desktop. It has two games, **snake**
and **centipede**, and three displays: a curses terminal display and two
pygame window displays. Game and display can be switched while it runs.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The terminal display uses the standard `curses` module, which must be
available on your platform. The window displays use pygame.

## Running

Start the arcade by naming the display library to open first:

```
arcade arcade_ncurses.so
```

The argument is a display library name. Any leading directory is ignored.
The names that can actually be opened are:

| Name                | Display                                          |
|---------------------|--------------------------------------------------|
| `arcade_ncurses.so` | curses, in the terminal                          |
| `arcade_sdl2.so`    | a 1900x1000 pygame window                        |
| `arcade_sfml.so`    | an 800x600 pygame window, limited to 60 frames/s |

The games are `arcade_snake.so` and `arcade_centipede.so`.

Libraries are discovered by file name in `./lib/`: a library is offered
only if a file with that name exists there. The files are only looked up by
name; their contents are never read, so empty files are enough. Game and
display assets are read from `./Assets/` (textures, `Assets/font.ttf` for
text, and `Assets/centipede/map.txt` for the centipede field), so run the
command from the directory that holds both `lib/` and `Assets/`. Missing
textures or font are drawn as plain coloured tiles instead.

A wrong number of arguments or an unrecognised display name is reported on
standard error and the command exits with status 84. So does any error
while listing `./lib/` or loading a library.

The arcade opens on a menu listing the display libraries in one column and
the games in another (below the displays when the terminal display is
selected).

## Keys

| Key        | Action                                            |
|------------|---------------------------------------------------|
| Arrow keys | Move the cursor in the menu, steer in a game      |
| Enter      | In the menu: open the highlighted display or game |
| Space      | Fire (centipede)                                  |
| Escape     | Pause the game; an arrow key resumes it           |
| r          | Restart the current game                          |
| l          | Switch to the next display library                |
| g          | Switch to the next game                           |
| m          | Back to the menu                                  |
| q          | Quit                                              |

Closing a window quits too.

## Games

- **Snake** – a 30x20 walled board. Eat apples to grow by one segment.
  Running into a wall or into yourself restarts the game, which then waits
  paused until you press an arrow key.
- **Centipede** – your shooter moves in the lower fifth of the field and
  keeps moving in the last direction pressed. The centipede slides
  sideways and turns and drops a row when it meets a mushroom. A shot that
  hits a segment removes it and leaves a mushroom in its place. Besides the
  `#` cells of the map file, a few empty cells become mushrooms at random.
  If the map file is missing the field is empty.

## What it does not do

The library-name check accepts further names (for example
`arcade_pacman.so` or `arcade_qt5.so`), and such files in `./lib/` are
listed in the menu, but there is no game or display behind them: choosing
one stops the arcade with an error. Only the names in the table above and
the two games can be played. There are no scores or saved state.

## Using it as a library

- `arcadebox.objects` holds the shared types: `GameObject`, `Event`,
  `GameData`, `ObjectType`, `Direction`, and the abstract `GameModule`
  (`manage_events`, `iterate`, `data`) and `DisplayModule` (`display`,
  `clear`, `get_events`, `close`; usable as a context manager).
- `arcadebox.libnames` has `is_display_lib`, `is_game_lib` and
  `lib_basename`.
- `arcadebox.snake.SnakeGame` and `arcadebox.centipede.CentipedeGame` take
  an optional random source and clock, so they can be driven
  deterministically.
- `arcadebox.terminal_display.TerminalDisplay` and
  `arcadebox.window_display.SdlDisplay` / `SfmlDisplay` (both built on
  `WindowDisplay`) are the displays.
- `arcadebox.lib.Lib(lib_dir, registry)` finds, loads and switches modules
  and builds the menu; `default_registry()` maps library names to the
  factories above, and failures raise `LibraryError`.
- `arcadebox.core.Core` runs the main loop; `Core.step()` runs a single
  frame and `arcadebox.core.main(argv)` is the `arcade` command.