"""Discovery and switching of display and game modules, and the selection menu."""

from __future__ import annotations

import enum
import os
from typing import Callable, Iterable, Mapping, Sequence, Union

from arcadebox.libnames import is_display_lib, is_game_lib, lib_basename
from arcadebox.objects import (
    RGB,
    DisplayModule,
    Event,
    GameData,
    GameModule,
    GameObject,
    ObjectType,
    Vec2,
)

DEFAULT_LIB_DIR = "./lib"

MENU_SIZE = 30
MENU_WALL_COLOR: RGB = (255, 255, 255)
MENU_TEXT_COLOR: RGB = (255, 255, 255)
MENU_CURSOR_COLOR: RGB = (255, 0, 255)
MENU_WALL_ASSET = "Assets/snake/wall.png"

Factory = Callable[[], Union[DisplayModule, GameModule]]


class LibType(enum.Enum):
    """The kind of module a library provides."""

    GRAPHIC = "graphic"
    GAME = "game"


class LibraryError(Exception):
    """Raised when a library cannot be found, listed or loaded."""


def default_registry() -> dict[str, Factory]:
    """Map the library file names this package provides to their factories."""

    def ncurses() -> DisplayModule:
        from arcadebox.terminal_display import TerminalDisplay

        return TerminalDisplay()

    def sdl() -> DisplayModule:
        from arcadebox.window_display import SdlDisplay

        return SdlDisplay()

    def sfml() -> DisplayModule:
        from arcadebox.window_display import SfmlDisplay

        return SfmlDisplay()

    def snake() -> GameModule:
        from arcadebox.snake import SnakeGame

        return SnakeGame()

    def centipede() -> GameModule:
        from arcadebox.centipede import CentipedeGame

        return CentipedeGame()

    return {
        "arcade_ncurses.so": ncurses,
        "arcade_sdl2.so": sdl,
        "arcade_sfml.so": sfml,
        "arcade_snake.so": snake,
        "arcade_centipede.so": centipede,
    }


def _menu_object(pos: Vec2, rgb: RGB, asset: str, ascii: str, kind: ObjectType) -> GameObject:
    return GameObject(rgb=rgb, pos=pos, size=(1, 1), asset=asset, ascii=ascii, type=kind)


class Lib:
    """Keeps the lists of available libraries, the active modules and the menu."""

    def __init__(
        self,
        lib_dir: str = DEFAULT_LIB_DIR,
        registry: Mapping[str, Factory] | None = None,
    ) -> None:
        self.lib_dir = lib_dir
        self.registry: Mapping[str, Factory] = (
            registry if registry is not None else default_registry()
        )
        self.display: DisplayModule | None = None
        self.game: GameModule | None = None
        self.menu = GameData()
        self.display_libs: list[str] = []
        self.game_libs: list[str] = []
        self.selected_display = 0
        self.selected_game = 0
        self.cursor_col = 0
        self.cursor_row = 0

    def _scan(self, predicate: Callable[[str], bool], mode: LibType) -> None:
        try:
            names = sorted(os.listdir(self.lib_dir))
        except OSError as exc:
            raise LibraryError(str(exc)) from exc
        for name in names:
            if predicate(name):
                self.add_module(name, mode)

    def find_display_libs(self) -> None:
        """Record every display library found in the library directory."""
        self._scan(is_display_lib, LibType.GRAPHIC)

    def find_game_libs(self) -> None:
        """Record every game library found in the library directory."""
        self._scan(is_game_lib, LibType.GAME)

    def add_module(self, name: str, mode: LibType) -> None:
        """Append a library name to the list for its kind."""
        if mode is LibType.GRAPHIC:
            self.display_libs.append(name)
        else:
            self.game_libs.append(name)

    def _close_display(self) -> None:
        if self.display is not None:
            display, self.display = self.display, None
            display.close()

    def load_module(self, name: str, mode: LibType) -> None:
        """Make the named library the active display or game."""
        base = lib_basename(name)
        path = os.path.join(self.lib_dir, base)
        if not os.path.isfile(path):
            raise LibraryError(f"Error when loading lib : {name} : {path}: no such file")
        factory = self.registry.get(base)
        if factory is None:
            kind = "display lib" if mode is LibType.GRAPHIC else "game lib"
            raise LibraryError(
                f"Error when getting symbol : no entry point in ({kind}) : {name}"
            )
        if mode is LibType.GRAPHIC:
            self._close_display()
            self.display = factory()  # type: ignore[assignment]
        else:
            self.game = None
            self.game = factory()  # type: ignore[assignment]

    def load_next_module(self, mode: LibType) -> None:
        """Switch to the next library of the given kind, wrapping around."""
        if mode is LibType.GRAPHIC:
            names = self.display_libs
            index = 0 if self.selected_display + 1 >= len(names) else self.selected_display + 1
            self.selected_display = index
        else:
            names = self.game_libs
            index = 0 if self.selected_game + 1 >= len(names) else self.selected_game + 1
            self.selected_game = index
        if index < len(names):
            self.load_module(names[index], mode)

    def select_first_lib(self, name: str) -> None:
        """Mark the display library named by a path as the selected one."""
        base = lib_basename(name)
        if base in self.display_libs:
            self.selected_display = self.display_libs.index(base)

    def create_menu(self) -> None:
        """Add the menu border to the menu map."""
        self.menu.size = (MENU_SIZE, MENU_SIZE)
        last = MENU_SIZE - 1
        for i in range(MENU_SIZE):
            for j in range(MENU_SIZE):
                if i in (0, last) or j in (0, last):
                    self.menu.objects.append(
                        _menu_object(
                            (i, j), MENU_WALL_COLOR, MENU_WALL_ASSET, "#", ObjectType.GRAPHIC
                        )
                    )

    def _entry_color(self, col: int, row: int) -> RGB:
        if self.cursor_col == col and self.cursor_row == row:
            return MENU_CURSOR_COLOR
        return MENU_TEXT_COLOR

    def _selected_display_name(self) -> str:
        if 0 <= self.selected_display < len(self.display_libs):
            return self.display_libs[self.selected_display]
        return ""

    def update_menu(self) -> None:
        """Rebuild the menu with the library lists and the cursor highlight."""
        self.clear_menu()
        for row, name in enumerate(self.display_libs):
            self.menu.objects.append(
                _menu_object(
                    (3, row + 2), self._entry_color(0, row), name, " ", ObjectType.TEXT
                )
            )
        stacked = "ncurses" in self._selected_display_name()
        for row, name in enumerate(self.game_libs):
            pos = (3, row + 10) if stacked else (15, row + 2)
            self.menu.objects.append(
                _menu_object(pos, self._entry_color(1, row), name, " ", ObjectType.TEXT)
            )

    @staticmethod
    def _entry(names: Sequence[str], row: int) -> str:
        if not 0 <= row < len(names):
            raise LibraryError(f"no library at menu position {row}")
        return names[row]

    def manage_menu_events(self, events: Iterable[Event]) -> bool:
        """Move the cursor or load the chosen library; False once a game starts."""
        self.clear_menu()
        for event in events:
            kind = event.type
            if kind == "Enter":
                if self.cursor_col == 0:
                    name = self._entry(self.display_libs, self.cursor_row)
                    self.load_module(name, LibType.GRAPHIC)
                    self.selected_display = self.cursor_row
                    return True
                name = self._entry(self.game_libs, self.cursor_row)
                self.load_module(name, LibType.GAME)
                self.selected_game = self.cursor_row
                return False
            if kind == "Up":
                if self.cursor_row > 0:
                    self.cursor_row -= 1
            elif kind == "Down":
                if (self.cursor_col == 0 and self.cursor_row < len(self.display_libs) - 1) or (
                    self.cursor_col == 1 and self.cursor_row < len(self.game_libs) - 1
                ):
                    self.cursor_row += 1
            elif kind == "Right":
                if self.cursor_col < 1 and self.cursor_row <= len(self.game_libs) - 1:
                    self.cursor_col += 1
            elif kind == "Left":
                if self.cursor_col > 0 and self.cursor_row <= len(self.display_libs) - 1:
                    self.cursor_col -= 1
        return True

    def clear_menu(self) -> None:
        """Reset the menu to its bare border."""
        self.menu.objects.clear()
        self.create_menu()

    def close(self) -> None:
        """Release the active display and game."""
        self._close_display()
        self.game = None