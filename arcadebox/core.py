"""The main loop that ties the active display, game and menu together."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from arcadebox.libnames import is_display_lib
from arcadebox.lib import Lib, LibraryError, LibType
from arcadebox.objects import Event


class Core:
    """Runs the menu or the active game on the active display."""

    def __init__(self, lib: Lib | None = None) -> None:
        self.lib = lib if lib is not None else Lib()
        self.is_menu = False

    def init(self, lib_path: str) -> None:
        """List the libraries, open the given display and show the menu."""
        self.lib.find_display_libs()
        self.lib.find_game_libs()
        self.lib.select_first_lib(lib_path)
        self.lib.load_module(lib_path, LibType.GRAPHIC)
        self.lib.create_menu()
        self.is_menu = True

    def event_manager(self, events: Iterable[Event]) -> bool:
        """Handle global events; return True when the program should exit."""
        for event in events:
            if event.type == "Exit":
                return True
            if event.type == "Menu":
                self.is_menu = True
            elif event.type == "NextL":
                self.lib.load_next_module(LibType.GRAPHIC)
            elif event.type == "NextG":
                self.lib.load_next_module(LibType.GAME)
        return False

    def step(self) -> bool:
        """Run one frame; return False once an exit was requested."""
        if self.lib.display is None:
            raise LibraryError("no display library is loaded")
        events = self.lib.display.get_events()
        if self.event_manager(events):
            return False
        display = self.lib.display
        if self.is_menu or self.lib.game is None:
            display.clear()
            display.display(self.lib.menu)
            self.is_menu = self.lib.manage_menu_events(events)
            self.lib.update_menu()
            return True
        game = self.lib.game
        display.clear()
        display.display(game.data)
        game.manage_events(events)
        game.iterate()
        return True

    def loop(self) -> None:
        """Run frames until exit, then release the modules."""
        try:
            while self.step():
                pass
        finally:
            self.lib.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the arcade with the display library named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: arcade path_to_graphic_library", file=sys.stderr)
        return 84
    if not is_display_lib(args[0]):
        print("Invalid graphic library", file=sys.stderr)
        return 84
    core = Core()
    try:
        core.init(args[0])
        core.loop()
    except LibraryError as exc:
        core.lib.close()
        print(exc, file=sys.stderr)
        return 84
    return 0


if __name__ == "__main__":
    sys.exit(main())