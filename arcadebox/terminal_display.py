"""A curses display: draws game data as characters in the terminal."""

from __future__ import annotations

import curses
from typing import Any

from arcadebox.objects import RGB, DisplayModule, Event, GameData, ObjectType

WINDOW_WIDTH = 80
WINDOW_HEIGHT = 24

TILE_SIZE = 1

_KEY_EVENTS: dict[int, str] = {
    curses.KEY_UP: "Up",
    curses.KEY_DOWN: "Down",
    curses.KEY_LEFT: "Left",
    curses.KEY_RIGHT: "Right",
    27: "Escape",
    32: "Space",
    10: "Enter",
    ord("l"): "NextL",
    ord("g"): "NextG",
    ord("r"): "Restart",
    ord("m"): "Menu",
    ord("q"): "Exit",
}


def event_for_key(key: int) -> Event | None:
    """Return the event bound to a curses key code, or None."""
    name = _KEY_EVENTS.get(key)
    return Event(name) if name is not None else None


def color_pair_index(rgb: RGB) -> int:
    """Map a colour onto one of 216 colour pair numbers, starting at 1."""
    r, g, b = rgb
    return r * 6 // 256 + (g * 6 // 256) * 6 + (b * 6 // 256) * 36 + 1


def _init_pair(pair: int, foreground: int, background: int) -> None:
    try:
        curses.init_pair(pair, foreground, background)
    except (curses.error, ValueError, OverflowError):
        pass


def _pair_attr(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except (curses.error, ValueError, OverflowError):
        return 0


class TerminalDisplay(DisplayModule):
    """Render objects with curses; text objects print their asset string."""

    def __init__(self, screen: Any = None) -> None:
        self._owns_terminal = screen is None
        self._closed = False
        if screen is None:
            screen = curses.initscr()
            try:
                curses.cbreak()
                curses.raw()
                curses.noecho()
                try:
                    curses.curs_set(0)
                except curses.error:
                    pass
                try:
                    curses.start_color()
                except curses.error:
                    pass
                _init_pair(1, curses.COLOR_RED, curses.COLOR_BLUE)
                _init_pair(2, curses.COLOR_GREEN, curses.COLOR_BLUE)
            except Exception:
                curses.endwin()
                raise
        screen.nodelay(True)
        screen.keypad(True)
        self._screen = screen

    def display(self, data: GameData) -> None:
        """Draw every object, centred by half the map size, then refresh."""
        start_x = data.size[0] // 2
        start_y = data.size[1] // 2
        screen = self._screen
        screen.erase()
        for obj in data.objects:
            pos_x = start_x + obj.pos[0] * TILE_SIZE
            pos_y = start_y + obj.pos[1] * TILE_SIZE
            if obj.type is ObjectType.TEXT:
                pair = color_pair_index(obj.rgb)
                _init_pair(pair, curses.COLOR_WHITE, curses.COLOR_BLACK)
                attr = _pair_attr(pair) | curses.A_DIM
                screen.attron(attr)
                try:
                    screen.addstr(pos_y, pos_x, obj.asset)
                except curses.error:
                    pass
                screen.attroff(attr)
            else:
                attr = _pair_attr(1)
                screen.attron(attr)
                for i in range(obj.size[0] * TILE_SIZE):
                    for j in range(obj.size[1] * TILE_SIZE):
                        try:
                            screen.addch(pos_y + j, pos_x + i, obj.ascii)
                        except curses.error:
                            pass
                screen.attroff(attr)
        screen.refresh()

    def clear(self) -> None:
        """Erase the screen."""
        self._screen.erase()

    def get_events(self) -> list[Event]:
        """Read at most one pending key and return its event, if bound."""
        key = self._screen.getch()
        if key == curses.ERR:
            return []
        event = event_for_key(key)
        return [event] if event is not None else []

    def close(self) -> None:
        """Restore the terminal if this display initialised it."""
        if self._closed:
            return
        self._closed = True
        if self._owns_terminal:
            curses.endwin()