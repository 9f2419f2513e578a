import pytest

from arcadebox.objects import Event, GameData, GameObject, ObjectType
from arcadebox.terminal_display import (
    TerminalDisplay,
    color_pair_index,
    event_for_key,
)


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.calls = []
        self.nodelay_flag = None
        self.keypad_flag = None

    def nodelay(self, flag):
        self.nodelay_flag = flag

    def keypad(self, flag):
        self.keypad_flag = flag

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def erase(self):
        self.calls.append(("erase",))

    def refresh(self):
        self.calls.append(("refresh",))

    def addstr(self, y, x, text):
        self.calls.append(("addstr", y, x, text))

    def addch(self, y, x, ch):
        self.calls.append(("addch", y, x, ch))

    def attron(self, attr):
        self.calls.append(("attron", attr))

    def attroff(self, attr):
        self.calls.append(("attroff", attr))


@pytest.mark.parametrize(
    "key, name",
    [
        (259, "Up"),
        (258, "Down"),
        (260, "Left"),
        (261, "Right"),
        (27, "Escape"),
        (32, "Space"),
        (10, "Enter"),
        (ord("l"), "NextL"),
        (ord("g"), "NextG"),
        (ord("r"), "Restart"),
        (ord("m"), "Menu"),
        (ord("q"), "Exit"),
    ],
)
def test_event_for_key_bound(key, name):
    assert event_for_key(key) == Event(name)


def test_event_for_key_unbound():
    assert event_for_key(ord("x")) is None
    assert event_for_key(-1) is None


def test_color_pair_extremes():
    assert color_pair_index((0, 0, 0)) == 1
    assert color_pair_index((255, 255, 255)) == 216


def test_color_pair_range_and_order():
    corners = [
        (r, g, b) for r in (0, 255) for g in (0, 255) for b in (0, 255)
    ]
    indices = [color_pair_index(c) for c in corners]
    assert all(1 <= i <= 216 for i in indices)
    assert len(set(indices)) == len(corners)
    assert color_pair_index((128, 0, 0)) > color_pair_index((0, 0, 0))


def test_init_sets_input_modes():
    screen = FakeScreen()
    display = TerminalDisplay(screen)
    assert screen.nodelay_flag is True
    assert screen.keypad_flag is True
    display.close()


def test_get_events_reads_one_key_per_call():
    screen = FakeScreen([ord("q"), 259])
    display = TerminalDisplay(screen)
    assert display.get_events() == [Event("Exit")]
    assert display.get_events() == [Event("Up")]
    assert display.get_events() == []


def test_get_events_ignores_unbound_key():
    display = TerminalDisplay(FakeScreen([ord("z")]))
    assert display.get_events() == []


def test_display_text_at_object_position():
    screen = FakeScreen()
    display = TerminalDisplay(screen)
    obj = GameObject(pos=(7, 3), size=(1, 1), asset="arcade_snake.so", type=ObjectType.TEXT)
    display.display(GameData(objects=[obj], size=(0, 0)))
    assert ("addstr", 3, 7, "arcade_snake.so") in screen.calls
    assert screen.calls[0] == ("erase",)
    assert screen.calls[-1] == ("refresh",)


def test_display_graphic_fills_object_area():
    screen = FakeScreen()
    display = TerminalDisplay(screen)
    obj = GameObject(pos=(4, 5), size=(2, 3), ascii="#")
    display.display(GameData(objects=[obj], size=(0, 0)))
    cells = {(c[1], c[2]) for c in screen.calls if c[0] == "addch"}
    chars = {c[3] for c in screen.calls if c[0] == "addch"}
    assert cells == {(5, 4), (6, 4), (7, 4), (5, 5), (6, 5), (7, 5)}
    assert chars == {"#"}


def test_display_shifts_with_map_size():
    small = FakeScreen()
    large = FakeScreen()
    obj = GameObject(pos=(1, 1), size=(1, 1), asset="menu", type=ObjectType.TEXT)
    TerminalDisplay(small).display(GameData(objects=[obj], size=(0, 0)))
    TerminalDisplay(large).display(GameData(objects=[obj], size=(30, 30)))
    small_call = next(c for c in small.calls if c[0] == "addstr")
    large_call = next(c for c in large.calls if c[0] == "addstr")
    assert large_call[1] > small_call[1]
    assert large_call[2] > small_call[2]


def test_clear_erases():
    screen = FakeScreen()
    TerminalDisplay(screen).clear()
    assert screen.calls == [("erase",)]