from __future__ import annotations

import pytest

from arcadebox.core import Core, main
from arcadebox.lib import Lib, LibraryError
from arcadebox.objects import DisplayModule, Event, GameData, GameModule


class FakeDisplay(DisplayModule):
    def __init__(self, name: str, script: list) -> None:
        self.name = name
        self.script = script
        self.frames: list[GameData] = []
        self.closed = False

    def display(self, data: GameData) -> None:
        self.frames.append(data)

    def clear(self) -> None:
        pass

    def get_events(self) -> list[Event]:
        return self.script.pop(0) if self.script else []

    def close(self) -> None:
        self.closed = True


class FakeGame(GameModule):
    def __init__(self, name: str) -> None:
        self.name = name
        self.iterations = 0
        self.seen: list[Event] = []
        self._data = GameData()

    def manage_events(self, events) -> None:
        self.seen.extend(events)

    def iterate(self) -> None:
        self.iterations += 1

    @property
    def data(self) -> GameData:
        return self._data


@pytest.fixture
def script():
    return []


@pytest.fixture
def core(tmp_path, script):
    directory = tmp_path / "lib"
    directory.mkdir()
    for name in ("arcade_sfml.so", "arcade_ncurses.so", "arcade_snake.so"):
        (directory / name).touch()
    registry = {
        "arcade_sfml.so": lambda: FakeDisplay("arcade_sfml.so", script),
        "arcade_ncurses.so": lambda: FakeDisplay("arcade_ncurses.so", script),
        "arcade_snake.so": lambda: FakeGame("arcade_snake.so"),
    }
    started = Core(Lib(str(directory), registry))
    started.init("./lib/arcade_sfml.so")
    return started


def test_init_opens_display_and_menu(core):
    assert core.is_menu is True
    assert core.lib.display.name == "arcade_sfml.so"
    assert core.lib.selected_display == 1
    assert core.lib.menu.size == (30, 30)


def test_exit_event_stops(core):
    assert core.event_manager([Event("Up"), Event("Exit")]) is True
    assert core.event_manager([Event("Up")]) is False


def test_menu_event_returns_to_menu(core):
    core.is_menu = False
    core.event_manager([Event("Menu")])
    assert core.is_menu is True


def test_next_display_event(core):
    first = core.lib.display
    core.event_manager([Event("NextL")])
    assert first.closed is True
    assert core.lib.display.name == "arcade_ncurses.so"


def test_next_game_event(core):
    core.event_manager([Event("NextG")])
    assert core.lib.game.name == "arcade_snake.so"


def test_step_returns_false_on_exit(core, script):
    script.append([Event("Exit")])
    assert core.step() is False


def test_menu_then_game(core, script):
    display = core.lib.display
    script.extend([[Event("Right")], [Event("Enter")], [Event("Up")]])
    assert core.step() is True
    assert core.lib.cursor_col == 1
    assert display.frames[-1] is core.lib.menu
    assert core.step() is True
    assert core.is_menu is False
    assert core.step() is True
    game = core.lib.game
    assert game.iterations == 1
    assert game.seen == [Event("Up")]
    assert display.frames[-1] is game.data


def test_loop_runs_until_exit_and_closes(core, script):
    display = core.lib.display
    script.extend([[], [], [Event("Exit")]])
    core.loop()
    assert display.closed is True
    assert core.lib.display is None
    assert len(display.frames) == 2


def test_init_with_missing_library_raises(tmp_path):
    (tmp_path / "lib").mkdir()
    with pytest.raises(LibraryError):
        Core(Lib(str(tmp_path / "lib"), {})).init("arcade_sfml.so")


def test_main_wrong_argument_count(capsys):
    assert main([]) == 84
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_non_display_library(capsys):
    assert main(["lib/arcade_snake.so"]) == 84
    assert "Invalid graphic library" in capsys.readouterr().err


def test_main_without_lib_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["lib/arcade_sfml.so"]) == 84
    assert capsys.readouterr().err.strip()