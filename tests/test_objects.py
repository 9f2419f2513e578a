import pytest

from arcadebox.objects import (
    DisplayModule,
    Event,
    GameData,
    GameModule,
    GameObject,
    ObjectType,
)


def test_game_object_defaults():
    obj = GameObject()
    assert obj.rgb == (0, 0, 0)
    assert obj.pos == (0, 0)
    assert obj.size == (0, 0)
    assert obj.asset == ""
    assert obj.ascii == "\0"
    assert obj.type is ObjectType.GRAPHIC


def test_game_object_converts_sequences_to_tuples():
    obj = GameObject(rgb=[255, 255, 255], pos=[3, 4], size=[1, 1])
    assert obj.rgb == (255, 255, 255)
    assert obj.pos == (3, 4)
    assert obj.size == (1, 1)


def test_game_object_equality_uses_fields():
    a = GameObject(pos=(1, 2), ascii="#", asset="Assets/snake/wall.png")
    b = GameObject(pos=(1, 2), ascii="#", asset="Assets/snake/wall.png")
    assert a == b
    b.pos = (2, 2)
    assert not a == b


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rgb": (1, 2)},
        {"pos": (1, 2, 3)},
        {"size": (1,)},
        {"ascii": "ab"},
        {"ascii": ""},
    ],
)
def test_game_object_rejects_bad_shapes(kwargs):
    with pytest.raises(ValueError):
        GameObject(**kwargs)


def test_event_holds_type_and_is_hashable():
    event = Event("Exit")
    assert event.type == "Exit"
    assert Event("Up") == Event("Up")
    assert len({Event("Up"), Event("Up"), Event("Down")}) == 2


def test_event_is_immutable():
    event = Event("Up")
    with pytest.raises(AttributeError):
        event.type = "Down"
    assert event.type == "Up"
    assert event == Event("Up")


def test_game_data_lists_are_independent():
    first = GameData()
    second = GameData()
    first.objects.append(GameObject())
    assert len(first.objects) == 1
    assert second.objects == []
    assert first.size == (0, 0)


def test_abstract_modules_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DisplayModule()
    with pytest.raises(TypeError):
        GameModule()


class _RecordingDisplay(DisplayModule):
    def __init__(self):
        self.frames = []
        self.closed = False

    def display(self, data):
        self.frames.append(data)

    def clear(self):
        self.frames.clear()

    def get_events(self):
        return [Event("Up")]

    def close(self):
        self.closed = True


class _CounterGame(GameModule):
    def __init__(self):
        self.steps = 0
        self.seen = []
        self._data = GameData(size=(30, 20))

    def manage_events(self, events):
        self.seen.extend(e.type for e in events)

    def iterate(self):
        self.steps += 1

    @property
    def data(self):
        return self._data


def test_display_context_manager_closes():
    with _RecordingDisplay() as display:
        display.display(GameData())
        assert len(display.frames) == 1
        assert display.get_events() == [Event("Up")]
    assert display.closed is True


def test_concrete_game_module_works():
    game = _CounterGame()
    game.manage_events([Event("Left"), Event("Space")])
    game.iterate()
    game.iterate()
    assert game.seen == ["Left", "Space"]
    assert game.steps == 2
    assert game.data.size == (30, 20)