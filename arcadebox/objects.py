"""Core data types shared by games, displays and the menu."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable


class ObjectType(enum.Enum):
    """How a display should render an object."""

    GRAPHIC = "graphic"
    TEXT = "text"


class Direction(enum.Enum):
    """Movement direction of a game entity; PAUSE stops movement."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    PAUSE = 4


RGB = tuple[int, int, int]
Vec2 = tuple[int, int]


@dataclass
class GameObject:
    """A drawable cell or text item on a game map."""

    rgb: RGB = (0, 0, 0)
    pos: Vec2 = (0, 0)
    size: Vec2 = (0, 0)
    asset: str = ""
    ascii: str = "\0"
    type: ObjectType = ObjectType.GRAPHIC

    def __post_init__(self) -> None:
        self.rgb = tuple(self.rgb)  # type: ignore[assignment]
        self.pos = tuple(self.pos)  # type: ignore[assignment]
        self.size = tuple(self.size)  # type: ignore[assignment]
        if len(self.rgb) != 3:
            raise ValueError(f"rgb must have 3 components, got {self.rgb!r}")
        if len(self.pos) != 2:
            raise ValueError(f"pos must have 2 components, got {self.pos!r}")
        if len(self.size) != 2:
            raise ValueError(f"size must have 2 components, got {self.size!r}")
        if len(self.ascii) != 1:
            raise ValueError(f"ascii must be a single character, got {self.ascii!r}")


@dataclass(frozen=True)
class Event:
    """An input event identified by its type name, such as "Up" or "Exit"."""

    type: str


@dataclass
class GameData:
    """Everything a display needs to draw one frame."""

    objects: list[GameObject] = field(default_factory=list)
    size: Vec2 = (0, 0)


class DisplayModule(ABC):
    """A renderer that draws game data and reports input events."""

    @abstractmethod
    def display(self, data: GameData) -> None:
        """Draw one frame of the given data."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the drawing surface."""

    @abstractmethod
    def get_events(self) -> list[Event]:
        """Return the events received since the previous call."""

    def close(self) -> None:
        """Release any resources held by the display."""

    def __enter__(self) -> "DisplayModule":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class GameModule(ABC):
    """A game that reacts to events and advances its state over time."""

    @abstractmethod
    def manage_events(self, events: Iterable[Event]) -> None:
        """Apply the given input events to the game state."""

    @abstractmethod
    def iterate(self) -> None:
        """Advance the game by one step."""

    @property
    @abstractmethod
    def data(self) -> GameData:
        """The current map to be displayed."""