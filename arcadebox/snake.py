"""The snake game: steer a growing snake towards apples inside a walled map."""

from __future__ import annotations

import random
import time
from collections import deque
from typing import Callable, Iterable, Protocol

from arcadebox.objects import (
    RGB,
    Direction,
    Event,
    GameData,
    GameModule,
    GameObject,
    ObjectType,
    Vec2,
)

MAP_SIZE_X = 30
MAP_SIZE_Y = 20

SPAWN_LENGTH = 4
SPAWN_POS: Vec2 = ((MAP_SIZE_X - 2) // 2, (MAP_SIZE_Y - 2) // 2)

SNAKE_COLOR: RGB = (113, 18, 255)
APPLE_COLOR: RGB = (255, 0, 44)
WALL_COLOR: RGB = (99, 115, 0)
OBJECT_SIZE: Vec2 = (1, 1)

COOLDOWN_MS = 150

WALL_ASSET = "Assets/snake/wall.png"
APPLE_ASSET = "Assets/snake/apple.png"

_REMOVED_COLORS = frozenset({SNAKE_COLOR, (255, 0, 0), (0, 255, 0)})

_STEPS: dict[Direction, Vec2] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_HEAD_ASSETS = {
    Direction.UP: "Assets/snake/snakeHeadUp.png",
    Direction.DOWN: "Assets/snake/snakeHeadDown.png",
    Direction.LEFT: "Assets/snake/snakeHeadLeft.png",
    Direction.RIGHT: "Assets/snake/snakeHeadRight.png",
}

_TAIL_ASSETS = {
    Direction.UP: "Assets/snake/snakeTailUp.png",
    Direction.DOWN: "Assets/snake/snakeTailDown.png",
    Direction.LEFT: "Assets/snake/snakeTailLeft.png",
    Direction.RIGHT: "Assets/snake/snakeTailRight.png",
}

_BODY_ASSETS = {
    Direction.UP: "Assets/snake/snakeBodyVertical.png",
    Direction.DOWN: "Assets/snake/snakeBodyVertical.png",
    Direction.LEFT: "Assets/snake/snakeBodyHorizontal.png",
    Direction.RIGHT: "Assets/snake/snakeBodyHorizontal.png",
}

# A turn towards the key is refused while moving in the listed direction.
_TURNS: dict[str, tuple[Direction, Direction]] = {
    "Up": (Direction.UP, Direction.DOWN),
    "Down": (Direction.DOWN, Direction.UP),
    "Left": (Direction.LEFT, Direction.RIGHT),
    "Right": (Direction.RIGHT, Direction.LEFT),
}


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class SnakeGame(GameModule):
    """Classic snake on a 30x20 walled board."""

    def __init__(
        self,
        rng: _RandomSource | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self._clock: Callable[[], float] = clock if clock is not None else time.monotonic
        self._map = GameData()
        self._positions: deque[Vec2] = deque()
        self._directions: deque[Direction] = deque()
        self.create_map()
        self.snake_length = SPAWN_LENGTH
        self.snake_pos: Vec2 = SPAWN_POS
        self.apple_pos: Vec2 = self._random_apple_pos()
        self._iterations = 0
        self._last_tick = self._clock()
        self.snake_dir = Direction(self._rng.randrange(4))

    @property
    def data(self) -> GameData:
        """The current map."""
        return self._map

    def _random_apple_pos(self) -> Vec2:
        x = self._rng.randrange(MAP_SIZE_X - 3) + 1
        y = self._rng.randrange(MAP_SIZE_Y - 3) + 1
        return (x, y)

    def manage_events(self, events: Iterable[Event]) -> None:
        """Apply the first event that changes the game; ignore the rest."""
        for event in events:
            turn = _TURNS.get(event.type)
            if turn is not None:
                target, opposite = turn
                if self.snake_dir != opposite:
                    self.snake_dir = target
                    return
            elif event.type == "Escape":
                self.snake_dir = Direction.PAUSE
                return
            elif event.type == "Restart":
                self.restart()
                return

    def iterate(self) -> None:
        """Move the snake one cell once the cooldown has elapsed."""
        now = self._clock()
        if int((now - self._last_tick) * 1000) < COOLDOWN_MS:
            return
        self._last_tick = now
        step = _STEPS.get(self.snake_dir)
        if step is None:
            return
        x, y = self.snake_pos
        self.snake_pos = (x + step[0], y + step[1])
        if self.snake_pos == self.apple_pos:
            self.snake_length += 1
            self.change_apple_pos()

        self.update_map(self.apple_pos, APPLE_COLOR)
        self.update_map(self.snake_pos, SNAKE_COLOR)
        self._iterations += 1

        if self._iterations > 3 and any(
            obj.pos == self.snake_pos and obj.rgb in (WALL_COLOR, SNAKE_COLOR)
            for obj in self._map.objects[:-1]
        ):
            self.restart()

    def create_map(self) -> None:
        """Add the border walls to the map."""
        self._map.size = (MAP_SIZE_X, MAP_SIZE_Y)
        for i in range(MAP_SIZE_X):
            for j in range(MAP_SIZE_Y):
                if i in (0, MAP_SIZE_X - 1) or j in (0, MAP_SIZE_Y - 1):
                    self._map.objects.append(
                        GameObject(
                            rgb=WALL_COLOR,
                            pos=(i, j),
                            size=OBJECT_SIZE,
                            asset=WALL_ASSET,
                            ascii="#",
                            type=ObjectType.GRAPHIC,
                        )
                    )

    def change_apple_pos(self) -> None:
        """Move the apple to a new random cell not covered by the snake."""
        last = self.apple_pos
        while True:
            new = self._random_apple_pos()
            if new == last:
                new = ((new[0] + 1) % 24, (new[1] + 1) % 19)
            if not any(
                obj.pos == new and obj.rgb == SNAKE_COLOR for obj in self._map.objects
            ):
                break
        self.apple_pos = new

    def update_map(self, pos: Vec2, rgb: RGB) -> None:
        """Draw the snake head or the apple at the given position."""
        if tuple(rgb) == SNAKE_COLOR:
            self.update_snake(pos, rgb)
        else:
            self.update_apple(pos, rgb)

    def restart(self) -> None:
        """Reset the board and the snake; the game starts paused."""
        self._map.objects.clear()
        self.create_map()
        self.snake_length = SPAWN_LENGTH
        self.snake_pos = SPAWN_POS
        self.apple_pos = self._random_apple_pos()
        self._iterations = 0
        self._last_tick = self._clock()
        self.snake_dir = Direction.PAUSE
        self._positions.clear()
        self._directions.clear()
        self.update_map(self.snake_pos, SNAKE_COLOR)

    def update_snake(self, pos: Vec2, rgb: RGB) -> None:
        """Push a new head position and redraw every snake segment."""
        rgb = tuple(rgb)  # type: ignore[assignment]
        self._positions.append(tuple(pos))  # type: ignore[arg-type]
        self._directions.append(self.snake_dir)

        if len(self._positions) > self.snake_length:
            self._positions.popleft()
            self._directions.popleft()
            self.remove_old_snake_segments()

        head = self._positions[-1]
        tail = self._positions[0]
        for seg_pos, seg_dir in zip(self._positions, self._directions):
            if seg_pos == head:
                asset = _HEAD_ASSETS.get(self.snake_dir, "")
            elif seg_pos == tail:
                asset = _TAIL_ASSETS.get(seg_dir, "")
            else:
                asset = _BODY_ASSETS.get(seg_dir, "")
            self._map.objects.append(
                GameObject(
                    rgb=rgb,
                    pos=seg_pos,
                    size=OBJECT_SIZE,
                    asset=asset,
                    ascii="O",
                    type=ObjectType.GRAPHIC,
                )
            )

    def remove_old_snake_segments(self) -> None:
        """Drop every snake-coloured object from the map."""
        self._map.objects[:] = [
            obj for obj in self._map.objects if obj.rgb not in _REMOVED_COLORS
        ]

    def update_apple(self, pos: Vec2, rgb: RGB) -> None:
        """Place the apple at the front of the map, replacing the previous one."""
        if tuple(rgb) != APPLE_COLOR:
            return
        apple = GameObject(
            rgb=rgb,
            pos=pos,
            size=OBJECT_SIZE,
            asset=APPLE_ASSET,
            ascii="A",
            type=ObjectType.GRAPHIC,
        )
        if self._iterations > 0 and self._map.objects:
            del self._map.objects[0]
        self._map.objects.insert(0, apple)