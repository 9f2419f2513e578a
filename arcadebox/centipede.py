"""The centipede game: shoot a centipede winding down a mushroom field."""

from __future__ import annotations

import random
import time
from typing import Callable, Iterable, Protocol, Sequence

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

MAP_SIZE_X = 41
MAP_SIZE_Y = 27

PLAYER_COLOR: RGB = (255, 0, 0)
LAZER_COLOR: RGB = (0, 255, 0)
CENTIPEDE_COLOR: RGB = (240, 243, 0)
WALL_COLOR: RGB = (99, 115, 0)
NOTHING_COLOR: RGB = (0, 0, 0)

CENTIPEDE_LEN = 5
OBJECT_SIZE: Vec2 = (1, 1)

COOLDOWN_MS = 100
LAZER_COOLDOWN_MS = 50

# Percentage chance that an empty map cell holds a mushroom.
WALL_CHANCE = 2

DEFAULT_MAP_PATH = "Assets/centipede/map.txt"

WALL_ASSET = "Assets/centipede/5.png"
PLAYER_ASSET = "Assets/centipede/player.png"
LAZER_ASSET = "Assets/centipede/lazer.png"
CENTIPEDE_ASSET = "Assets/snake/snakeHeadDown.png"

NO_LAZER: Vec2 = (-1, -1)

# The player may not climb above this fraction of the map height.
PLAYER_ZONE = 0.8

_PLAYER_STEPS: dict[Direction, Vec2] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_DIRECTION_EVENTS: dict[str, Direction] = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
    "Escape": Direction.PAUSE,
}


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def _elapsed_ms(now: float, since: float) -> int:
    return int((now - since) * 1000)


class CentipedeGame(GameModule):
    """Move a shooter at the bottom of the map and blast the centipede."""

    def __init__(
        self,
        map_path: str = DEFAULT_MAP_PATH,
        rng: _RandomSource | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._map_path = map_path
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self._clock: Callable[[], float] = clock if clock is not None else time.monotonic
        self._map = GameData()
        self.create_map()
        self.player_pos: Vec2 = (MAP_SIZE_X // 2, int(MAP_SIZE_Y * PLAYER_ZONE + 1))
        self._last_tick = self._clock()
        self._last_lazer_move: float | None = None
        self.char_dir = Direction(self._rng.randrange(4))
        self.lazer_pos: Vec2 = NO_LAZER
        self.fired = False
        self.points = 0
        self.iterations = 0
        head: Vec2 = (MAP_SIZE_X // 2, int(MAP_SIZE_Y * 0.2 + 1))
        self.centipede: list[Vec2] = [
            (head[0] + i, head[1]) for i in range(CENTIPEDE_LEN)
        ]
        self.fragments: list[list[Vec2]] = []
        self.centipede_dir = Direction.RIGHT

    @property
    def data(self) -> GameData:
        """The current map."""
        return self._map

    def manage_events(self, events: Iterable[Event]) -> None:
        """Apply every event in order."""
        for event in events:
            direction = _DIRECTION_EVENTS.get(event.type)
            if direction is not None:
                self.char_dir = direction
            elif event.type == "Space":
                self.fired = True
            elif event.type == "Restart":
                self.restart()

    def iterate(self) -> None:
        """Advance the game once the cooldown has elapsed."""
        now = self._clock()
        if _elapsed_ms(now, self._last_tick) < COOLDOWN_MS:
            return
        self._last_tick = now
        if self.char_dir != Direction.PAUSE:
            self.move_player()
            self.move_lazer()
            self.move_centipede()
        self.update_player(self.player_pos, PLAYER_COLOR)
        self.update_lazer(self.lazer_pos, LAZER_COLOR)
        self.update_centipede(self.centipede, CENTIPEDE_COLOR)
        if self.fired:
            self.fire_lazer()
        self.fired = False
        self.iterations += 1

    def _wall(self, pos: Vec2) -> GameObject:
        return GameObject(
            rgb=WALL_COLOR,
            pos=pos,
            size=OBJECT_SIZE,
            asset=WALL_ASSET,
            ascii="5",
            type=ObjectType.GRAPHIC,
        )

    def create_map(self) -> None:
        """Load the map file; '#' and a few random blanks become mushrooms."""
        self._map.objects.clear()
        try:
            with open(self._map_path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except OSError:
            return
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char == "#" or (
                    char == " " and self._rng.randint(1, 100) <= WALL_CHANCE
                ):
                    obj = self._wall((x, y))
                elif char == " ":
                    continue
                else:
                    obj = GameObject(pos=(x, y), size=OBJECT_SIZE)
                self._map.objects.append(obj)
        self._map.size = (len(lines[-1]) if lines else 0, len(lines))

    def restart(self) -> None:
        """Rebuild the map."""
        self._map.objects.clear()
        self.create_map()

    def update_centipede(self, positions: Sequence[Vec2], rgb: RGB) -> None:
        """Replace the drawn centipede segments, placed after player and lazer."""
        objects = self._map.objects
        objects[2:] = [obj for obj in objects[2:] if obj.ascii != "C"]
        for offset, pos in enumerate(positions):
            objects.insert(
                2 + offset,
                GameObject(
                    rgb=rgb,
                    pos=pos,
                    size=OBJECT_SIZE,
                    asset=CENTIPEDE_ASSET,
                    ascii="C",
                    type=ObjectType.GRAPHIC,
                ),
            )

    def update_player(self, pos: Vec2, rgb: RGB) -> None:
        """Draw the player as the first map object."""
        player = GameObject(
            rgb=rgb,
            pos=pos,
            size=OBJECT_SIZE,
            asset=PLAYER_ASSET,
            ascii="P",
            type=ObjectType.GRAPHIC,
        )
        if self.iterations > 0 and self._map.objects:
            del self._map.objects[0]
        self._map.objects.insert(0, player)

    def update_lazer(self, pos: Vec2, rgb: RGB) -> None:
        """Draw the lazer as the second map object."""
        lazer = GameObject(
            rgb=rgb,
            pos=pos,
            size=OBJECT_SIZE,
            asset=LAZER_ASSET,
            ascii="|",
            type=ObjectType.GRAPHIC,
        )
        if self.iterations > 1 and len(self._map.objects) > 1:
            del self._map.objects[1]
        self._map.objects.insert(1, lazer)

    def move_player(self) -> None:
        """Step the player in its direction unless a mushroom is in the way."""
        step = _PLAYER_STEPS.get(self.char_dir)
        if step is None:
            return
        x, y = self.player_pos
        if self.char_dir == Direction.UP and not y > MAP_SIZE_Y * PLAYER_ZONE:
            step = (0, 0)
        new_pos = (x + step[0], y + step[1])
        if self.is_wall(new_pos):
            return
        self.player_pos = new_pos

    def move_lazer(self) -> None:
        """Move a fired lazer up, stopping on mushrooms, segments or the top."""
        now = self._clock()
        if (
            self._last_lazer_move is not None
            and _elapsed_ms(now, self._last_lazer_move) < LAZER_COOLDOWN_MS
        ):
            return
        self._last_lazer_move = now
        if self.lazer_pos == NO_LAZER:
            return
        if self.is_wall(self.lazer_pos):
            self._stop_lazer()
            return
        if self.lazer_pos in self.centipede:
            self.split_centipede()
            self._stop_lazer()
            return
        x, y = self.lazer_pos
        if y > 0:
            self.update_lazer(self.lazer_pos, NOTHING_COLOR)
            self.lazer_pos = (x, y - 1)
        else:
            self._stop_lazer()

    def _stop_lazer(self) -> None:
        self.update_lazer(self.lazer_pos, NOTHING_COLOR)
        self.lazer_pos = NO_LAZER
        self.fired = False

    def move_centipede(self) -> None:
        """Slide the centipede sideways, dropping a row when it meets a mushroom."""
        if not self.centipede:
            return
        self.centipede[1:] = self.centipede[:-1]
        x, y = self.centipede[0]
        if self.centipede_dir == Direction.RIGHT:
            x += 1
        elif self.centipede_dir == Direction.LEFT:
            x -= 1
        self.centipede[0] = (x, y)
        if self.is_wall(self.centipede[0]):
            self.centipede_dir = (
                Direction.LEFT
                if self.centipede_dir == Direction.RIGHT
                else Direction.RIGHT
            )
            self.centipede[0] = (x, y + 1)
        for index, (sx, sy) in enumerate(self.centipede[1:], start=1):
            if self.is_wall((sx, sy)):
                self.centipede[index] = (sx, sy + 1)

    def fire_lazer(self) -> None:
        """Launch the lazer from the player if none is in flight."""
        if self.fired and self.lazer_pos == NO_LAZER:
            self.lazer_pos = self.player_pos
            self.fired = False

    def is_wall(self, pos: Vec2) -> bool:
        """Tell whether a mushroom occupies the given cell."""
        pos = tuple(pos)  # type: ignore[assignment]
        return any(obj.pos == pos and obj.ascii == "5" for obj in self._map.objects)

    def split_centipede(self) -> None:
        """Cut the centipede where the lazer hit it, leaving a mushroom there."""
        try:
            index = self.centipede.index(self.lazer_pos)
        except ValueError:
            return
        before = self.centipede[:index]
        after = self.centipede[index + 1 :]
        if before:
            self.fragments.append(before)
        if after:
            self.fragments.append(after)
        hit = self.centipede.pop(index)
        self._map.objects.append(self._wall(hit))
        for fragment in self.fragments:
            if hit in fragment:
                fragment.remove(hit)