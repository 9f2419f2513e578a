"""Window displays drawn with pygame, with sprites, text and filled tiles."""

from __future__ import annotations

import os
import sys

import pygame

from arcadebox.objects import RGB, DisplayModule, Event, GameData, ObjectType

TILE_SIZE = 20
FONT_SIZE = 20
DEFAULT_ASSETS_DIR = "Assets"

_KEY_EVENTS: dict[int, str] = {
    pygame.K_UP: "Up",
    pygame.K_DOWN: "Down",
    pygame.K_LEFT: "Left",
    pygame.K_RIGHT: "Right",
    pygame.K_ESCAPE: "Escape",
    pygame.K_SPACE: "Space",
    pygame.K_RETURN: "Enter",
    pygame.K_l: "NextL",
    pygame.K_g: "NextG",
    pygame.K_r: "Restart",
    pygame.K_m: "Menu",
    pygame.K_q: "Exit",
}


def find_textures(path: str) -> list[str]:
    """List every regular file below a directory, as 'dir/name' paths."""
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError:
        print(f"Error opening directory {path}", file=sys.stderr)
        return []
    found: list[str] = []
    for entry in entries:
        full = f"{path}/{entry.name}"
        if entry.is_dir(follow_symlinks=False):
            found.extend(find_textures(full))
        elif entry.is_file(follow_symlinks=False):
            found.append(full)
    return found


def event_for_key(key: int) -> Event | None:
    """Return the event bound to a pygame key code, or None."""
    name = _KEY_EVENTS.get(key)
    return Event(name) if name is not None else None


def _color(rgb: RGB) -> tuple[int, int, int]:
    return (rgb[0] & 0xFF, rgb[1] & 0xFF, rgb[2] & 0xFF)


def _centre(window: int, content: int) -> int:
    return int((window - content) / 2)


class WindowDisplay(DisplayModule):
    """A pygame window that draws the map centred with 20-pixel tiles."""

    FRAME_RATE: int | None = None
    TITLE = "Arcade"

    def __init__(self, width: int, height: int, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        pygame.display.init()
        pygame.font.init()
        self._screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(self.TITLE)
        self._clock = pygame.time.Clock()
        self.textures = find_textures(assets_dir)
        self._texture_set = frozenset(self.textures)
        self._font_path = f"{assets_dir}/font.ttf"
        self._font: pygame.font.Font | None = None
        self._images: dict[str, pygame.Surface] = {}
        self._closed = False

    def texture_exists(self, path: str) -> bool:
        """Tell whether the path was found among the asset files."""
        return path in self._texture_set

    def _image(self, path: str) -> pygame.Surface | None:
        image = self._images.get(path)
        if image is None:
            try:
                image = pygame.image.load(path)
            except (OSError, pygame.error):
                return None
            self._images[path] = image
        return image

    def _load_font(self) -> pygame.font.Font | None:
        if self._font is None:
            try:
                self._font = pygame.font.Font(self._font_path, FONT_SIZE)
            except (OSError, pygame.error):
                return None
        return self._font

    def _surface(self) -> pygame.Surface:
        surface = pygame.display.get_surface()
        if surface is not None:
            self._screen = surface
        return self._screen

    def display(self, data: GameData) -> None:
        """Draw one frame and show it."""
        surface = self._surface()
        width, height = surface.get_size()
        start_x = _centre(width, data.size[0] * TILE_SIZE)
        start_y = _centre(height, data.size[1] * TILE_SIZE)
        surface.fill((0, 0, 0))
        for obj in data.objects:
            x = start_x + obj.pos[0] * TILE_SIZE
            y = start_y + obj.pos[1] * TILE_SIZE
            w = obj.size[0] * TILE_SIZE
            h = obj.size[1] * TILE_SIZE
            if obj.type is ObjectType.GRAPHIC and obj.asset and self.texture_exists(obj.asset):
                image = self._image(obj.asset)
                if image is not None:
                    scaled = pygame.transform.scale(image, (max(w, 0), max(h, 0)))
                    surface.blit(scaled, (x, y))
                    continue
            elif obj.type is ObjectType.TEXT:
                font = self._load_font()
                if font is not None:
                    surface.blit(font.render(obj.asset, False, _color(obj.rgb)), (x, y))
                    continue
            surface.fill(_color(obj.rgb), pygame.Rect(x, y, max(w, 0), max(h, 0)))
        pygame.display.flip()
        if self.FRAME_RATE:
            self._clock.tick(self.FRAME_RATE)

    def clear(self) -> None:
        """Fill the window with black."""
        self._surface().fill((0, 0, 0))

    def get_events(self) -> list[Event]:
        """Drain pending window events; closing the window means Exit."""
        events: list[Event] = []
        for raw in pygame.event.get():
            if raw.type == pygame.QUIT:
                events.append(Event("Exit"))
            elif raw.type == pygame.KEYDOWN:
                event = event_for_key(raw.key)
                if event is not None:
                    events.append(event)
        return events

    def close(self) -> None:
        """Close the window."""
        if self._closed:
            return
        self._closed = True
        self._images.clear()
        self._font = None
        pygame.font.quit()
        pygame.display.quit()


class SdlDisplay(WindowDisplay):
    """A large 1900x1000 window."""

    def __init__(self, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        super().__init__(1900, 1000, assets_dir)


class SfmlDisplay(WindowDisplay):
    """An 800x600 window limited to 60 frames per second."""

    FRAME_RATE = 60

    def __init__(self, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        super().__init__(800, 600, assets_dir)