"""Recognition of display and game library file names."""

from __future__ import annotations

DISPLAY_LIBS = frozenset(
    {
        "arcade_ndk++.so",
        "arcade_aalib.so",
        "arcade_libcaca.so",
        "arcade_allegro5.so",
        "arcade_xlib.so",
        "arcade_gtk+.so",
        "arcade_sfml.so",
        "arcade_irrlicht.so",
        "arcade_opengl.so",
        "arcade_vulkan.so",
        "arcade_qt5.so",
        "arcade_sdl2.so",
        "arcade_ncurses.so",
    }
)

GAME_LIBS = frozenset(
    {
        "arcade_snake.so",
        "arcade_pacman.so",
        "arcade_sokoban.so",
        "arcade_nibbler.so",
        "arcade_qix.so",
        "arcade_centipede.so",
        "arcade_solarfox.so",
    }
)


def lib_basename(filename: str) -> str:
    """Return the part of a path after its last '/'."""
    return filename.rpartition("/")[2]


def is_display_lib(filename: str) -> bool:
    """Tell whether the path names a known display library."""
    return lib_basename(filename) in DISPLAY_LIBS


def is_game_lib(filename: str) -> bool:
    """Tell whether the path names a known game library."""
    return lib_basename(filename) in GAME_LIBS