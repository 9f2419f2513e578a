"""A small arcade: snake and centipede games with curses and pygame displays."""

__version__ = "0.1.0"