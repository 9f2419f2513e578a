[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "0.1.0"
description = "A small arcade: snake and centipede with swappable terminal and window displays"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "games", "snake", "centipede", "curses", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcade = "arcadebox.core:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.pytest.ini_options]
addopts = "-ra"
