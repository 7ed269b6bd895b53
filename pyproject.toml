[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schachbrett"
version = "0.1.0"
description = "A small chess game: move generation, check detection, a console game loop against random moves, and a headless board model."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "schach", "game", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schachbrett = "schachbrett.game:main"

[tool.hatch.build.targets.wheel]
packages = ["schachbrett"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"
