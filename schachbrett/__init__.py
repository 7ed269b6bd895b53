"""Chess rules, move generation, a console game loop and a headless board model."""

__version__ = "0.1.0"