"""A two-stage terminal maze game: collect hearts, then stars, and reach the exit."""

__version__ = "0.1.0"
__all__ = ["console", "maps", "placement", "player", "game"]