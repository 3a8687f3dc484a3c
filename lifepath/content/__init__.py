"""
Bundled Content - Static tables for arc 1.

The engine reads these but never mutates them.
"""

from .characters import CHARACTERS, DEFAULT_CHARACTER_ID, get_character
from .events import EVENTS, MAJOR_EVENTS
from .scenes import SCENES, get_scene_by_id

__all__ = [
    "CHARACTERS",
    "DEFAULT_CHARACTER_ID",
    "get_character",
    "EVENTS",
    "MAJOR_EVENTS",
    "SCENES",
    "get_scene_by_id",
]
