"""
Character Presets - Playable starting points.

Each preset supplies a complete Stats record. The preset luck is replaced by
a fresh roll at the start of every run.
"""

from ..engine_core.content import Character
from ..engine_core.stats import Stats


URCHIN = Character(
    id="urchin",
    name="Street Orphan",
    description="Hardy, but without money or connections.",
    lore=(
        "You grew up on cold streets and learned to survive with no one to "
        "lean on. Your skills are rough but reliable."
    ),
    stats=Stats(money=2, reputation=1, skill=2, health=12, age=16),
)

APPRENTICE = Character(
    id="apprentice",
    name="Master's Apprentice",
    description="Some skill and a modest reputation.",
    lore=(
        "You have watched a craft up close, but true mastery is still ahead. "
        "People treat you with cautious respect."
    ),
    stats=Stats(money=4, reputation=3, skill=3, health=10, age=17),
)

REFUGEE = Character(
    id="refugee",
    name="Refugee",
    description="Little money, but a strong constitution.",
    lore=(
        "You fled the war and lost your home, but kept your endurance. You "
        "have no connections, only your strength."
    ),
    stats=Stats(money=3, reputation=1, skill=1, health=14, age=18),
)

FARMER = Character(
    id="farmer",
    name="Peasant",
    description="Used to hard work, little money, sturdy health.",
    lore=(
        "You grew up on the land and know hard labour. You can endure "
        "hardship, but you have no wealth."
    ),
    stats=Stats(money=3, reputation=2, skill=2, health=12, age=20),
)

CHARACTERS: tuple[Character, ...] = (URCHIN, APPRENTICE, REFUGEE, FARMER)

DEFAULT_CHARACTER_ID = URCHIN.id


def get_character(character_id: str) -> Character | None:
    """Get a character preset by ID."""
    for character in CHARACTERS:
        if character.id == character_id:
            return character
    return None
