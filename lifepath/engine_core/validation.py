"""
Content Validation - Sanity checks for scene, event and character tables.

Validates that:
1. Ids are present and unique
2. Every scene offers at least one choice, with unique choice ids
3. Chances, stat gates and turn windows are in range
4. Effects never write engine-owned bookkeeping (hunger debt)
5. Each arc has a start scene and a non-empty deck

The engine itself assumes well-formed content; this is where authoring
bugs are caught.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .content import Character, Choice, Scene, ScenePhase, WorldEvent
from .stats import STAT_FIELDS, Effects

# Stats that only the turn engine may change
ENGINE_OWNED_FIELDS: tuple[str, ...] = ("hunger_debt",)


class ContentValidationError(Exception):
    """Raised when content validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Content validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]

    def raise_for_errors(self) -> None:
        if not self.valid:
            raise ContentValidationError(self.errors)


def validate_content(
    scenes: Sequence[Scene],
    events: Sequence[WorldEvent] = (),
    major_events: Sequence[WorldEvent] = (),
    characters: Sequence[Character] = (),
) -> ValidationResult:
    """
    Validate a complete content set.

    Returns ValidationResult with errors and warnings. Call
    `raise_for_errors()` on the result to turn errors into an exception.
    """
    errors: list[str] = []
    warnings: list[str] = []

    errors.extend(_duplicate_ids("Scene", [scene.id for scene in scenes]))
    errors.extend(_duplicate_ids("Event", [event.id for event in [*events, *major_events]]))
    errors.extend(_duplicate_ids("Character", [character.id for character in characters]))

    character_ids = {character.id for character in characters}

    for scene in scenes:
        errors.extend(_validate_scene(scene))
        if character_ids:
            for character_id in scene.for_character:
                if character_id not in character_ids:
                    errors.append(
                        f"Scene '{scene.id}' is restricted to unknown character '{character_id}'"
                    )

    for event in [*events, *major_events]:
        if not event.id:
            errors.append("Event has empty ID")
        errors.extend(_validate_effects(f"Event '{event.id}'", event.effects))
        if event.effects.is_empty:
            warnings.append(f"Event '{event.id}' has no effects")

    for character in characters:
        if not character.id:
            errors.append("Character has empty ID")
        if character.stats.health <= 0:
            errors.append(f"Character '{character.id}' starts with no health")

    # Every arc needs somewhere to start and somewhere to go
    for arc in sorted({scene.arc for scene in scenes}):
        arc_scenes = [scene for scene in scenes if scene.arc == arc and not scene.backlog]
        if not any(scene.phase == ScenePhase.START for scene in arc_scenes):
            warnings.append(f"Arc {arc} has no start scene")
        if not any(scene.phase != ScenePhase.START for scene in arc_scenes):
            errors.append(f"Arc {arc} has no deck scenes")

    if not events:
        warnings.append("No recurring events defined")
    if not major_events:
        warnings.append("No major events defined")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _duplicate_ids(kind: str, ids: list[str]) -> list[str]:
    seen: set[str] = set()
    errors = []
    for item_id in ids:
        if item_id in seen:
            errors.append(f"Duplicate {kind.lower()} id '{item_id}'")
        seen.add(item_id)
    return errors


def _validate_scene(scene: Scene) -> list[str]:
    """Validate a single scene and its choices."""
    errors = []
    if not scene.id:
        errors.append("Scene has empty ID")
    if not scene.choices:
        errors.append(f"Scene '{scene.id}' has no choices")

    choice_ids = set()
    for choice in scene.choices:
        if choice.id in choice_ids:
            errors.append(f"Duplicate choice id '{choice.id}' in scene '{scene.id}'")
        choice_ids.add(choice.id)
        errors.extend(_validate_choice(scene, choice))

    if (
        scene.min_turn is not None
        and scene.max_turn is not None
        and scene.min_turn > scene.max_turn
    ):
        errors.append(f"Scene '{scene.id}' has min_turn > max_turn")

    for gate_name, gate in (("min_stats", scene.min_stats), ("max_stats", scene.max_stats)):
        for name in gate:
            if name not in STAT_FIELDS:
                errors.append(f"Scene '{scene.id}' {gate_name} references unknown stat '{name}'")

    # A scene every choice of which is health gated can strand a weak character
    if scene.choices and all(choice.min_health is not None for choice in scene.choices):
        errors.append(f"Scene '{scene.id}' has no choice without a health gate")

    return errors


def _validate_choice(scene: Scene, choice: Choice) -> list[str]:
    errors = []
    where = f"Choice '{scene.id}/{choice.id}'"
    if not choice.id:
        errors.append(f"Scene '{scene.id}' has a choice with empty ID")
    if not 0 <= choice.base_chance <= 1:
        errors.append(f"{where} base_chance {choice.base_chance} outside [0, 1]")
    errors.extend(_validate_effects(f"{where} success", choice.success))
    errors.extend(_validate_effects(f"{where} fail", choice.fail))
    return errors


def _validate_effects(where: str, effects: Effects) -> list[str]:
    errors = []
    for name in ENGINE_OWNED_FIELDS:
        if getattr(effects, name) != 0:
            errors.append(f"{where} writes engine-owned stat '{name}'")
    return errors
