"""
Builders for small hand-made content used across the tests.
"""

from ..engine_core.content import Choice, Effort, Scene, ScenePhase, WorldEvent
from ..engine_core.stats import Effects


def constant_rng(value: float):
    """An rng that always returns `value`."""
    return lambda: value


def sequence_rng(values, default: float = 0.5):
    """An rng that replays `values`, then keeps returning `default`."""
    remaining = list(values)

    def rng() -> float:
        if remaining:
            return remaining.pop(0)
        return default

    return rng


def make_choice(
    choice_id: str = "work",
    base_chance: float = 0.5,
    effort: Effort = Effort.NEUTRAL,
    success: Effects | None = None,
    fail: Effects | None = None,
    **kwargs,
) -> Choice:
    return Choice(
        id=choice_id,
        label=choice_id.replace("-", " ").title(),
        base_chance=base_chance,
        success_text=kwargs.pop("success_text", "It works out."),
        fail_text=kwargs.pop("fail_text", "It goes badly."),
        success=success or Effects(),
        fail=fail or Effects(),
        effort=effort,
        **kwargs,
    )


def make_scene(scene_id: str, *choices: Choice, **kwargs) -> Scene:
    return Scene(
        id=scene_id,
        title=kwargs.pop("title", scene_id.replace("-", " ").title()),
        text=kwargs.pop("text", "A quiet street."),
        choices=choices or (make_choice(),),
        **kwargs,
    )


def make_start_scene(scene_id: str = "opening", **kwargs) -> Scene:
    return make_scene(scene_id, phase=ScenePhase.START, **kwargs)


def make_event(event_id: str, **effects: float) -> WorldEvent:
    return WorldEvent(
        id=event_id,
        title=event_id.replace("-", " ").title(),
        text="Something happens in town.",
        effects=Effects(**effects),
    )
