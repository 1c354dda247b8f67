"""Single-step FSM evaluation."""
from __future__ import annotations

from typing import Any, Callable

from skyloop_fsm.components import FSM
from skyloop_fsm.guards import FSMGuards


def evaluate(
    fsm: FSM,
    guards: FSMGuards,
    subject: Any,
    on_transition: Callable[[str, str], None] | None = None,
) -> tuple[str, str] | None:
    """Fire at most one transition out of the current state.

    Returns ``(old, new)`` when a guard passed, else None. ``on_transition``
    runs after the state has been updated, once per fired edge.
    """
    for guard_name, target in fsm.transitions.get(fsm.state, ()):
        if guards.check(guard_name, subject):
            old = fsm.state
            fsm.state = target
            if on_transition is not None:
                on_transition(old, target)
            return old, target
    return None
