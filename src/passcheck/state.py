"""
Immutable checker state and the reducer that advances it.

Every password change and every started check bumps ``generation``.
A completion carries the generation its check started under and is
dropped if the state has moved on since.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field, replace

from passcheck.hints import evaluate_hints
from passcheck.models import Verdict


@dataclass(frozen=True)
class CheckerState:
    """Snapshot of what the UI shows."""

    password: str = field(default="", repr=False)
    hints: tuple[str, ...] = field(default_factory=lambda: tuple(evaluate_hints("")))
    verdict: Verdict = Verdict.UNKNOWN
    generation: int = 0
    checking: bool = False


@dataclass(frozen=True)
class PasswordChanged:
    password: str = field(repr=False)


@dataclass(frozen=True)
class CheckStarted:
    pass


@dataclass(frozen=True)
class CheckCompleted:
    generation: int
    verdict: Verdict


@dataclass(frozen=True)
class CheckFailed:
    generation: int


@dataclass(frozen=True)
class ValidationFailed:
    pass


Event = PasswordChanged | CheckStarted | CheckCompleted | CheckFailed | ValidationFailed


def initial_state() -> CheckerState:
    """State for an empty password field."""
    return CheckerState()


def reduce(state: CheckerState, event: Event) -> CheckerState:
    """Advance state by one event without side effects.

    Args:
        state: Current state
        event: What happened

    Returns:
        New state (``state`` itself when the event changes nothing)
    """
    if isinstance(event, PasswordChanged):
        return replace(
            state,
            password=event.password,
            hints=tuple(evaluate_hints(event.password)),
            verdict=Verdict.UNKNOWN,
            generation=state.generation + 1,
            checking=False,
        )

    if isinstance(event, CheckStarted):
        return replace(state, generation=state.generation + 1, checking=True)

    if isinstance(event, (CheckCompleted, CheckFailed)):
        if event.generation != state.generation:
            return state
        verdict = event.verdict if isinstance(event, CheckCompleted) else Verdict.UNKNOWN
        return replace(state, verdict=verdict, checking=False)

    if isinstance(event, ValidationFailed):
        # Verdict is left as it was
        return replace(state, checking=False)

    raise TypeError(f"Unknown event: {type(event).__name__}")
