"""
Checker session: drives the reducer and the UI effects.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Protocol

from passcheck.checker import BreachChecker
from passcheck.exceptions import NetworkError, ValidationError
from passcheck.models import CheckResult, Verdict
from passcheck.state import (
    CheckCompleted,
    CheckerState,
    CheckFailed,
    CheckStarted,
    PasswordChanged,
    ValidationFailed,
    initial_state,
    reduce,
)

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Checking password..."
BREACHED_MESSAGE = "⚠️ This password has been found in data breaches"
CLEAN_MESSAGE = "✅ Password not found in known breaches"


class UIEffects(Protocol):
    """What a front-end must provide to display a session."""

    def display_hints(self, hints: list[str]) -> None: ...

    def display_verdict(self, verdict: Verdict) -> None: ...

    def notify_error(self, message: str) -> None: ...

    def notify_success(self, message: str) -> None: ...

    def notify_loading(self, message: str) -> None: ...

    def notify_dismiss(self) -> None: ...


class CheckerSession:
    """One password field with its hints and breach verdict."""

    def __init__(self, checker: BreachChecker, effects: UIEffects):
        self.checker = checker
        self.effects = effects
        self.state: CheckerState = initial_state()

    def set_password(self, pwd: str) -> None:
        """Handle a change to the password field."""
        self.state = reduce(self.state, PasswordChanged(pwd))
        self.effects.display_hints(list(self.state.hints))
        self.effects.display_verdict(self.state.verdict)

    def _settle(self, generation: int) -> bool:
        """Dismiss the loading notice if this check is still the latest one."""
        if generation != self.state.generation:
            return False
        self.effects.notify_dismiss()
        return True

    async def check(self) -> CheckResult | None:
        """Run a breach check for the current password.

        Returns:
            The result if it was applied, None on error or when a newer
            password or check superseded this one
        """
        pwd = self.state.password

        error = self.checker.validator(pwd)
        if error is not None:
            self.state = reduce(self.state, ValidationFailed())
            self.effects.notify_error(error.message)
            return None

        self.state = reduce(self.state, CheckStarted())
        generation = self.state.generation
        self.effects.notify_loading(LOADING_MESSAGE)

        try:
            result = await self.checker.check(pwd)
        except ValidationError as e:
            if self._settle(generation):
                self.state = reduce(self.state, ValidationFailed())
                self.effects.notify_error(e.message)
            return None
        except NetworkError:
            if not self._settle(generation):
                logger.debug("Dropping failure of superseded check")
                return None
            self.state = reduce(self.state, CheckFailed(generation))
            self.effects.display_verdict(self.state.verdict)
            self.effects.notify_error(NetworkError.DEFAULT_MESSAGE)
            return None
        except Exception:
            if self._settle(generation):
                self.state = reduce(self.state, CheckFailed(generation))
            raise

        if not self._settle(generation):
            logger.debug("Dropping result of superseded check")
            return None

        self.state = reduce(self.state, CheckCompleted(generation, result.verdict))
        self.effects.display_verdict(self.state.verdict)

        if result.is_breached:
            self.effects.notify_error(BREACHED_MESSAGE)
        else:
            self.effects.notify_success(CLEAN_MESSAGE)

        return result
