import dataclasses

import pytest

from passcheck.models import Verdict
from passcheck.state import (
    CheckCompleted,
    CheckFailed,
    CheckStarted,
    PasswordChanged,
    ValidationFailed,
    initial_state,
    reduce,
)


def test_initial_state():
    state = initial_state()
    assert state.password == ""
    assert len(state.hints) == 5
    assert state.verdict == Verdict.UNKNOWN
    assert not state.checking


def test_state_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        initial_state().verdict = Verdict.CLEAN


def test_password_change_recomputes_hints_and_resets_verdict():
    state = dataclasses.replace(initial_state(), verdict=Verdict.BREACHED)
    new = reduce(state, PasswordChanged("password"))

    assert new.password == "password"
    assert new.hints == ("Add an uppercase letter", "Include a number", "Add a symbol", "Use 10+ characters")
    assert new.verdict == Verdict.UNKNOWN
    assert new.generation == state.generation + 1
    assert state.verdict == Verdict.BREACHED


def test_repr_hides_password():
    state = reduce(initial_state(), PasswordChanged("hunter2secret"))
    assert "hunter2secret" not in repr(state)
    assert "hunter2secret" not in repr(PasswordChanged("hunter2secret"))


def test_completed_check_sets_verdict():
    state = reduce(reduce(initial_state(), PasswordChanged("P@ssw0rd123")), CheckStarted())
    assert state.checking

    done = reduce(state, CheckCompleted(state.generation, Verdict.CLEAN))
    assert done.verdict == Verdict.CLEAN
    assert not done.checking


def test_stale_completion_after_password_change_is_dropped():
    started = reduce(reduce(initial_state(), PasswordChanged("P@ssw0rd123")), CheckStarted())
    changed = reduce(started, PasswordChanged("P@ssw0rd1234"))

    assert reduce(changed, CheckCompleted(started.generation, Verdict.BREACHED)) is changed


def test_older_check_cannot_overwrite_newer_one():
    first = reduce(reduce(initial_state(), PasswordChanged("P@ssw0rd123")), CheckStarted())
    second = reduce(first, CheckStarted())
    done = reduce(second, CheckCompleted(second.generation, Verdict.CLEAN))

    assert reduce(done, CheckCompleted(first.generation, Verdict.BREACHED)).verdict == Verdict.CLEAN


def test_failed_check_leaves_verdict_unknown():
    state = reduce(reduce(initial_state(), PasswordChanged("P@ssw0rd123")), CheckStarted())
    failed = reduce(state, CheckFailed(state.generation))
    assert failed.verdict == Verdict.UNKNOWN
    assert not failed.checking


def test_validation_failure_keeps_verdict():
    state = dataclasses.replace(initial_state(), verdict=Verdict.CLEAN)
    assert reduce(state, ValidationFailed()).verdict == Verdict.CLEAN


def test_unknown_event():
    with pytest.raises(TypeError):
        reduce(initial_state(), object())


def test_validation_failure_clears_checking():
    state = reduce(reduce(initial_state(), PasswordChanged("P@ssw0rd123")), CheckStarted())
    assert not reduce(state, ValidationFailed()).checking
