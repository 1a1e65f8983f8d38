"""Tests that a trigger call writes the state field at most once."""

from __future__ import annotations

import pytest

from stateweave.core.domain.enums import ErrorKind
from stateweave.core.domain.models import Transition
from stateweave.core.engine.evaluator import StateMachineEvaluator
from stateweave.core.engine.options import MachineOptions


class _CountingTurnstile:
    def __init__(self, coins: int = 0, passes: int = 0) -> None:
        self._state = "locked"
        self.writes: list[str] = []
        self.coins = coins
        self.passes = passes

    @property
    def state(self) -> str:
        return self._state

    @state.setter
    def state(self, value: str) -> None:
        self.writes.append(value)
        self._state = value

    def has_coin(self) -> bool:
        return self.coins > 0

    def has_pass(self) -> bool:
        return self.passes > 0

    def take_coin(self) -> None:
        self.coins -= 1

    def punch_pass(self) -> None:
        self.passes -= 1

    def jam(self) -> None:
        raise RuntimeError("jammed")


TURNSTILE_MACHINE = {
    "push": [
        Transition(origins=("locked",), destination="open", conditions=("has_coin",), effects=("take_coin",)),
        Transition(origins=("locked",), destination="open", conditions=("has_pass",), effects=("punch_pass",)),
    ],
    "kick": Transition(origins=("locked",), destination="broken", effects=("jam",)),
    "close": Transition(origins=("open",), destination="locked"),
}

_QUIET = MachineOptions(throw_exceptions=False)


def test_fallback_success_writes_state_once() -> None:
    turnstile = _CountingTurnstile(coins=0, passes=1)

    result = StateMachineEvaluator(turnstile, TURNSTILE_MACHINE, _QUIET).trigger("push")

    assert result.success is True
    assert len(result.attempts) == 2
    assert turnstile.writes == ["open"]
    assert turnstile.passes == 0


def test_first_candidate_success_writes_state_once() -> None:
    turnstile = _CountingTurnstile(coins=1)

    StateMachineEvaluator(turnstile, TURNSTILE_MACHINE, _QUIET).trigger("push")

    assert turnstile.writes == ["open"]


@pytest.mark.parametrize(
    "trigger, expected_kind",
    [
        ("close", ErrorKind.ORIGIN_DISALLOWED),
        ("push", ErrorKind.CONDITION_VALUE),
        ("kick", ErrorKind.EFFECT_ERROR),
        ("spin", ErrorKind.TRIGGER_UNDEFINED),
    ],
)
def test_failed_calls_never_write_state(trigger: str, expected_kind: ErrorKind) -> None:
    turnstile = _CountingTurnstile()

    result = StateMachineEvaluator(turnstile, TURNSTILE_MACHINE, _QUIET).trigger(trigger)

    assert result.kind is expected_kind
    assert turnstile.writes == []
    assert turnstile.state == "locked"
