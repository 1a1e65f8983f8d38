"""Audit records produced by a single trigger call.

Responsibilities:
  - Capture every condition/effect invocation, every candidate attempt, the
    failure (if any) and the pre/post snapshots of the subject.

Inputs/Outputs:
  - Inputs: built incrementally by evaluator.StateMachineEvaluator.trigger.
  - Outputs: returned to the caller or carried by TransitionError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable

from ..domain.enums import ErrorKind
from ..domain.models import Transition
from .snapshot import ContextSnapshot


@dataclass
class CapabilityAttempt:
    name: str
    success: bool
    snapshot: ContextSnapshot


@dataclass
class ConditionAttempt(CapabilityAttempt):
    pass


@dataclass
class EffectAttempt(CapabilityAttempt):
    pass


@dataclass
class TransitionFailure:
    kind: ErrorKind
    is_undefined_reference: bool
    trigger: Hashable
    capability: str | None
    candidate_index: int | None
    capability_index: int | None
    snapshot: ContextSnapshot
    cause: Exception | None = None


@dataclass
class TransitionAttempt:
    trigger: Hashable
    transition: Transition
    candidate_index: int
    snapshot: ContextSnapshot
    conditions: list[ConditionAttempt] = field(default_factory=list)
    effects: list[EffectAttempt] = field(default_factory=list)
    success: bool = False
    failure: TransitionFailure | None = None


@dataclass
class TransitionResult:
    trigger: Hashable
    success: bool
    failure: TransitionFailure | None
    previous_state: Any
    current_state: Any
    pre_snapshot: ContextSnapshot
    post_snapshot: ContextSnapshot
    attempts: list[TransitionAttempt] = field(default_factory=list)

    @property
    def kind(self) -> ErrorKind | None:
        return self.failure.kind if self.failure is not None else None


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(_plain(k)): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def _transition_to_dict(transition: Transition) -> dict[str, Any]:
    return {
        "origins": _plain(transition.origins),
        "destination": _plain(transition.destination),
        "conditions": list(transition.conditions),
        "effects": list(transition.effects),
    }


def _failure_to_dict(failure: TransitionFailure | None) -> dict[str, Any] | None:
    if failure is None:
        return None
    return {
        "kind": failure.kind.value,
        "description": failure.kind.description,
        "is_undefined_reference": failure.is_undefined_reference,
        "trigger": _plain(failure.trigger),
        "capability": failure.capability,
        "candidate_index": failure.candidate_index,
        "capability_index": failure.capability_index,
        "snapshot": _plain(failure.snapshot),
        "cause": repr(failure.cause) if failure.cause is not None else None,
    }


def _capability_to_dict(attempt: CapabilityAttempt) -> dict[str, Any]:
    return {"name": attempt.name, "success": attempt.success, "snapshot": _plain(attempt.snapshot)}


def result_to_dict(result: TransitionResult) -> dict[str, Any]:
    return {
        "trigger": _plain(result.trigger),
        "success": result.success,
        "failure": _failure_to_dict(result.failure),
        "previous_state": _plain(result.previous_state),
        "current_state": _plain(result.current_state),
        "pre_snapshot": _plain(result.pre_snapshot),
        "post_snapshot": _plain(result.post_snapshot),
        "attempts": [
            {
                "trigger": _plain(attempt.trigger),
                "candidate_index": attempt.candidate_index,
                "transition": _transition_to_dict(attempt.transition),
                "conditions": [_capability_to_dict(c) for c in attempt.conditions],
                "effects": [_capability_to_dict(e) for e in attempt.effects],
                "success": attempt.success,
                "failure": _failure_to_dict(attempt.failure),
                "snapshot": _plain(attempt.snapshot),
            }
            for attempt in result.attempts
        ],
    }
