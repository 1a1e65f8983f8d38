"""Domain enums for transition failures.

Responsibilities:
  - Define the ErrorKind identifiers reported on failed trigger calls.
  - Provide the failure class and fallback eligibility for each kind.

Invariants:
  - Enum values must remain stable; they appear in audit output.
  - ERROR_METADATA must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class ErrorClass(Enum):
    UNDEFINED_REFERENCE = "UNDEFINED_REFERENCE"
    DECLARED_MISMATCH = "DECLARED_MISMATCH"
    RUNTIME_FAILURE = "RUNTIME_FAILURE"


# Stable identifiers for failed trigger calls; value is the reported name.
class ErrorKind(Enum):
    TRIGGER_UNDEFINED = "TriggerUndefined"
    ORIGIN_DISALLOWED = "OriginDisallowed"
    CONDITION_UNDEFINED = "ConditionUndefined"
    CONDITION_VALUE = "ConditionValue"
    EFFECT_UNDEFINED = "EffectUndefined"
    EFFECT_ERROR = "EffectError"

    @property
    def error_class(self) -> ErrorClass:
        return ERROR_METADATA[self]["class"]  # type: ignore[return-value]

    @property
    def is_undefined_reference(self) -> bool:
        return self.error_class is ErrorClass.UNDEFINED_REFERENCE

    @property
    def allows_fallback(self) -> bool:
        return bool(ERROR_METADATA[self]["fallback"])

    @property
    def description(self) -> str:
        return str(ERROR_METADATA[self]["message"])

    @property
    def raisable(self) -> bool:
        return bool(ERROR_METADATA[self]["raisable"])


# Audit metadata keyed by error kind.
ERROR_METADATA: dict[ErrorKind, dict[str, object]] = {
    ErrorKind.TRIGGER_UNDEFINED: {
        "class": ErrorClass.UNDEFINED_REFERENCE,
        "fallback": False,
        "raisable": True,
        "message": "Trigger name is not present in the machine table.",
    },
    ErrorKind.ORIGIN_DISALLOWED: {
        "class": ErrorClass.DECLARED_MISMATCH,
        "fallback": False,
        "raisable": True,
        "message": "Current state is not an origin of any candidate transition.",
    },
    ErrorKind.CONDITION_UNDEFINED: {
        "class": ErrorClass.UNDEFINED_REFERENCE,
        "fallback": False,
        "raisable": True,
        "message": "Named condition does not resolve to a callable on the subject.",
    },
    ErrorKind.CONDITION_VALUE: {
        "class": ErrorClass.DECLARED_MISMATCH,
        "fallback": True,
        "raisable": False,
        "message": "Condition evaluated false.",
    },
    ErrorKind.EFFECT_UNDEFINED: {
        "class": ErrorClass.UNDEFINED_REFERENCE,
        "fallback": False,
        "raisable": True,
        "message": "Named effect does not resolve to a callable on the subject.",
    },
    ErrorKind.EFFECT_ERROR: {
        "class": ErrorClass.RUNTIME_FAILURE,
        "fallback": False,
        "raisable": True,
        "message": "Effect raised while running.",
    },
}


def kind_from_name(label: str) -> ErrorKind | None:
    if not label:
        return None
    try:
        return ErrorKind(label)
    except ValueError:
        return None


_missing = [kind for kind in ErrorKind if kind not in ERROR_METADATA]
if _missing:
    raise RuntimeError(f"Missing ERROR_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in ERROR_METADATA.keys() if k not in set(ErrorKind)]
if _extra:
    raise RuntimeError(f"Extra ERROR_METADATA keys: {[e.value for e in _extra]}")
