"""Context snapshots for audit output.

Responsibilities:
  - Capture a deep, independent copy of a subject's observable fields.

Invariants:
  - Snapshots never alias subject data and are never merged back.
  - Capturing never raises: a field that cannot be deep-copied (locks,
    sockets, generators) is recorded as an Unsnapshottable marker.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

ContextSnapshot = dict[str, Any]


@dataclass(frozen=True)
class Unsnapshottable:
    type_name: str
    reason: str

    def __str__(self) -> str:
        return f"<unsnapshottable {self.type_name}: {self.reason}>"


def _mangle(klass: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        owner = klass.__name__.lstrip("_")
        if owner:
            return f"_{owner}{name}"
    return name


def _slot_names(subject: object) -> list[str]:
    names: list[str] = []
    for klass in type(subject).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            stored = _mangle(klass, name)
            if stored not in names:
                names.append(stored)
    return names


def observable_fields(subject: object) -> dict[str, Any]:
    observed: dict[str, Any] = {}
    for name in _slot_names(subject):
        if hasattr(subject, name):
            observed[name] = getattr(subject, name)
    observed.update(getattr(subject, "__dict__", {}))
    return {name: value for name, value in observed.items() if not callable(value)}


def capture_snapshot(subject: object) -> ContextSnapshot:
    snapshot: ContextSnapshot = {}
    for name, value in observable_fields(subject).items():
        try:
            snapshot[name] = copy.deepcopy(value)
        except (TypeError, copy.Error) as exc:
            snapshot[name] = Unsnapshottable(type_name=type(value).__name__, reason=str(exc))
    return snapshot
