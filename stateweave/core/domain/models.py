"""Domain models for declared transitions.

Responsibilities:
  - Define the immutable Transition declaration read by the evaluator.
  - Normalize loose declarations (single values, mappings) into Transition.

Invariants:
  - A Transition always has at least one origin.
  - Models carry no evaluation behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping, Protocol

_DECLARATION_KEYS = {"origins", "destination", "conditions", "effects"}


class Stateful(Protocol):
    state: Any


def as_tuple(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True)
class Transition:
    origins: tuple[Hashable, ...]
    destination: Hashable
    conditions: tuple[str, ...] = field(default_factory=tuple)
    effects: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__.
        object.__setattr__(self, "origins", as_tuple(self.origins))
        object.__setattr__(self, "conditions", as_tuple(self.conditions))
        object.__setattr__(self, "effects", as_tuple(self.effects))
        if not self.origins:
            raise ValueError("Transition must declare at least one origin")
        for name in self.conditions + self.effects:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Capability names must be non-empty strings, got {name!r}")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Transition":
        unknown = set(payload.keys()) - _DECLARATION_KEYS
        if unknown:
            raise ValueError(f"Unknown transition fields: {sorted(unknown)}")
        if "origins" not in payload:
            raise ValueError("Missing required field 'origins' in transition")
        if "destination" not in payload:
            raise ValueError("Missing required field 'destination' in transition")
        return cls(
            origins=payload["origins"],
            destination=payload["destination"],
            conditions=payload.get("conditions", ()),
            effects=payload.get("effects", ()),
        )


def to_transition(declaration: Transition | Mapping[str, Any]) -> Transition:
    if isinstance(declaration, Transition):
        return declaration
    if isinstance(declaration, Mapping):
        return Transition.from_mapping(declaration)
    raise ValueError(f"Unsupported transition declaration: {declaration!r}")
