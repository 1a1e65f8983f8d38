"""Machine tables: triggers mapped to ordered candidate transitions.

Responsibilities:
  - Normalize a declared table so every trigger maps to a tuple of candidates.
  - Compute the origin union used by the whole-call origin check.
  - Report capability names that do not resolve on a subject.

Invariants:
  - Candidate order is the declared order; it is the fallback order.
  - A normalized table is never mutated after bind.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Mapping, Sequence

from .models import Transition, to_transition

MachineTable = Mapping[Hashable, tuple[Transition, ...]]


def normalize_machine(machine: Mapping[Hashable, Any]) -> MachineTable:
    if not isinstance(machine, Mapping):
        raise ValueError("Machine table must be a mapping of trigger -> transition(s)")
    table: dict[Hashable, tuple[Transition, ...]] = {}
    for trigger, declared in machine.items():
        if isinstance(declared, (Transition, Mapping)):
            candidates: Sequence[Any] = [declared]
        elif isinstance(declared, (list, tuple)):
            candidates = declared
        else:
            raise ValueError(f"Trigger {trigger!r} has unsupported declaration {declared!r}")
        table[trigger] = tuple(to_transition(candidate) for candidate in candidates)
    return MappingProxyType(table)


def candidates_for(machine: MachineTable, trigger: Hashable) -> tuple[Transition, ...]:
    try:
        return machine.get(trigger, ())
    except TypeError:
        # Unhashable trigger names can never be keys.
        return ()


def origin_union(candidates: Sequence[Transition]) -> list[Any]:
    origins: list[Any] = []
    for transition in candidates:
        for origin in transition.origins:
            if origin not in origins:
                origins.append(origin)
    return origins


def validate_machine(subject: object, machine: Mapping[Hashable, Any]) -> list[str]:
    problems: list[str] = []
    for trigger, candidates in normalize_machine(machine).items():
        for index, transition in enumerate(candidates):
            for kind, names in (("Condition", transition.conditions), ("Effect", transition.effects)):
                for name in names:
                    if not callable(getattr(subject, name, None)):
                        problems.append(
                            f"{kind} {name} of trigger {trigger!r} (candidate {index}) "
                            "is not defined on the subject."
                        )
    return problems
