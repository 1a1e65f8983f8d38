"""Tests for transition declarations and machine-table normalization."""

from __future__ import annotations

import pytest

from stateweave.core.domain.machine_table import (
    candidates_for,
    normalize_machine,
    origin_union,
    validate_machine,
)
from stateweave.core.domain.models import Transition
from stateweave.examples.walker import EXAMPLE_MACHINE, ExampleObject


def test_single_transition_becomes_one_candidate() -> None:
    machine = normalize_machine({"go": Transition(origins="a", destination="b")})
    candidates = candidates_for(machine, "go")
    assert len(candidates) == 1
    assert candidates[0].origins == ("a",)


def test_mapping_declarations_accept_bare_values() -> None:
    machine = normalize_machine(
        {"melt": [{"origins": "solid", "destination": "liquid", "effects": "set_environment"}]}
    )
    transition = candidates_for(machine, "melt")[0]
    assert transition.origins == ("solid",)
    assert transition.effects == ("set_environment",)
    assert transition.conditions == ()


def test_candidate_order_is_preserved() -> None:
    first = Transition(origins=("a",), destination="b")
    second = Transition(origins=("a",), destination="c")
    machine = normalize_machine({"go": [first, second]})
    assert candidates_for(machine, "go") == (first, second)


def test_missing_trigger_has_no_candidates() -> None:
    machine = normalize_machine({"go": Transition(origins=("a",), destination="b")})
    assert candidates_for(machine, "fly") == ()
    assert candidates_for(machine, ["unhashable"]) == ()


def test_normalized_table_is_read_only() -> None:
    machine = normalize_machine({"go": Transition(origins=("a",), destination="b")})
    with pytest.raises(TypeError):
        machine["other"] = ()  # type: ignore[index]


def test_transition_requires_origins() -> None:
    with pytest.raises(ValueError):
        Transition(origins=(), destination="b")


def test_transition_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError):
        normalize_machine({"go": {"origins": "a", "destination": "b", "guards": ["x"]}})


def test_transition_requires_destination() -> None:
    with pytest.raises(ValueError):
        normalize_machine({"go": {"origins": "a"}})


def test_transition_rejects_non_string_capability() -> None:
    with pytest.raises(ValueError):
        Transition(origins=("a",), destination="b", effects=(print,))  # type: ignore[arg-type]


def test_origin_union_dedupes_in_order() -> None:
    candidates = (
        Transition(origins=("a", "b"), destination="x"),
        Transition(origins=("b", "c"), destination="y"),
    )
    assert origin_union(candidates) == ["a", "b", "c"]


def test_validate_machine_reports_missing_capabilities() -> None:
    machine = dict(EXAMPLE_MACHINE)
    machine["teleport"] = Transition(
        origins=("initial",), destination="away", conditions=("has_energy", "has_portal"), effects=("blink",)
    )
    problems = validate_machine(ExampleObject(), machine)
    assert len(problems) == 2
    assert "has_portal" in problems[0]
    assert "blink" in problems[1]


def test_validate_machine_clean_table() -> None:
    assert validate_machine(ExampleObject(), EXAMPLE_MACHINE) == []
