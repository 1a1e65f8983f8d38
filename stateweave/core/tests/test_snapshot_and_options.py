"""Tests for context snapshots and option loading."""

from __future__ import annotations

import threading

import pytest

from stateweave.core.engine.options import (
    MachineOptions,
    TriggerOptions,
    options_from_mapping,
    resolve_machine_options,
    resolve_trigger_options,
)
from stateweave.core.engine.snapshot import Unsnapshottable, capture_snapshot


class _Bag:
    def __init__(self) -> None:
        self.state = "idle"
        self.items = [{"name": "a"}]
        self.callback = lambda: None


class _Slotted:
    __slots__ = ("state", "level")

    def __init__(self) -> None:
        self.state = "low"
        self.level = 1


class _PrivateSlotted:
    __slots__ = ("state", "__secret")

    def __init__(self) -> None:
        self.state = "on"
        self.__secret = 7


class _Locked:
    def __init__(self) -> None:
        self.state = "idle"
        self.lock = threading.Lock()


def test_snapshot_is_deep_and_independent() -> None:
    bag = _Bag()
    snapshot = capture_snapshot(bag)
    bag.items[0]["name"] = "b"
    assert snapshot == {"state": "idle", "items": [{"name": "a"}]}


def test_snapshot_reads_slots() -> None:
    assert capture_snapshot(_Slotted()) == {"state": "low", "level": 1}


def test_snapshot_marks_uncopyable_fields() -> None:
    snapshot = capture_snapshot(_Locked())
    assert snapshot["state"] == "idle"
    marker = snapshot["lock"]
    assert isinstance(marker, Unsnapshottable)
    assert marker.type_name == "lock"
    assert str(marker).startswith("<unsnapshottable lock")


def test_snapshot_reads_private_slots() -> None:
    assert capture_snapshot(_PrivateSlotted()) == {"state": "on", "_PrivateSlotted__secret": 7}


def test_options_from_mapping_defaults() -> None:
    assert options_from_mapping({}) == MachineOptions()


def test_options_from_mapping_values() -> None:
    opts = options_from_mapping({"verbosity": True, "throw_exceptions": False, "strict_origins": True})
    assert opts.verbosity is True
    assert opts.throw_exceptions is False
    assert opts.strict_origins is True
    assert opts.state_field == "state"


def test_options_from_mapping_rejects_unknown_and_wrong_types() -> None:
    with pytest.raises(ValueError):
        options_from_mapping({"exceptions": True})
    with pytest.raises(ValueError):
        options_from_mapping({"verbosity": 1})
    with pytest.raises(ValueError):
        options_from_mapping({"state_field": "not a name"})


def test_resolve_machine_options_passthrough() -> None:
    opts = MachineOptions(verbosity=True)
    assert resolve_machine_options(opts) is opts
    assert resolve_machine_options(None) == MachineOptions()


def test_resolve_trigger_options() -> None:
    calls: list[int] = []
    opts = resolve_trigger_options({"throw_exceptions": False, "on_error": lambda: calls.append(1)})
    assert opts.throw_exceptions is False
    assert opts.on_error is not None
    assert resolve_trigger_options(None) == TriggerOptions()
    with pytest.raises(ValueError):
        resolve_trigger_options({"onError": print})
    with pytest.raises(ValueError):
        resolve_trigger_options({"on_error": 3})
