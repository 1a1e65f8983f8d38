"""Declarative finite-state machines for existing Python objects."""

from stateweave.app_api.merge import StateMachineView, add_state_machine, merge_with_state_machine
from stateweave.core.domain.enums import ErrorClass, ErrorKind
from stateweave.core.domain.machine_table import validate_machine
from stateweave.core.domain.models import Stateful, Transition
from stateweave.core.engine.errors import TransitionError
from stateweave.core.engine.evaluator import StateMachineEvaluator, set_evaluator_debug
from stateweave.core.engine.options import MachineOptions, TriggerOptions, options_from_mapping
from stateweave.core.engine.result import (
    ConditionAttempt,
    EffectAttempt,
    TransitionAttempt,
    TransitionFailure,
    TransitionResult,
    result_to_dict,
)
from stateweave.core.engine.snapshot import Unsnapshottable, capture_snapshot

__all__ = [
    "ConditionAttempt",
    "EffectAttempt",
    "ErrorClass",
    "ErrorKind",
    "MachineOptions",
    "StateMachineEvaluator",
    "StateMachineView",
    "Stateful",
    "Transition",
    "TransitionAttempt",
    "TransitionError",
    "TransitionFailure",
    "TransitionResult",
    "TriggerOptions",
    "Unsnapshottable",
    "add_state_machine",
    "capture_snapshot",
    "merge_with_state_machine",
    "options_from_mapping",
    "result_to_dict",
    "set_evaluator_debug",
    "validate_machine",
]
