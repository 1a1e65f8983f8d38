"""Attach a state machine to an existing object without subclassing it.

Responsibilities:
  - Bind one StateMachineEvaluator to a subject and a machine table.
  - Expose trigger/state on a view that reads and writes through to the
    live subject for every other attribute.
Must not:
  - Copy the subject; the view is not a snapshot.
"""

from __future__ import annotations

from typing import Any, Hashable, Mapping

from stateweave.core.engine.evaluator import StateMachineEvaluator
from stateweave.core.engine.options import MachineOptions, TriggerOptions
from stateweave.core.engine.result import TransitionResult

_VIEW_SLOTS = ("_subject", "_evaluator")


class StateMachineView:
    def __init__(self, subject: object, evaluator: StateMachineEvaluator) -> None:
        object.__setattr__(self, "_subject", subject)
        object.__setattr__(self, "_evaluator", evaluator)

    @property
    def state(self) -> Any:
        return self._evaluator.state

    @state.setter
    def state(self, value: Any) -> None:
        self._evaluator.state = value

    @property
    def state_machine(self) -> StateMachineEvaluator:
        return self._evaluator

    def trigger(
        self,
        trigger: Hashable,
        props: Any = None,
        options: TriggerOptions | Mapping[str, Any] | None = None,
    ) -> TransitionResult:
        return self._evaluator.trigger(trigger, props, options)

    def trigger_with_options(
        self,
        trigger: Hashable,
        props: Any = None,
        options: TriggerOptions | Mapping[str, Any] | None = None,
    ) -> TransitionResult:
        return self._evaluator.trigger_with_options(trigger, props, options)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup on the view fails.
        if name in _VIEW_SLOTS:
            raise AttributeError(name)
        return getattr(self._subject, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "state":
            self._evaluator.state = value
            return
        setattr(self._subject, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._subject, name)

    def __dir__(self) -> list[str]:
        own = {"state", "state_machine", "trigger", "trigger_with_options"}
        return sorted(own | set(dir(self._subject)))

    def __repr__(self) -> str:
        return f"StateMachineView({self._subject!r}, state={self.state!r})"


def add_state_machine(
    subject: object,
    machine: Mapping[Hashable, Any],
    options: MachineOptions | Mapping[str, Any] | None = None,
) -> StateMachineView:
    evaluator = StateMachineEvaluator(subject, machine, options)
    return StateMachineView(subject, evaluator)


def merge_with_state_machine(subject: object, machine: Mapping[Hashable, Any]) -> StateMachineView:
    return add_state_machine(subject, machine)


__all__ = ["StateMachineView", "add_state_machine", "merge_with_state_machine"]
