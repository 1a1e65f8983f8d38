"""Trigger evaluation for a single stateful subject.

Responsibilities:
  - Resolve candidate transitions for a trigger and check the origin union.
  - Run conditions then effects per candidate, falling back to the next
    candidate only when a condition evaluates false.
  - Write the destination state once, on full success, and return an
    auditable TransitionResult (or raise TransitionError carrying it).

Inputs/Outputs:
  - Inputs: subject object, normalized machine table, MachineOptions.
  - Outputs: TransitionResult per trigger call; diagnostic lines when
    verbosity is on.

Invariants:
  - The subject's state field is the only thing the engine writes.
  - ConditionValue is never raised; every other failure kind aborts the call.
  - No result record is retained between calls.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Mapping

from ..domain.enums import ErrorKind
from ..domain.machine_table import MachineTable, candidates_for, normalize_machine, origin_union
from .capabilities import check_condition, resolve_capability, run_effect
from .errors import TransitionError
from .options import MachineOptions, TriggerOptions, resolve_machine_options, resolve_trigger_options
from .result import (
    ConditionAttempt,
    EffectAttempt,
    TransitionAttempt,
    TransitionFailure,
    TransitionResult,
)
from .snapshot import capture_snapshot

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


class StateMachineEvaluator:
    def __init__(
        self,
        subject: object,
        machine: Mapping[Hashable, Any],
        options: MachineOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._options = resolve_machine_options(options)
        if not hasattr(subject, self._options.state_field):
            raise ValueError(f"Subject has no state field '{self._options.state_field}'")
        self._subject = subject
        self._machine: MachineTable = normalize_machine(machine)

    @property
    def state(self) -> Any:
        return getattr(self._subject, self._options.state_field)

    @state.setter
    def state(self, value: Any) -> None:
        setattr(self._subject, self._options.state_field, value)

    @property
    def subject(self) -> object:
        return self._subject

    @property
    def machine(self) -> MachineTable:
        return self._machine

    @property
    def options(self) -> MachineOptions:
        return self._options

    @property
    def strict_origins(self) -> bool:
        return self._options.strict_origins

    def _dbg(self, msg: str) -> None:
        if not self._options.verbosity:
            return
        if _DEBUG_FN is not None:
            _DEBUG_FN(msg)
        else:
            print(f"[debug] {msg}")

    def trigger_with_options(
        self,
        trigger: Hashable,
        props: Any = None,
        options: TriggerOptions | Mapping[str, Any] | None = None,
    ) -> TransitionResult:
        return self.trigger(
            trigger,
            props if props is not None else {},
            options if options is not None else TriggerOptions(),
        )

    def trigger(
        self,
        trigger: Hashable,
        props: Any = None,
        options: TriggerOptions | Mapping[str, Any] | None = None,
    ) -> TransitionResult:
        call_options = resolve_trigger_options(options)
        throw_exceptions = (
            call_options.throw_exceptions
            if call_options.throw_exceptions is not None
            else self._options.throw_exceptions
        )

        pre_snapshot = capture_snapshot(self._subject)
        result = TransitionResult(
            trigger=trigger,
            success=False,
            failure=None,
            previous_state=self.state,
            current_state=self.state,
            pre_snapshot=pre_snapshot,
            post_snapshot=capture_snapshot(self._subject),
        )

        def fail(
            kind: ErrorKind,
            message: str,
            capability: str | None = None,
            candidate_index: int | None = None,
            capability_index: int | None = None,
            attempt: TransitionAttempt | None = None,
            cause: Exception | None = None,
        ) -> TransitionResult:
            snapshot = capture_snapshot(self._subject)
            failure = TransitionFailure(
                kind=kind,
                is_undefined_reference=kind.is_undefined_reference,
                trigger=trigger,
                capability=capability,
                candidate_index=candidate_index,
                capability_index=capability_index,
                snapshot=snapshot,
                cause=cause,
            )
            if attempt is not None:
                attempt.failure = failure
            result.failure = failure
            result.post_snapshot = snapshot
            result.current_state = self.state
            self._dbg(message)
            if kind is ErrorKind.EFFECT_ERROR and call_options.on_error is not None:
                call_options.on_error()
            if throw_exceptions and kind.raisable:
                raise TransitionError(kind, message, result, trigger=trigger) from cause
            return result

        candidates = candidates_for(self._machine, trigger)
        if not candidates:
            return fail(
                ErrorKind.TRIGGER_UNDEFINED,
                f'Trigger "{trigger}" is not defined in the machine.',
            )

        if self.state not in origin_union(candidates):
            return fail(
                ErrorKind.ORIGIN_DISALLOWED,
                f"Invalid transition from {self.state} using trigger {trigger}",
            )

        last_index = len(candidates) - 1
        for i, transition in enumerate(candidates):
            attempt = TransitionAttempt(
                trigger=trigger,
                transition=transition,
                candidate_index=i,
                snapshot=capture_snapshot(self._subject),
            )
            result.attempts.append(attempt)

            conditions_passed = True
            for j, name in enumerate(transition.conditions):
                condition_attempt = ConditionAttempt(
                    name=name, success=False, snapshot=capture_snapshot(self._subject)
                )
                attempt.conditions.append(condition_attempt)

                condition = resolve_capability(self._subject, name)
                if condition is None:
                    return fail(
                        ErrorKind.CONDITION_UNDEFINED,
                        f"Condition {name} is not defined in the machine.",
                        capability=name,
                        candidate_index=i,
                        capability_index=j,
                        attempt=attempt,
                    )

                if not check_condition(condition):
                    message = f"Condition {name} false, transition aborted."
                    if ErrorKind.CONDITION_VALUE.allows_fallback and i < last_index:
                        attempt.failure = TransitionFailure(
                            kind=ErrorKind.CONDITION_VALUE,
                            is_undefined_reference=False,
                            trigger=trigger,
                            capability=name,
                            candidate_index=i,
                            capability_index=j,
                            snapshot=capture_snapshot(self._subject),
                        )
                        self._dbg(message)
                        conditions_passed = False
                        break
                    return fail(
                        ErrorKind.CONDITION_VALUE,
                        message,
                        capability=name,
                        candidate_index=i,
                        capability_index=j,
                        attempt=attempt,
                    )

                condition_attempt.success = True

            if not conditions_passed:
                continue

            for j, name in enumerate(transition.effects):
                effect_attempt = EffectAttempt(
                    name=name, success=False, snapshot=capture_snapshot(self._subject)
                )
                attempt.effects.append(effect_attempt)

                effect = resolve_capability(self._subject, name)
                if effect is None:
                    return fail(
                        ErrorKind.EFFECT_UNDEFINED,
                        f"Effect {name} is not defined in the machine.",
                        capability=name,
                        candidate_index=i,
                        capability_index=j,
                        attempt=attempt,
                    )

                try:
                    run_effect(effect, props)
                except Exception as exc:
                    return fail(
                        ErrorKind.EFFECT_ERROR,
                        f"Effect {name} caused an error: {exc}",
                        capability=name,
                        candidate_index=i,
                        capability_index=j,
                        attempt=attempt,
                        cause=exc,
                    )

                effect_attempt.success = True

            self.state = transition.destination
            self._dbg(f"State changed to {self.state}")
            attempt.success = True
            result.success = True
            result.current_state = self.state
            result.post_snapshot = capture_snapshot(self._subject)
            return result

        # Unreachable: the last candidate either succeeds or fails above.
        return result
