from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping


@dataclass(frozen=True)
class MachineOptions:
    verbosity: bool = False
    throw_exceptions: bool = True
    # Reserved for stricter origin enforcement; stored but not consulted yet.
    strict_origins: bool = False
    state_field: str = "state"


@dataclass(frozen=True)
class TriggerOptions:
    throw_exceptions: bool | None = None
    on_error: Callable[[], None] | None = None


def _require(payload: Mapping[str, Any], key: str, expected_type: type, default: Any) -> Any:
    if key not in payload:
        return default
    value = payload[key]
    if expected_type is bool:
        if not isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be bool")
        return value
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def options_from_mapping(payload: Mapping[str, Any]) -> MachineOptions:
    if not isinstance(payload, Mapping):
        raise ValueError("Machine options must be a mapping")

    known = {f.name for f in fields(MachineOptions)}
    unknown = set(payload.keys()) - known
    if unknown:
        raise ValueError(f"Unknown machine option(s): {sorted(unknown)}")

    defaults = MachineOptions()
    state_field = _require(payload, "state_field", str, defaults.state_field)
    if not state_field.isidentifier():
        raise ValueError(f"Field 'state_field' must be an attribute name, got {state_field!r}")

    return MachineOptions(
        verbosity=_require(payload, "verbosity", bool, defaults.verbosity),
        throw_exceptions=_require(payload, "throw_exceptions", bool, defaults.throw_exceptions),
        strict_origins=_require(payload, "strict_origins", bool, defaults.strict_origins),
        state_field=state_field,
    )


def resolve_machine_options(options: MachineOptions | Mapping[str, Any] | None) -> MachineOptions:
    if options is None:
        return MachineOptions()
    if isinstance(options, MachineOptions):
        return options
    return options_from_mapping(options)


def resolve_trigger_options(
    options: TriggerOptions | Mapping[str, Any] | None,
) -> TriggerOptions:
    if options is None:
        return TriggerOptions()
    if isinstance(options, TriggerOptions):
        return options
    if not isinstance(options, Mapping):
        raise ValueError("Trigger options must be TriggerOptions or a mapping")
    unknown = set(options.keys()) - {"throw_exceptions", "on_error"}
    if unknown:
        raise ValueError(f"Unknown trigger option(s): {sorted(unknown)}")
    throw_exceptions = options.get("throw_exceptions")
    if throw_exceptions is not None and not isinstance(throw_exceptions, bool):
        raise ValueError("Field 'throw_exceptions' must be bool")
    on_error = options.get("on_error")
    if on_error is not None and not callable(on_error):
        raise ValueError("Field 'on_error' must be callable")
    return TriggerOptions(throw_exceptions=throw_exceptions, on_error=on_error)
