from __future__ import annotations

import inspect
from typing import Any, Callable

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def resolve_capability(subject: object, name: str) -> Callable[..., Any] | None:
    capability = getattr(subject, name, None)
    if not callable(capability):
        return None
    return capability


def accepts_props(capability: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(capability)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures get props.
        return True
    return any(param.kind in _POSITIONAL for param in signature.parameters.values())


def check_condition(condition: Callable[..., Any]) -> bool:
    return bool(condition())


def run_effect(effect: Callable[..., Any], props: Any) -> None:
    if accepts_props(effect):
        effect(props)
    else:
        effect()
