from __future__ import annotations

from typing import TYPE_CHECKING, Hashable

from ..domain.enums import ErrorKind

if TYPE_CHECKING:
    from .result import TransitionResult


class TransitionError(Exception):
    """Raised for a failed trigger call; carries the partial TransitionResult."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        result: "TransitionResult",
        trigger: Hashable | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.result = result
        self.trigger = trigger

    @property
    def is_undefined_reference(self) -> bool:
        return self.kind.is_undefined_reference

    def __repr__(self) -> str:
        return f"TransitionError(kind={self.kind.value}, trigger={self.trigger!r}, message={self.message!r})"
