"""Phase-change example subject; melt passes props to an effect."""

from __future__ import annotations

from typing import Any, Mapping

MATTER_STATES = ("solid", "liquid", "gas", "plasma")


class Matter:
    def __init__(self, state: str) -> None:
        self.state = state
        self.set_environment()

    def set_environment(self, props: Mapping[str, Any] | None = None) -> None:
        props = props or {}
        self.temperature = props.get("temperature", 0)
        self.pressure = props.get("pressure", 101.325)


MATTER_MACHINE = {
    "melt": [{"origins": "solid", "destination": "liquid", "effects": "set_environment"}],
    "evaporate": [{"origins": "liquid", "destination": "gas"}],
    "sublimate": [{"origins": "solid", "destination": "gas"}],
    "ionize": [{"origins": "gas", "destination": "plasma"}],
    "freeze": [{"origins": "liquid", "destination": "solid"}],
    "depose": [{"origins": "gas", "destination": "solid"}],
    "condense": [{"origins": "gas", "destination": "liquid"}],
    "recombine": [{"origins": "plasma", "destination": "gas"}],
}
