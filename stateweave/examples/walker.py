"""Walking example subject: one guard, one effect."""

from __future__ import annotations

from stateweave.core.domain.models import Transition


class ExampleObject:
    def __init__(self, energy: int | None = None) -> None:
        self.state = "initial"
        self.energy = energy if energy is not None else 1
        self.speed = 0

    def speed_up(self) -> None:
        self.speed = 1
        self.energy -= 1

    def slow_down(self) -> None:
        self.speed = 0

    def has_energy(self) -> bool:
        return self.energy > 0


EXAMPLE_MACHINE = {
    "walk": Transition(
        origins=("initial",),
        destination="walking",
        conditions=("has_energy",),
        effects=("speed_up",),
    ),
    "stop": Transition(origins=("walking",), destination="stopped", effects=("slow_down",)),
}
