"""Micro-benchmark for binding a state machine to a fresh object.

Compares plain construction against construction plus add_state_machine.

Example:
  - PYTHONPATH=. python3 stateweave/cli/bench_merge.py --iterations 50000
"""

from __future__ import annotations

import argparse
import time
from typing import Callable

from stateweave.app_api.merge import add_state_machine
from stateweave.examples.walker import EXAMPLE_MACHINE, ExampleObject


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark state machine binding")
    parser.add_argument("--iterations", type=int, default=10000, help="Rounds per case")
    parser.add_argument("--with-trigger", action="store_true", help="Also fire 'walk' once per round")
    return parser.parse_args(argv)


def _time(fn: Callable[[], object], iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return time.perf_counter() - start


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.iterations <= 0:
        raise SystemExit("--iterations must be positive")

    def plain() -> object:
        return ExampleObject()

    def merged() -> object:
        view = add_state_machine(ExampleObject(), EXAMPLE_MACHINE)
        if args.with_trigger:
            view.trigger("walk")
        return view

    cases = [("no state machine", plain), ("add_state_machine", merged)]
    baseline: float | None = None
    for label, fn in cases:
        elapsed = _time(fn, args.iterations)
        per_call_us = elapsed / args.iterations * 1e6
        ratio = "" if baseline is None else f" x{elapsed / baseline:.1f}"
        baseline = baseline if baseline is not None else elapsed
        print(f"{label:<20} total={elapsed:.4f}s per_call={per_call_us:.2f}us{ratio}")


if __name__ == "__main__":
    main()
