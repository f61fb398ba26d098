"""The three canonical example calls."""

from __future__ import annotations

from numeric_adder.core.adder import add
from numeric_adder.schemas.config import CoercionMode

DEMO_CALLS: list[tuple[int | float | str, int | float | str]] = [
    (10, 10),
    ("10", "10"),
    (10.0, 10.5),
]


def run_demo(mode: CoercionMode = CoercionMode.STRICT) -> list[int]:
    """Run every demo call and return the results in order."""
    return [add(a, b, mode=mode) for a, b in DEMO_CALLS]


def render_results(results: list[int], separator: str = "") -> str:
    """Join results for printing. The default separator is empty."""
    return separator.join(str(r) for r in results)
