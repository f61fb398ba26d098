"""Coerce-and-sum of two numeric inputs."""

from __future__ import annotations

import logging

from numeric_adder.core.coerce import NumericValue
from numeric_adder.schemas.config import CoercionMode

logger = logging.getLogger(__name__)


def add(
    a: int | float | str,
    b: int | float | str,
    *,
    mode: CoercionMode = CoercionMode.STRICT,
) -> int:
    """Add two values after converting each to an integer.

    Each input is converted independently, truncating toward zero, so
    ``10.5`` counts as ``10`` and ``-1.9`` counts as ``-1``.

    Args:
        a: First value (integer, float or numeric text)
        b: Second value (integer, float or numeric text)
        mode: How to treat text that is not a number

    Returns:
        The integer sum of the converted values

    Raises:
        InvalidNumericInput: In strict mode, if either input is unparseable
            text or a non-finite float
        TypeError: If either input is not an int, float or str

    Examples:
        >>> add(10, 10)
        20
        >>> add("10", "10")
        20
        >>> add(10.0, 10.5)
        20
    """
    left = NumericValue.of(a)
    right = NumericValue.of(b)

    left_int = left.to_int(mode)
    right_int = right.to_int(mode)
    logger.debug(
        "add: %r (%s) -> %d, %r (%s) -> %d",
        a, left.kind.value, left_int,
        b, right.kind.value, right_int,
    )
    return left_int + right_int
