"""Classification and integer coercion of numeric inputs.

Three input shapes are accepted: integers, floats, and numeric text. Every
shape converts to an integer by truncating toward zero, never by rounding.
Text goes through ``Decimal`` so long integer strings keep full precision.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from enum import Enum

from numeric_adder.errors import InvalidNumericInput
from numeric_adder.schemas.config import CoercionMode

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\v\f"
_NUMBER = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_STRICT_PATTERN = re.compile(_NUMBER)
# Leading whitespace is skipped, then the longest numeric prefix wins.
_LENIENT_PATTERN = re.compile(r"[ \t\n\r\v\f]*(" + _NUMBER + ")")

# Same bound as Python's default int/str conversion digit limit.
MAX_INTEGER_DIGITS = 4300


class NumericKind(str, Enum):
    """Shape of a numeric input."""

    INTEGER = "integer"
    FLOAT = "float"
    NUMERIC_TEXT = "numeric_text"


def truncate_toward_zero(number: int | float | Decimal) -> int:
    """Drop the fractional part of a number.

    Examples:
        >>> truncate_toward_zero(3.9)
        3
        >>> truncate_toward_zero(-3.9)
        -3
    """
    return math.trunc(number)


def parse_numeric_text(text: str, mode: CoercionMode = CoercionMode.STRICT) -> Decimal:
    """Parse decimal text into an exact ``Decimal``.

    Args:
        text: Text such as ``"10"``, ``"-10.5"`` or ``"1e3"``
        mode: STRICT requires the whole text (surrounding whitespace aside)
            to be a number. LENIENT uses the leading numeric prefix and
            falls back to zero.

    Returns:
        The parsed value

    Raises:
        InvalidNumericInput: In strict mode, if the text is not a number or
            its integer part would exceed ``MAX_INTEGER_DIGITS`` digits
    """
    if mode == CoercionMode.STRICT:
        match = _STRICT_PATTERN.fullmatch(text.strip(_WHITESPACE))
        if match is None:
            raise InvalidNumericInput(text, "text is not a decimal number")
        value = _bounded_decimal(match.group(0))
        if value is None:
            raise InvalidNumericInput(text, "number out of range")
        return value

    match = _LENIENT_PATTERN.match(text)
    if match is None:
        logger.debug("No numeric prefix in %r, using 0", text)
        return Decimal(0)
    value = _bounded_decimal(match.group(1))
    if value is None:
        logger.debug("Number in %r out of range, using 0", text)
        return Decimal(0)
    return value


def _bounded_decimal(literal: str) -> Decimal | None:
    """Build a Decimal, or None if truncating it would need too many digits."""
    try:
        value = Decimal(literal)
    except DecimalException:
        return None
    # adjusted() is the exponent of the leading digit; zero is always in range
    if not value.is_finite() or (value and value.adjusted() >= MAX_INTEGER_DIGITS):
        return None
    return value


@dataclass(frozen=True)
class NumericValue:
    """A classified numeric input."""

    kind: NumericKind
    raw: int | float | str

    @classmethod
    def of(cls, value: object) -> NumericValue:
        """Classify a raw value.

        Raises:
            TypeError: If the value is not an int, float or str
        """
        # bool is an int subclass but not a numeric input
        if isinstance(value, bool):
            raise TypeError(f"Unsupported numeric input type: {type(value).__name__}")
        if isinstance(value, int):
            return cls(NumericKind.INTEGER, value)
        if isinstance(value, float):
            return cls(NumericKind.FLOAT, value)
        if isinstance(value, str):
            return cls(NumericKind.NUMERIC_TEXT, value)
        raise TypeError(f"Unsupported numeric input type: {type(value).__name__}")

    def to_int(self, mode: CoercionMode = CoercionMode.STRICT) -> int:
        """Convert to an integer, truncating toward zero."""
        if self.kind == NumericKind.INTEGER:
            return int(self.raw)

        if self.kind == NumericKind.FLOAT:
            if not math.isfinite(self.raw):
                if mode == CoercionMode.STRICT:
                    raise InvalidNumericInput(self.raw, "float is not finite")
                logger.debug("Non-finite float %r, using 0", self.raw)
                return 0
            return truncate_toward_zero(self.raw)

        return truncate_toward_zero(parse_numeric_text(self.raw, mode))
