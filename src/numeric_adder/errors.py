"""Errors raised while coercing numeric inputs."""

from __future__ import annotations


class InvalidNumericInput(ValueError):
    """Raised when an input cannot be read as a number.

    Strict coercion raises this for text that is not a decimal number and
    for non-finite floats. Lenient coercion never raises it.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid numeric input {value!r}: {reason}")
