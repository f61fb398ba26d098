"""Numeric Adder.

Coerce integers, floats and numeric text to integers (truncating toward
zero) and add them.
"""

from numeric_adder.core.adder import add
from numeric_adder.errors import InvalidNumericInput

__version__ = "0.1.0"

__all__ = ["add", "InvalidNumericInput", "__version__"]
