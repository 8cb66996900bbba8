"""Integer arithmetic used by the console demonstration."""

import logging

from pydantic import ConfigDict, validate_call

logger = logging.getLogger("calcdemo.calculator")

# strict mode: only real ints are accepted (no floats, numeric strings or bools)
_strict_ints = validate_call(config=ConfigDict(strict=True))


class InvalidArgument(ValueError):
    """Raised when an operand is outside the domain of an operation."""


class Calculator:
    """Stateless integer operations. Every call is independent."""

    @_strict_ints
    def add(self, a: int, b: int) -> int:
        logger.debug("add(%d, %d)", a, b)
        return a + b

    @_strict_ints
    def subtract(self, a: int, b: int) -> int:
        logger.debug("subtract(%d, %d)", a, b)
        return a - b

    @_strict_ints
    def max(self, a: int, b: int) -> int:
        """Return the greater operand; equal operands return that value."""
        logger.debug("max(%d, %d)", a, b)
        return a if a >= b else b

    @_strict_ints
    def divide(self, a: int, b: int) -> int:
        """Return a / b truncated toward zero.

        Python's ``//`` floors, so the quotient is taken on magnitudes and
        the sign applied afterwards. Stays in integer arithmetic, so large
        operands divide exactly.

        Raises:
            InvalidArgument: if ``b`` is zero.
        """
        if b == 0:
            logger.warning("Rejected division of %d by zero", a)
            raise InvalidArgument("Divisor must not be zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        logger.debug("divide(%d, %d) = %d", a, b, quotient)
        return quotient
