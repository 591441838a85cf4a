"""Exceptions raised while parsing or evaluating a calculation."""
from arithmetic_calculator.common.models import ErrorKind


class CalculationError(ValueError):
    """Base class for every recoverable calculation failure."""

    kind: ErrorKind


class WrongFieldCountError(CalculationError):
    """The input line does not split into exactly three fields."""

    kind = ErrorKind.WRONG_FIELD_COUNT

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Invalid input: expected '<number> <operator> <number>', got {count} field(s)"
        )


class InvalidOperandError(CalculationError):
    """An operand field is not a number."""

    kind = ErrorKind.INVALID_OPERAND

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid operand: {token!r} is not a number")


class InvalidOperatorError(CalculationError):
    """The operator field is not one of the supported symbols."""

    kind = ErrorKind.INVALID_OPERATOR

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid operator: {token!r}. Use +, -, *, /")


class DivisionByZeroError(CalculationError):
    """The divisor of a division is exactly zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")
