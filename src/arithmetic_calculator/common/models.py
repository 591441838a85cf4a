"""Pydantic models describing parsed expressions and evaluation results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OperatorKind(str, Enum):
    """Supported binary operators, valued by their input symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ErrorKind(str, Enum):
    """Reasons an input line can fail to produce a result."""

    WRONG_FIELD_COUNT = "wrong_field_count"
    INVALID_OPERAND = "invalid_operand"
    INVALID_OPERATOR = "invalid_operator"
    DIVISION_BY_ZERO = "division_by_zero"


class ParsedExpression(BaseModel):
    """A validated `<left> <operator> <right>` triple."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="Left operand")
    operator: OperatorKind = Field(..., description="Operator to apply")
    right: float = Field(..., description="Right operand")


class EvaluationResult(BaseModel):
    """
    Outcome of evaluating one input line.

    Exactly one of ``result`` or ``error`` is set. Failed results carry a
    human-readable ``message``; successful ones carry the parsed ``expression``.
    """

    model_config = ConfigDict(frozen=True)

    expression: Optional[ParsedExpression] = Field(default=None, description="Parsed expression, if parsing succeeded")
    result: Optional[float] = Field(default=None, description="Computed value on success")
    error: Optional[ErrorKind] = Field(default=None, description="Error kind on failure")
    message: Optional[str] = Field(default=None, description="Human-readable error description")

    @model_validator(mode="after")
    def check_result_or_error(self) -> "EvaluationResult":
        """Ensure the result is either a success or a failure, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be set")
        if (self.error is None) != (self.message is None):
            raise ValueError("'message' must be set if and only if 'error' is set")
        if self.result is not None and self.expression is None:
            raise ValueError("A successful result requires its 'expression'")
        return self

    @property
    def ok(self) -> bool:
        """True when the line evaluated to a number."""
        return self.error is None
