"""Test classes ParsedExpression and EvaluationResult."""
from pydantic import ValidationError
import pytest

from arithmetic_calculator.common.models import (
    ErrorKind,
    EvaluationResult,
    OperatorKind,
    ParsedExpression,
)


def test_operator_kind_values() -> None:
    """Every operator is valued by its input symbol."""
    assert [op.value for op in OperatorKind] == ["+", "-", "*", "/"]


def test_parsed_expression_valid() -> None:
    """A ParsedExpression accepts an operator given as its symbol."""
    expr = ParsedExpression(left=1, operator="/", right=2.5)
    assert expr.operator is OperatorKind.DIVIDE
    assert isinstance(expr.left, float)


def test_parsed_expression_invalid_operator() -> None:
    """Unknown operator symbols raise a validation error."""
    with pytest.raises(ValidationError):
        ParsedExpression(left=1, operator="%", right=2)


def test_parsed_expression_is_frozen() -> None:
    """A ParsedExpression cannot be mutated."""
    expr = ParsedExpression(left=1, operator="+", right=2)
    with pytest.raises(ValidationError):
        expr.left = 3


def test_evaluation_result_success() -> None:
    """A successful result carries its expression and value."""
    expr = ParsedExpression(left=2, operator="+", right=3)
    res = EvaluationResult(expression=expr, result=5.0)
    assert res.ok
    assert res.error is None


def test_evaluation_result_failure() -> None:
    """A failed result carries its error kind and message."""
    res = EvaluationResult(error=ErrorKind.DIVISION_BY_ZERO, message="Cannot divide by zero")
    assert not res.ok
    assert res.result is None


def test_evaluation_result_requires_result_or_error() -> None:
    """A result with neither value nor error is rejected."""
    with pytest.raises(ValidationError):
        EvaluationResult()


def test_evaluation_result_rejects_both() -> None:
    """A result cannot be a success and a failure at once."""
    expr = ParsedExpression(left=2, operator="+", right=3)
    with pytest.raises(ValidationError):
        EvaluationResult(expression=expr, result=5.0, error=ErrorKind.INVALID_OPERAND, message="bad")


def test_evaluation_result_error_requires_message() -> None:
    """A failed result without a message is rejected."""
    with pytest.raises(ValidationError):
        EvaluationResult(error=ErrorKind.INVALID_OPERATOR)


def test_evaluation_result_success_requires_expression() -> None:
    """A successful result without its expression is rejected."""
    with pytest.raises(ValidationError):
        EvaluationResult(result=5.0)
