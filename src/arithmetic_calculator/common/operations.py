"""Arithmetic operations and the line evaluation pipeline."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Dict

from arithmetic_calculator.common.errors import CalculationError, DivisionByZeroError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import EvaluationResult, OperatorKind, ParsedExpression
from arithmetic_calculator.common.parser import ExpressionParser


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operators to the function computing them
OPERATORS: Dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUBTRACT: operator.sub,
    OperatorKind.MULTIPLY: operator.mul,
    OperatorKind.DIVIDE: operator.truediv,
}


def calculate(expression: ParsedExpression) -> float:
    """
    Compute the value of a validated expression.

    :param ParsedExpression expression: Expression to compute

    :return: Computed result
    :rtype: float
    :raises DivisionByZeroError: If dividing by exactly zero
    """
    if expression.operator is OperatorKind.DIVIDE and expression.right == 0:
        raise DivisionByZeroError()
    return OPERATORS[expression.operator](expression.left, expression.right)


def evaluate_line(line: str, parser: ExpressionParser) -> EvaluationResult:
    """
    Parse and compute one input line, converting failures into an error result.

    :param str line: Raw input line
    :param ExpressionParser parser: Parser used to validate the line

    :return: Successful or failed evaluation result
    :rtype: EvaluationResult
    """
    expression = None
    try:
        expression = parser.parse(line)
        result: float = calculate(expression)
    except CalculationError as exc:
        logger.info(f"🧮❌ Rejected {line.strip()!r}: {exc}")
        return EvaluationResult(expression=expression, error=exc.kind, message=str(exc))

    logger.info(f"🧮✅ Evaluated {line.strip()!r} = {result}")
    return EvaluationResult(expression=expression, result=result)
