"""Render evaluation results as output lines."""
import math

from arithmetic_calculator.common.models import EvaluationResult


def format_number(value: float) -> str:
    """
    Render a number without a trailing ".0" when it is integral.

    Examples:
        - 10.0 -> "10"
        - 2.5 -> "2.5"
        - -0.0 -> "0"

    :param float value: Number to render

    :return: Display string
    :rtype: str
    """
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_result(evaluation: EvaluationResult) -> str:
    """
    Render an evaluation as a single output line.

    :param EvaluationResult evaluation: Result of evaluating one line

    :return: "<left> <op> <right> = <result>" on success, "Error: <message>" on failure
    :rtype: str
    """
    if not evaluation.ok:
        return f"Error: {evaluation.message}"

    expression = evaluation.expression
    return (
        f"{format_number(expression.left)} {expression.operator.value} "
        f"{format_number(expression.right)} = {format_number(evaluation.result)}"
    )
