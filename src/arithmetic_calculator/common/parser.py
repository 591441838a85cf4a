"""Tokenize and validate `<number> <operator> <number>` input lines."""
import re
from typing import List, Pattern

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.errors import (
    InvalidOperandError,
    InvalidOperatorError,
    WrongFieldCountError,
)
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperatorKind, ParsedExpression

# Plain signed ASCII decimal literal: "5", "-5", "+5.", "5.25", ".5"
DECIMAL_PATTERN: Pattern[str] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Same literal with an optional exponent: "1e3", "-2.5E-4"
SCIENTIFIC_PATTERN: Pattern[str] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

EXPECTED_FIELD_COUNT: int = 3


class ExpressionParser(BaseModel):
    """
    Turn a raw input line into a ParsedExpression.

    Validation order:
        1. The line must split into exactly three whitespace-separated fields
        2. The first and third fields must be numbers
        3. The second field must be one of the supported operator symbols

    Checking the field count first fixes which error a malformed line produces,
    e.g. "5 + five + 5" is a field count error, never an operand error.
    """

    # Parser settings never change once a session starts
    model_config = ConfigDict(frozen=True)

    allow_scientific: bool = Field(default=False, description="Accept exponent notation such as 1e3")

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Split an input line into whitespace-separated fields.

        :param str line: Raw input line

        :return: List of fields
        :rtype: List[str]
        """
        return line.split()

    def _is_number(self, token: str) -> bool:
        """
        Determine if a token is a numeric literal accepted by this parser.

        Only plain ASCII decimal literals are accepted; "inf", "nan", underscores,
        non-ASCII digits and exponents (unless enabled) are rejected even though
        float() takes them.

        :param str token: Token string

        :return: True if token is a valid numeric literal, else False
        :rtype: bool
        """
        pattern = SCIENTIFIC_PATTERN if self.allow_scientific else DECIMAL_PATTERN
        return pattern.fullmatch(token) is not None

    def parse_operand(self, token: str) -> float:
        """
        Convert an operand field to a float.

        :param str token: Operand field

        :return: Parsed value
        :rtype: float
        :raises InvalidOperandError: If the field is not a numeric literal
        """
        if not self._is_number(token):
            raise InvalidOperandError(token)
        return float(token)

    @staticmethod
    def parse_operator(token: str) -> OperatorKind:
        """
        Convert an operator field to an OperatorKind.

        :param str token: Operator field

        :return: Matching operator
        :rtype: OperatorKind
        :raises InvalidOperatorError: If the symbol is not supported
        """
        try:
            return OperatorKind(token)
        except ValueError:
            raise InvalidOperatorError(token) from None

    def parse(self, line: str) -> ParsedExpression:
        """
        Validate an input line and build the expression it describes.

        :param str line: Raw input line

        :return: Validated expression
        :rtype: ParsedExpression
        :raises WrongFieldCountError: If the line does not have exactly three fields
        :raises InvalidOperandError: If an operand is not a number
        :raises InvalidOperatorError: If the operator is not supported
        """
        tokens: List[str] = self.tokenize(line)
        if len(tokens) != EXPECTED_FIELD_COUNT:
            raise WrongFieldCountError(len(tokens))

        left_token, operator_token, right_token = tokens
        left: float = self.parse_operand(left_token)
        right: float = self.parse_operand(right_token)
        operator: OperatorKind = self.parse_operator(operator_token)

        logger.debug(f"🔎 Parsed {line!r} as ({left}, {operator.value}, {right})")
        return ParsedExpression(left=left, operator=operator, right=right)
