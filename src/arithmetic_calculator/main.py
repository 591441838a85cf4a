"""
Command-line entrypoint.

This script either:
- Starts the interactive calculator on stdin/stdout
- Evaluates a single expression given with --expression

Exit status:
- 0 when the session ends or the expression evaluates
- 1 when the single expression is rejected
- 2 when the command-line arguments are invalid
"""

import argparse
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from arithmetic_calculator.cli.repl import CalculatorRepl
from arithmetic_calculator.common.formatting import format_result
from arithmetic_calculator.common.logger import configure_logging, logger
from arithmetic_calculator.common.operations import evaluate_line
from arithmetic_calculator.common.parser import ExpressionParser


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : Optional[str]
        Single calculation to evaluate instead of starting the interactive loop.
    allow_scientific : bool
        Accept exponent notation (e.g. 1e3) in operands.
    log_level : str
        Level of the records written to stderr.
    """

    model_config = ConfigDict(frozen=True)

    expression: Optional[str] = None
    allow_scientific: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("expression")
    def expression_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        """Ensure that a given expression is not blank."""
        if v is not None and not v.strip():
            raise ValueError("Expression cannot be blank")
        return v

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Calculate '<number> <operator> <number>' with +, -, * or /"
    )

    parser.add_argument(
        "-e",
        "--expression",
        help="Evaluate a single calculation (e.g. '5 + 5') and exit",
    )
    parser.add_argument(
        "--allow-scientific",
        action="store_true",
        help="Accept exponent notation such as 1e3 in operands",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level written to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            expression=args.expression,
            allow_scientific=args.allow_scientific,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function used by the console script.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    parser = ExpressionParser(allow_scientific=cli_args.allow_scientific)

    if cli_args.expression is None:
        return CalculatorRepl(parser=parser).run()

    logger.debug(f"Evaluating single expression {cli_args.expression!r}")
    evaluation = evaluate_line(cli_args.expression, parser)
    print(format_result(evaluation))
    return 0 if evaluation.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
