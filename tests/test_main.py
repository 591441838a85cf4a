"""Test the command-line entrypoint."""
import io

import pytest

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.main import CliArgs, main, parse_args


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the handlers main() attaches so later tests start clean."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel("NOTSET")


def test_parse_args_defaults() -> None:
    """No arguments selects the interactive loop with default settings."""
    args = parse_args([])
    assert args == CliArgs()
    assert args.expression is None
    assert args.log_level == "WARNING"


def test_parse_args_all_options() -> None:
    """All options are validated into CliArgs."""
    args = parse_args(["-e", "1e2 * 2", "--allow-scientific", "--log-level", "debug"])
    assert args.expression == "1e2 * 2"
    assert args.allow_scientific is True
    assert args.log_level == "DEBUG"


def test_parse_args_invalid_log_level() -> None:
    """Unknown log levels exit with usage status 2."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--log-level", "LOUD"])
    assert exc_info.value.code == 2


def test_parse_args_blank_expression() -> None:
    """A blank expression exits with usage status 2."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--expression", "   "])
    assert exc_info.value.code == 2


def test_main_single_expression(capsys) -> None:
    """A valid single expression prints its result and exits 0."""
    assert main(["--expression", "10 / 4"]) == 0
    assert capsys.readouterr().out == "10 / 4 = 2.5\n"


def test_main_negative_operand_expression(capsys) -> None:
    """An expression starting with a minus sign is not mistaken for an option."""
    assert main(["--expression", "-5 + 3"]) == 0
    assert capsys.readouterr().out == "-5 + 3 = -2\n"


def test_main_single_expression_error(capsys) -> None:
    """A rejected single expression prints an error and exits 1."""
    assert main(["-e", "10 / 0"]) == 1
    assert capsys.readouterr().out == "Error: Cannot divide by zero\n"


def test_main_scientific_flag(capsys) -> None:
    """--allow-scientific enables exponent operands."""
    assert main(["-e", "1e3 + 1"]) == 1
    assert main(["-e", "1e3 + 1", "--allow-scientific"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "1000 + 1 = 1001"


def test_main_interactive(monkeypatch, capsys) -> None:
    """Without --expression the interactive loop runs on stdin."""
    monkeypatch.setattr("sys.stdin", io.StringIO("5 + 5\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "5 + 5 = 10" in out
    assert out.rstrip().endswith("Thanks for using.")
