"""Interactive read-evaluate-print loop."""
import sys
from typing import Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arithmetic_calculator.common.formatting import format_result
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import evaluate_line
from arithmetic_calculator.common.parser import ExpressionParser


class CalculatorRepl(BaseModel):
    """
    Prompt for calculations until the user asks to quit.

    Each iteration:
        - Prints the prompt
        - Reads one line (end of input behaves like the quit signal)
        - Stops on the quit signal without evaluating it
        - Otherwise prints exactly one result or error line
    """

    model_config = ConfigDict(frozen=True)

    parser: ExpressionParser = Field(default_factory=ExpressionParser, description="Parser used for every line")
    prompt: str = Field(
        default="Please enter your calculation (e.g. 5 + 5) or 'q' to quit:",
        description="Text printed before each read",
    )
    quit_signal: str = Field(default="q", description="Input that ends the loop")
    farewell: str = Field(default="Thanks for using.", description="Text printed when the loop ends")

    @field_validator("quit_signal")
    def quit_signal_must_be_a_single_token(cls, v: str) -> str:
        """Ensure the quit signal survives whitespace trimming of the input."""
        if not v or v != v.strip():
            raise ValueError("Quit signal must be non-empty and have no surrounding whitespace")
        return v

    def run(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None) -> int:
        """
        Run the loop until the quit signal or end of input.

        :param TextIO input_stream: Stream to read lines from, defaults to stdin
        :param TextIO output_stream: Stream to write prompts and results to, defaults to stdout

        :return: Process exit status
        :rtype: int
        """
        input_stream = input_stream if input_stream is not None else sys.stdin
        output_stream = output_stream if output_stream is not None else sys.stdout

        logger.info("🟢 Calculator session started")
        while True:
            print(self.prompt, file=output_stream, flush=True)
            line: str = input_stream.readline()

            # readline() only returns "" once the stream is exhausted
            if not line:
                logger.warning("🔌 End of input reached, leaving calculator")
                break

            if line.strip() == self.quit_signal:
                break

            print(format_result(evaluate_line(line, self.parser)), file=output_stream, flush=True)

        print(self.farewell, file=output_stream, flush=True)
        logger.info("🔴 Calculator session ended")
        return 0
