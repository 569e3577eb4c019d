from __future__ import annotations

import logging
from typing import Callable

from lispy import LispValue
from lispy.builtin.env_builtin import register
from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import read
from lispy.types.environment import Environment

logger = logging.getLogger(__name__)

VERSION = "0.0.1"
PROMPT = "lispy> "


class Interpreter:
    """
    Reads and evaluates Lispy input lines against one root Environment.
    Definitions persist across calls for the lifetime of the session.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate one input line. The whole line reads as a single S-expression.

        Raises LispySyntaxError if the line does not parse.
        """
        result = evaluate(read(code), self.env)
        logger.debug("%r => %s", code, result)
        return result


def repl(
    interp: Interpreter | None = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """Prompt, evaluate and print until end of input or Ctrl+C."""
    interp = interp or Interpreter()
    output(f"Lispy Version {VERSION}")
    output("Press Ctrl+c to Exit\n")
    while True:
        try:
            line = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            output("")
            break
        try:
            output(str(interp.eval(line)))
        except LispySyntaxError as e:
            output(f"Syntax error: {e}")
