from __future__ import annotations
import logging
import math
from typing import Mapping

from iota import LispValue
from iota.config import apply_recursion_limit
from iota.errors import IotaUnexpectedEOF
from iota.evaluation.evaluator import evaluate
from iota.reader.parser import parse_all
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.builtin.primitives import Primitive, standard_primitives

logger = logging.getLogger(__name__)


def standard_env() -> Environment:
    """A fresh root environment with the standard constants bound."""
    env = Environment()
    env.update({
        Symbol("pi"): math.pi,
        Symbol("#t"): True,
        Symbol("#f"): False,
    })
    return env


class Interpreter:
    """
    Orchestrates reading and evaluating Iota code.
    Maintains one Environment across calls, so definitions made by one
    `eval` are visible to the next.
    """

    def __init__(
        self,
        primitives: Mapping[str, Primitive] | None = None,
        env: Environment | None = None,
    ):
        # Closure calls nest several host frames per Lisp call.
        apply_recursion_limit()
        self.primitives: Mapping[str, Primitive] = (
            primitives if primitives is not None else standard_primitives()
        )
        self.env: Environment = env if env is not None else standard_env()

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value.

        The whole program is read before anything is evaluated, so a syntax
        error leaves the environment untouched.
        """
        exprs = parse_all(code)
        if not exprs:
            raise IotaUnexpectedEOF("unexpected EOF while reading: empty program")
        result: LispValue = None
        for expr in exprs:
            result = evaluate(expr, self.env, self.primitives)
            logger.debug("%r => %r", expr, result)
        return result


def run(code: str) -> LispValue:
    """Evaluate `code` against a fresh standard environment."""
    return Interpreter().eval(code)
