# Core type aliases for Iota's data model.
# Plain Python types represent both code (forms) and runtime values:
# int, float, Symbol and list for syntax-tree nodes; int, float, bool, Symbol,
# list and Lambda (plus primitive callables) for evaluated values.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the distinction is documentary.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax-tree node alias
SExpression = LispValue

# Evaluator function type: handed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Public API. Imported after the aliases above, which the submodules use.
from iota.errors import (  # noqa: E402
    IotaError,
    IotaSyntaxError,
    IotaUnexpectedEOF,
    IotaUnexpectedClose,
    IotaInvalidSymbol,
    IotaUnboundSymbol,
    IotaProcedureNotFound,
    IotaTypeError,
    IotaEmptyList,
    IotaArityError,
    IotaArithmeticError,
    IotaDivisionByZero,
)
from iota.types.symbol import Symbol  # noqa: E402
from iota.types.environment import Environment  # noqa: E402
from iota.types.lambda_fn import Lambda  # noqa: E402
from iota.reader.parser import lex, parse, parse_all  # noqa: E402
from iota.evaluation.evaluator import evaluate  # noqa: E402
from iota.interpreter import Interpreter, run, standard_env  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Symbol",
    "Environment",
    "Lambda",
    "Interpreter",
    "lex",
    "parse",
    "parse_all",
    "evaluate",
    "run",
    "standard_env",
    "IotaError",
    "IotaSyntaxError",
    "IotaUnexpectedEOF",
    "IotaUnexpectedClose",
    "IotaInvalidSymbol",
    "IotaUnboundSymbol",
    "IotaProcedureNotFound",
    "IotaTypeError",
    "IotaEmptyList",
    "IotaArityError",
    "IotaArithmeticError",
    "IotaDivisionByZero",
]
