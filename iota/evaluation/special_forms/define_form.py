from typing import Mapping

from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError, IotaInvalidSymbol
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.builtin.primitives import Primitive


def define_form(
    tail: list[SExpression],
    env: Environment,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost scope only and produces no value.
    """
    if len(tail) != 2:
        raise IotaSyntaxError("define requires a name and a value expression")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise IotaInvalidSymbol(f"definition name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env, primitives)
    env.define(name, value)
    return None
