from typing import Mapping

from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.builtin.primitives import Primitive


def if_form(
    tail: list[SExpression],
    env: Environment,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise IotaSyntaxError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env, primitives)
    # Only #f is false; numbers, lists and "no value" are all true
    if cond is not False:
        return evaluate_fn(tail[1], env, primitives)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, primitives)
    else:
        return None
