from typing import Mapping

from iota.errors import IotaSyntaxError, IotaInvalidSymbol
from iota.types.lambda_fn import Lambda

from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.builtin.primitives import Primitive


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:

    # (lambda (params) body...) needs at least one body form.
    # Several body forms are an implicit begin.
    if len(tail) < 2:
        raise IotaSyntaxError("lambda requires a parameter list and a body")

    params = tail[0]
    body_forms = tail[1:]

    if not isinstance(params, list):
        raise IotaSyntaxError(f"lambda parameter list must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise IotaInvalidSymbol(f"lambda parameter must be a symbol, got {p!r}")

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("begin"), *body_forms]

    return Lambda(list(params), body, env)
