from typing import Mapping

from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.types.environment import Environment
from iota.builtin.primitives import Primitive


def begin_form(
    tail: list[SExpression],
    env: Environment,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = None
    for e in tail:
        result = evaluate_fn(e, env, primitives)
    return result
