from iota import SExpression, LispValue, EvaluatorFn
from iota.errors import IotaSyntaxError


def quote_form(
    tail: list[SExpression], env, primitives, evaluate_fn: EvaluatorFn
) -> LispValue:
    # Compound nodes and Lists share one representation, so the datum is the value.
    if len(tail) != 1:
        raise IotaSyntaxError("quote expects exactly 1 argument")
    return tail[0]
