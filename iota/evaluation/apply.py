"""Application engine for Iota.

This module centralizes procedure application for the interpreter:
- Closures (Lambda) get a fresh child scope of their captured environment,
  with formals bound positionally, and their body is evaluated there.
- Primitives (plain Python callables from the primitive table) receive the
  list of evaluated arguments and do their own validation.

There is no tail-call elimination: a closure call is an ordinary Python call,
so recursion depth is bounded by the host stack.
"""

from __future__ import annotations

import logging
from typing import Mapping

from iota import LispValue, EvaluatorFn
from iota.types.lambda_fn import Lambda
from iota.builtin.primitives import Primitive

logger = logging.getLogger(__name__)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - primitives: The primitive table, threaded through to the body.
    - evaluate_fn: Evaluator used for the body.

    Raises IotaArityError (from Lambda.extend_env) on an argument count mismatch.
    """
    new_env = fn.extend_env(list(args))
    logger.debug("Lambda - formals: %s - Args: %s", fn.formals, args)
    return evaluate_fn(fn.body, new_env, primitives)


def apply(
    head: Lambda | Primitive,
    args: list[LispValue],
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a primitive.

    - For Lambda, defer to apply_lambda.
    - Anything else is a primitive and is called with the list of args.

    The caller has already checked that `head` is a procedure.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, primitives, evaluate_fn)
    logger.debug("Function - name: %s - Args: %s", getattr(head, "__name__", head), args)
    return head(args)
