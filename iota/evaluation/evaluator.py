"""Core evaluator for the Iota interpreter.

Walks a syntax tree against an explicit environment and an injected primitive
table. Special forms are dispatched through the SPECIAL_FORMS registry before
ordinary procedure application; everything else is resolved to a closure or a
primitive and applied to its left-to-right evaluated arguments.
"""

from __future__ import annotations

from typing import Mapping, Optional

from iota import SExpression, LispValue
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.errors import (
    IotaSyntaxError,
    IotaUnboundSymbol,
    IotaProcedureNotFound,
)
from iota.evaluation.apply import apply, is_procedure
from iota.evaluation.special_forms import SPECIAL_FORMS
from iota.builtin.primitives import PRIMITIVES, Primitive


def resolve_symbol(
    name: Symbol, env: Environment, primitives: Mapping[str, Primitive]
) -> LispValue:
    """Lexical chain first, then the primitive table."""
    scope = env.find(name)
    if scope is not None:
        return scope.vars[name]
    prim = primitives.get(name.id)
    if prim is not None:
        return prim
    raise IotaUnboundSymbol(f"symbol '{name}' is not defined")


def resolve_procedure(
    head: SExpression, env: Environment, primitives: Mapping[str, Primitive]
) -> LispValue:
    """Turn the head of a call form into something `apply` accepts."""
    if isinstance(head, Symbol):
        try:
            proc = resolve_symbol(head, env, primitives)
        except IotaUnboundSymbol:
            raise IotaProcedureNotFound(f"procedure '{head}' is not defined") from None
        if not is_procedure(proc):
            raise IotaProcedureNotFound(f"'{head}' is bound to {proc!r}, not a procedure")
        return proc

    # Nested form in head position, e.g. ((repeat f) x)
    proc = evaluate(head, env, primitives)
    if not is_procedure(proc):
        raise IotaProcedureNotFound(f"cannot apply non-procedure {proc!r}")
    return proc


def evaluate(
    expr: SExpression,
    env: Environment,
    primitives: Optional[Mapping[str, Primitive]] = None,
) -> LispValue:
    """
    Evaluate `expr` in `env`. `primitives` defaults to the standard table.
    """
    if primitives is None:
        primitives = PRIMITIVES

    match expr:
        case []:
            raise IotaSyntaxError("syntax error: empty form")

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, primitives, evaluate)

            proc = resolve_procedure(head, env, primitives)
            args = [evaluate(arg, env, primitives) for arg in tail_args]
            return apply(proc, args, primitives, evaluate)

        case Symbol():
            return resolve_symbol(expr, env, primitives)

    # --- Atoms return as-is ---
    return expr
