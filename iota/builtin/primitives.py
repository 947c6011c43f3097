from __future__ import annotations
from functools import reduce
from types import MappingProxyType
from typing import Any, Callable, Mapping
from iota.types.symbol import Symbol
from iota.types.lambda_fn import Lambda
from iota.errors import (
    IotaTypeError,
    IotaArityError,
    IotaEmptyList,
    IotaArithmeticError,
    IotaDivisionByZero,
)

Primitive = Callable[[list[Any]], Any]


# -------------------------------
# Argument checks
# -------------------------------
def is_number(x: Any) -> bool:
    # bool subclasses int but is not part of the numeric tower
    return type(x) in (int, float)

def _numbers(name: str, args: list[Any]) -> list[Any]:
    for x in args:
        if not is_number(x):
            raise IotaTypeError(f"All arguments to {name} must be numbers, got {x!r}")
    return args

def _exactly(name: str, n: int, args: list[Any]) -> None:
    if len(args) != n:
        raise IotaArityError(f"{name} requires exactly {n} argument(s), got {len(args)}")

def _list_arg(name: str, x: Any) -> list[Any]:
    if not isinstance(x, list):
        raise IotaTypeError(f"Argument to {name} must be a list, got {x!r}")
    return x

# -------------------------------
# Arithmetic
# -------------------------------
# int op int stays int and any float operand widens the result, which is
# exactly the two-tier tower; only division is always inexact.
def _fold(name: str, op: Callable[[Any, Any], Any], args: list[Any]) -> Any:
    try:
        return reduce(op, _numbers(name, args))
    except OverflowError as e:
        raise IotaArithmeticError(f"{name}: {e}") from e

def add(args: list[Any]) -> Any:
    return _fold("+", lambda a, b: a + b, args) if args else 0

def sub(args: list[Any]) -> Any:
    if not args:
        raise IotaArityError("- requires at least 1 argument")
    return _fold("-", lambda a, b: a - b, args)

def mul(args: list[Any]) -> Any:
    return _fold("*", lambda a, b: a * b, args) if args else 1

def _true_div(a: Any, b: Any) -> float:
    if b == 0:
        raise IotaDivisionByZero("Division by zero")
    return a / b

def div(args: list[Any]) -> Any:
    if not args:
        raise IotaArityError("/ requires at least 1 argument")
    return _fold("/", _true_div, args)

# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[Any, Any], bool]) -> Primitive:
    def compare(args: list[Any]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = name
    return compare

lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)
equals = _comparison("=", lambda a, b: a == b)

# -------------------------------
# List operations
# -------------------------------
def list_builtin(args: list[Any]) -> list[Any]:
    return list(args)

def car(args: list[Any]) -> Any:
    _exactly("car", 1, args)
    lst = _list_arg("car", args[0])
    if not lst:
        raise IotaEmptyList("car of empty list")
    return lst[0]

def cdr(args: list[Any]) -> list[Any]:
    _exactly("cdr", 1, args)
    return _list_arg("cdr", args[0])[1:]

def cons(args: list[Any]) -> list[Any]:
    _exactly("cons", 2, args)
    head, tail = args
    return [head] + _list_arg("cons", tail)

def length(args: list[Any]) -> int:
    _exactly("length", 1, args)
    return len(_list_arg("length", args[0]))

# -------------------------------
# Predicates and boolean logic
# -------------------------------
def logical_not(args: list[Any]) -> bool:
    _exactly("not", 1, args)
    return args[0] is False

def _predicate(name: str, test: Callable[[Any], bool]) -> Primitive:
    def predicate(args: list[Any]) -> bool:
        _exactly(name, 1, args)
        return test(args[0])
    predicate.__name__ = name
    return predicate

is_null = _predicate("null?", lambda x: isinstance(x, list) and not x)
is_number_p = _predicate("number?", is_number)
is_symbol = _predicate("symbol?", lambda x: isinstance(x, Symbol))
is_list = _predicate("list?", lambda x: isinstance(x, list))
procedure_p = _predicate("procedure?", lambda x: isinstance(x, Lambda) or callable(x))

# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: Mapping[str, Primitive] = MappingProxyType({
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    '=': equals,
    'list': list_builtin,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'length': length,
    'not': logical_not,
    'null?': is_null,
    'number?': is_number_p,
    'symbol?': is_symbol,
    'list?': is_list,
    'procedure?': procedure_p,
})


def standard_primitives() -> Mapping[str, Primitive]:
    return PRIMITIVES


def extend_primitives(extra: Mapping[str, Primitive],
                      base: Mapping[str, Primitive] = PRIMITIVES) -> Mapping[str, Primitive]:
    """Return a new read-only table with `extra` layered over `base`."""
    return MappingProxyType({**base, **extra})
