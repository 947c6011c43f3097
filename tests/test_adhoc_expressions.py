import math

import pytest

from iota import run
from iota.builtin.primitives import extend_primitives
from iota.interpreter import Interpreter, standard_env
from iota.types.symbol import Symbol
from iota.types.lambda_fn import Lambda
from iota.errors import (
    IotaSyntaxError,
    IotaUnexpectedEOF,
    IotaEmptyList,
    IotaDivisionByZero,
    IotaUnboundSymbol,
    IotaProcedureNotFound,
)

programs = [
    ("(+ 1 2 3 (+ 4 5) 6)", 21),
    ("(- (/ (* 1 2 3 4 5) 6) 7)", 13.0),
    ("(define r 10)(* pi (* r r))", 314.1592653589793),
    ('''
      (begin
        (define circle-area (lambda (r) (* pi (* r r))))
        (circle-area 3))
     ''', 28.274333882308138),
    ("(if (> (* 11 11) 120) #t #f)", True),
    ('''
      (define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))
      (fact 10)
     ''', 3628800),
    ("(list 0 1 2 3 0 0)", [0, 1, 2, 3, 0, 0]),
    ("(car (list 0 1 2 3 0 0))", 0),
    ("(cdr (cdr (list 0 1 2 3 0 0)))", [2, 3, 0, 0]),
    ('''
      (define twice (lambda (x) (* 2 x)))
      (twice 5)
     ''', 10),
    ('''
      (define twice (lambda (x) (* 2 x)))
      (define repeat (lambda (f) (lambda (x) (f (f x)))))
      ((repeat (repeat twice)) 10)
     ''', 160),
    ('''
      (define count (lambda (item L) (if (null? L) 0 (+ (if (= item (car L)) 1 0) (count item (cdr L))))))
      (count 0 (list 0 1 2 3 0 0))
     ''', 3),
    ('''
      (define fib (lambda (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))
      (fib 15)
     ''', 610),
]


@pytest.mark.parametrize("program,expected", programs)
def test_programs(program, expected):
    result = run(program)
    assert result == expected
    assert type(result) is type(expected)


def test_repeat_is_a_closure():
    result = run('''
        (define repeat (lambda (f) (lambda (x) (f (f x)))))
        repeat
    ''')
    assert isinstance(result, Lambda)


def test_result_is_last_form():
    assert run("1 2 3") == 3
    assert run("(define a 1)") is None


def test_run_uses_a_fresh_environment():
    run("(define leaked 1)")
    with pytest.raises(IotaUnboundSymbol):
        run("leaked")


def test_interpreter_threads_environment_between_calls(interp):
    interp.eval("(define r 10)")
    assert interp.eval("(* pi (* r r))") == 314.1592653589793


def test_syntax_error_aborts_before_evaluation(interp):
    with pytest.raises(IotaSyntaxError):
        interp.eval("(define ok 1) (define broken")
    with pytest.raises(IotaUnboundSymbol):
        interp.eval("ok")


def test_interpreter_survives_errors(interp):
    with pytest.raises(IotaUnboundSymbol):
        interp.eval("nope")
    with pytest.raises(IotaProcedureNotFound):
        interp.eval("(nope 1)")
    assert interp.eval("(+ 1 1)") == 2


def test_interpreter_with_injected_table_and_env():
    table = extend_primitives({"twice": lambda args: args[0] * 2})
    env = standard_env()
    interp = Interpreter(primitives=table, env=env)
    assert interp.eval("(define x (twice 21)) x") == 42
    assert env.lookup(Symbol("x")) == 42
    with pytest.raises(IotaProcedureNotFound):
        Interpreter().eval("(twice 1)")


@pytest.mark.parametrize(
    "program,error",
    [
        ("(", IotaSyntaxError),
        ("", IotaUnexpectedEOF),
        ("   ", IotaUnexpectedEOF),
        ("(car (list))", IotaEmptyList),
        ("(/ 1 0)", IotaDivisionByZero),
        ("undefined", IotaUnboundSymbol),
        ("(undefined 1 2)", IotaProcedureNotFound),
    ]
)
def test_boundary_errors(program, error):
    with pytest.raises(error):
        run(program)


def test_large_factorial_under_default_config(monkeypatch):
    monkeypatch.delenv("IOTA_RECURSION_LIMIT", raising=False)
    result = run('''
        (define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))
        (fact 500)
    ''')
    assert result == math.factorial(500)


@pytest.mark.parametrize("depth", [150, 300, 500])
def test_deep_recursion_under_default_config(monkeypatch, depth):
    monkeypatch.delenv("IOTA_RECURSION_LIMIT", raising=False)
    result = run(f'''
        (define sum-to (lambda (n) (if (= n 0) 0 (+ n (sum-to (- n 1))))))
        (sum-to {depth})
    ''')
    assert result == depth * (depth + 1) // 2


def test_unbounded_recursion_is_not_an_iota_error():
    with pytest.raises(RecursionError):
        run("(define loop (lambda (n) (loop n))) (loop 1)")
