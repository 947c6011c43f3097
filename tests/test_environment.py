import math

import pytest

from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.interpreter import standard_env
from iota.errors import IotaUnboundSymbol, IotaInvalidSymbol


def test_define_then_lookup():
    env = Environment()
    env.define(Symbol("a"), 1)
    assert env.lookup(Symbol("a")) == 1


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("a"), 1)
    inner = root.child().child()
    assert inner.lookup(Symbol("a")) == 1
    assert inner.find(Symbol("a")) is root


def test_define_shadows_without_mutating_outer():
    root = Environment()
    root.define(Symbol("a"), 1)
    inner = root.child()
    inner.define(Symbol("a"), 2)
    assert inner.lookup(Symbol("a")) == 2
    assert root.lookup(Symbol("a")) == 1


def test_child_bindings_are_invisible_to_parent():
    root = Environment()
    root.child().define(Symbol("b"), 1)
    with pytest.raises(IotaUnboundSymbol):
        root.lookup(Symbol("b"))


def test_later_parent_definitions_are_visible_to_children():
    root = Environment()
    inner = root.child()
    root.define(Symbol("late"), 3)
    assert inner.lookup(Symbol("late")) == 3


def test_unbound_symbol():
    with pytest.raises(IotaUnboundSymbol):
        Environment().lookup(Symbol("missing"))
    assert Environment().find(Symbol("missing")) is None


def test_define_requires_symbol():
    with pytest.raises(IotaInvalidSymbol):
        Environment().define("a", 1)  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["", "a b", "tab\tname", "(a", "a)", 42, None])
def test_malformed_symbol_name(name):
    with pytest.raises(IotaInvalidSymbol):
        Symbol(name)  # type: ignore[arg-type]


def test_symbols_compare_by_name():
    assert Symbol("x") == Symbol("x")
    assert Symbol("x") != Symbol("y")
    assert Symbol("x") != "x"
    assert Symbol("#t").id is Symbol("#t").id
    assert str(Symbol("car")) == "car"
    assert repr(Symbol("car")) == "Symbol('car')"


def test_none_is_a_valid_binding():
    env = Environment()
    env.define(Symbol("nothing"), None)
    assert env.lookup(Symbol("nothing")) is None


def test_update_and_depth():
    root = Environment()
    root.update({Symbol("a"): 1, Symbol("b"): 2})
    assert root.lookup(Symbol("b")) == 2
    assert root.depth() == 0
    assert root.child().child().depth() == 2


def test_string_views():
    root = Environment()
    root.define(Symbol("a"), 1)
    inner = root.child()
    inner.define(Symbol("b"), 2)
    assert str(root) == "{a: 1}"
    assert str(inner) == "{b: 2} -> ..."
    assert repr(inner) == "<Environment chain: {b: 2} -> {a: 1}>"


def test_standard_env_constants():
    env = standard_env()
    assert env.lookup(Symbol("pi")) == math.pi
    assert env.lookup(Symbol("#t")) is True
    assert env.lookup(Symbol("#f")) is False
    assert env.outer is None


def test_standard_envs_are_independent():
    a, b = standard_env(), standard_env()
    a.define(Symbol("x"), 1)
    assert b.find(Symbol("x")) is None


def test_symbols_are_interned_values():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
    assert str(Symbol("abc")) == "abc"
    assert repr(Symbol("abc")) == "Symbol('abc')"
