from bl.types.environment import Environment, NOT_FOUND
from bl.types.symbol import Symbol, SymbolTable


def test_intern_returns_same_instance():
    table = SymbolTable()
    a = table.intern("a")
    assert table.intern("a") is a
    assert table.intern("b") is not a
    assert "a" in table and "c" not in table
    assert len(table) == 2


def test_symbols_compare_by_identity():
    assert Symbol("x") != Symbol("x")
    assert SymbolTable().intern("x") is not SymbolTable().intern("x")
    assert str(SymbolTable().intern("x")) == "x"


def test_lookup_innermost_first():
    table = SymbolTable()
    x, y = table.intern("x"), table.intern("y")
    root = Environment()
    root.define(x, 1)
    root.define(y, 2)
    inner = root.extend([x], [10])
    assert inner.lookup(x) == 10
    assert inner.lookup(y) == 2
    assert root.lookup(x) == 1


def test_lookup_not_found():
    table = SymbolTable()
    env = Environment().extend([table.intern("a")], [1])
    assert env.lookup(table.intern("b")) is NOT_FOUND


def test_empty_list_binding_is_found():
    table = SymbolTable()
    x = table.intern("x")
    env = Environment()
    env.define(x, None)
    assert env.lookup(x) is None


def test_extend_pushes_one_frame():
    table = SymbolTable()
    root = Environment()
    frame = root.extend([table.intern("a"), table.intern("b")], [1, 2])
    assert frame.outer is root
    assert frame.depth() == 2
    assert root.vars == {}
    assert len(frame.vars) == 2


def test_env_repr():
    table = SymbolTable()
    env = Environment().extend([table.intern("a")], [1])
    assert repr(env) == "<Environment (a) depth=2>"
