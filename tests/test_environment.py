import pytest

from golp.types.environment import Environment
from golp.types.errors import GolpInvalidSymbol, GolpUnboundVariable
from golp.types.nil import Nil
from golp.types.symbol import Symbol

X = Symbol("x")
Y = Symbol("y")


@pytest.fixture
def chain():
    root = Environment()
    root.define(X, 1)
    child = Environment(outer=root)
    child.define(Y, 2)
    return root, child


def test_find_returns_nearest_binding_frame(chain):
    root, child = chain
    assert child.find(Y) is child
    assert child.find(X) is root
    assert root.find(Y) is None
    assert child.find(Symbol("z")) is None


def test_get_reads_local_frame(chain):
    root, child = chain
    assert child.find(X).get(X) == 1
    with pytest.raises(KeyError):
        child.get(X)


def test_define_shadows_locally(chain):
    root, child = chain
    child.define(X, 10)
    assert child.lookup(X) == 10
    assert root.lookup(X) == 1


def test_set_mutates_owning_frame(chain):
    root, child = chain
    child.set(X, 5)
    assert root.vars[X] == 5
    assert X not in child.vars


def test_set_unbound_raises(chain):
    _, child = chain
    with pytest.raises(GolpUnboundVariable):
        child.set(Symbol("z"), 0)


def test_define_requires_symbol():
    with pytest.raises(GolpInvalidSymbol):
        Environment().define("x", 1)


def test_lookup_miss_policy():
    assert Environment().lookup(X) is Nil
    with pytest.raises(GolpUnboundVariable):
        Environment(strict=True).lookup(X)


def test_strict_policy_is_inherited():
    root = Environment(strict=True)
    assert Environment(outer=Environment(outer=root)).strict is True
    assert Environment(outer=Environment()).strict is False


def test_for_call_zips_positionally(chain):
    root, _ = chain
    a, b, c = Symbol("a"), Symbol("b"), Symbol("c")
    frame = Environment.for_call([a, b, c], [1, 2], root)
    assert frame.outer is root
    assert frame.vars == {a: 1, b: 2}
    frame = Environment.for_call([a], [1, 2, 3], root)
    assert frame.vars == {a: 1}


def test_update(chain):
    _, child = chain
    child.update({Symbol("p"): 1, Symbol("q"): 2})
    assert child.lookup(Symbol("q")) == 2


def test_symbol_identity():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("ABC")
    assert Symbol("abc") != "abc"
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
