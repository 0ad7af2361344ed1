import pytest

from golp.builtin.env_builtin import add, sub, mul, lte, wrap_int64, BUILTINS
from golp.types.errors import GolpTypeMismatch
from golp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(+ 5)", 5),
        ("(*)", 1),
        ("(* )", 1),
        ("(* 2 3 4)", 24),
        ("(-)", 0),
        ("(- 5)", -5),
        ("(- 10 1 2)", 7),
        ("(- -10 -5)", -5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+ 0x10 0b11 010)", 27),
    ]
)
def test_integer_arithmetic(env, run, source, expected):
    assert run(env, source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(<= 1 2 2 3)", True),
        ("(<= 3 2)", False),
        ("(<= 1 3 2)", False),
        ("(<= 4)", True),
        ("(<=)", True),
        ("(<= -5 0 5)", True),
    ]
)
def test_non_decreasing(env, run, source, expected):
    assert run(env, source) is expected


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 true)",
        "(+ 1 2.5)",
        "(- false)",
        "(* 2 (quote x))",
        "(<= 1 (quote (2)))",
        "(+ 1 +)",
    ]
)
def test_non_integer_arguments_are_rejected(env, run, source):
    with pytest.raises(GolpTypeMismatch):
        run(env, source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 9223372036854775807 1)", -9223372036854775808),
        ("(- -9223372036854775808 1)", 9223372036854775807),
        ("(- -9223372036854775808)", -9223372036854775808),
        ("(* 4611686018427387904 2)", -9223372036854775808),
    ]
)
def test_overflow_wraps_to_int64(env, run, source, expected):
    assert run(env, source) == expected


def test_wrap_int64():
    assert wrap_int64(0) == 0
    assert wrap_int64(-1) == -1
    assert wrap_int64(1 << 63) == -(1 << 63)
    assert wrap_int64(1 << 64) == 0


def test_builtins_called_directly(env):
    assert add(env, [1, 2]) == 3
    assert sub(env, [1]) == -1
    assert mul(env, []) == 1
    assert lte(env, [1, 1]) is True


def test_builtin_table():
    assert set(BUILTINS) == {Symbol("+"), Symbol("-"), Symbol("*"), Symbol("<=")}


def test_root_environment_has_builtins(env):
    assert env.lookup(Symbol("+")) is add
    assert env.lookup(Symbol("<=")) is lte
