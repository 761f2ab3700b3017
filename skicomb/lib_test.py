import itertools

import hypothesis
import hypothesis.strategies as s
import pytest

from skicomb import lib
from skicomb.engine import evaluate
from skicomb.stlc import TVAR, Bool, arrow, is_instance, pretty
from skicomb.syntax import render, type_of
from skicomb.util.testing import for_each

a = TVAR('a')

BOOLS = list(itertools.product([True, False], repeat=2))


def boom(*args):
    raise AssertionError('Forced an operand that was not selected')


def pair(x):
    return lambda y: (x, y)


@for_each([
    ('comp', '((S (K S)) K)'),
    ('flip', '((S ((S (K ((S (K S)) K))) S)) (K K))'),
    ('rev', '(((S ((S (K ((S (K S)) K))) S)) (K K)) I)'),
    ('true', 'K'),
    ('false', '(K I)'),
])
def test_render(name, expected):
    assert render(lib.lookup(name)) == expected


@for_each([
    ('comp', '(a -> b) -> (c -> a) -> c -> b'),
    ('flip', '(a -> b -> c) -> b -> a -> c'),
    ('rev', 'a -> (a -> b) -> b'),
    ('rotr', 'a -> (b -> a -> c) -> b -> c'),
    ('rotv', 'a -> b -> (a -> b -> c) -> c'),
    ('join', '(a -> a -> b) -> a -> b'),
    ('true', 'a -> b -> a'),
    ('false', 'a -> b -> b'),
    ('not', '(a -> b -> c) -> b -> a -> c'),
    ('and', '(a -> (b -> c -> c) -> d) -> a -> d'),
    ('or', '((a -> b -> a) -> c) -> c'),
    ('xor', '((a -> b -> c) -> (b -> a -> c) -> d) -> (b -> a -> c) -> d'),
])
def test_principal_type(name, expected):
    assert pretty(type_of(lib.lookup(name))) == expected


@for_each(['true', 'false', 'not', 'and', 'or', 'xor'])
def test_bool_types(name):
    typ = type_of(lib.lookup(name))
    if name in ('true', 'false'):
        assert is_instance(Bool(a), typ)
    elif name == 'not':
        assert is_instance(arrow(Bool(a), Bool(a)), typ)
    else:
        assert is_instance(arrow(Bool(Bool(a)), Bool(a), Bool(a)), typ)


def test_lookup_unknown():
    with pytest.raises(ValueError):
        lib.lookup('fix')


# ----------------------------------------------------------------------------
# Arrangement

@hypothesis.given(s.integers(), s.integers(), s.integers())
def test_comp_law(m, n, x):

    def f(u):
        return m * u

    def g(u):
        return u + n

    assert evaluate(lib.comp)(f)(g)(x) == f(g(x))


@hypothesis.given(s.integers(), s.text())
def test_flip_law(x, y):
    assert evaluate(lib.flip)(pair)(x)(y) == (y, x)


@hypothesis.given(s.integers())
def test_rev_law(x):
    assert evaluate(lib.rev)(x)(lambda u: u * 2) == x * 2


@hypothesis.given(s.integers(), s.text())
def test_rotr_law(x, y):
    assert evaluate(lib.rotr)(x)(pair)(y) == (y, x)


@hypothesis.given(s.integers(), s.text())
def test_rotv_law(x, y):
    assert evaluate(lib.rotv)(x)(y)(pair) == (x, y)


@hypothesis.given(s.integers())
def test_join_law(x):
    assert evaluate(lib.join)(pair)(x) == (x, x)


# ----------------------------------------------------------------------------
# Bool

def test_selection():
    assert evaluate(lib.true)('a')('b') == 'a'
    assert evaluate(lib.false)('a')('b') == 'b'
    assert evaluate(lib.not_)(evaluate(lib.true))('a')('b') == 'b'
    assert evaluate(lib.not_)(evaluate(lib.false))('a')('b') == 'a'


@for_each([True, False])
def test_encode_decode(flag):
    assert lib.decode_bool(lib.encode_bool(flag)) is flag


def test_decode_rejects_non_booleans():
    with pytest.raises(TypeError):
        lib.decode_bool(evaluate(lib.rotv))


@for_each([
    ('and', 'TFFF'),
    ('or', 'TTTF'),
    ('xor', 'FTTF'),
])
def test_truth_table(name, expected):
    fun = evaluate(lib.lookup(name))
    actual = ''.join(
        fun(lib.encode_bool(x))(lib.encode_bool(y))('T')('F')
        for x, y in BOOLS
    )
    assert actual == expected


def test_and_short_circuits():
    false = evaluate(lib.false)
    true = evaluate(lib.true)
    assert evaluate(lib.and_)(false)(boom)('T')('F') == 'F'
    assert evaluate(lib.and_)(true)(boom) is boom


def test_or_short_circuits():
    false = evaluate(lib.false)
    true = evaluate(lib.true)
    assert evaluate(lib.or_)(true)(boom)('T')('F') == 'T'
    assert evaluate(lib.or_)(false)(boom) is boom


def test_branch_forces_only_selected():
    assert lib.branch(lib.encode_bool(True), lambda: 'then', boom) == 'then'
    assert lib.branch(lib.encode_bool(False), boom, lambda: 'else') == 'else'
