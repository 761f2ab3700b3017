"""Typed SKI terms.

A term is one of the atoms S, K, I or an application APP(lhs, rhs), written
infix as lhs @ rhs (left associative). Terms are hash-consed tuples, so equal
terms are identical. Every application is type checked as it is built, so
every term that exists has a principal simple type.
"""

import sys

from skicomb import stlc
from skicomb.stlc import TVAR, arrow, canonicalize, fresh, instantiate, resolve
from skicomb.util import UnreachableError, logged, memoize_arg, memoize_args


class Term(tuple):
    def __repr__(self):
        if len(self) == 1:
            return self[0]
        return '{}({})'.format(self[0], ', '.join(repr(a) for a in self[1:]))

    def __str__(self):
        return render(self)

    def __matmul__(lhs, rhs):
        if not isinstance(rhs, Term):
            return NotImplemented
        return APP(lhs, rhs)

    @staticmethod
    @memoize_args
    def _make(*args):
        return Term(args)


class IllTypedApplication(TypeError):
    """Raised when APP(lhs, rhs) would not be well typed."""

    def __init__(self, lhs, rhs, reason):
        self.lhs = lhs
        self.rhs = rhs
        self.lhs_type = type_of(lhs)
        self.rhs_type = type_of(rhs)
        self.reason = reason
        super().__init__('\n  '.join([
            'Ill-typed application',
            'function: {} : {}'.format(render(lhs), stlc.pretty(self.lhs_type)),
            'argument: {} : {}'.format(render(rhs), stlc.pretty(self.rhs_type)),
            str(reason),
        ]))


_APP = sys.intern('APP')

S = Term._make(sys.intern('S'))
K = Term._make(sys.intern('K'))
I = Term._make(sys.intern('I'))  # noqa: E741

ATOMS = (S, K, I)

_a = TVAR('a')
_b = TVAR('b')
_c = TVAR('c')
_ATOM_TYPES = {
    S: arrow(arrow(_a, _b, _c), arrow(_a, _b), _a, _c),
    K: arrow(_a, _b, _a),
    I: arrow(_a, _a),
}


def is_atom(term):
    assert isinstance(term, Term), term
    return len(term) == 1


def is_app(term):
    assert isinstance(term, Term), term
    return term[0] is _APP


def APP(lhs, rhs):
    if not isinstance(lhs, Term):
        raise TypeError('Expected a term, got {!r}'.format(lhs))
    if not isinstance(rhs, Term):
        raise TypeError('Expected a term, got {!r}'.format(rhs))
    _apply_type(lhs, rhs)
    return Term._make(_APP, lhs, rhs)


# ----------------------------------------------------------------------------
# Types

@memoize_args
@logged(str, str, returns=stlc.pretty)
def _apply_type(lhs, rhs):
    """Principal type of lhs applied to rhs."""
    result = fresh()
    expected = arrow(instantiate(type_of(rhs)), result)
    try:
        subst = stlc.unify(instantiate(type_of(lhs)), expected)
    except stlc.UnificationError as e:
        raise IllTypedApplication(lhs, rhs, e) from e
    return canonicalize(resolve(result, subst))


def type_of(term):
    """Canonical principal type of a term."""
    if not isinstance(term, Term):
        raise TypeError('Expected a term, got {!r}'.format(term))
    return _type_of(term)


# Plain tuples compare equal to terms, so type checks stay outside the cache.
@memoize_arg
def _type_of(term):
    if is_atom(term):
        if term not in _ATOM_TYPES:
            raise UnreachableError(term)
        return _ATOM_TYPES[term]
    elif is_app(term):
        return _apply_type(term[1], term[2])
    raise UnreachableError(term)


def annotate(term, typ):
    """Check that typ is an instance of the principal type of term."""
    principal = type_of(term)
    if not stlc.is_instance(typ, principal):
        raise TypeError('{} : {} has no instance {}'.format(
            render(term), stlc.pretty(principal), stlc.pretty(typ)))
    return term


# ----------------------------------------------------------------------------
# Printing

def render(term):
    """Print a term fully parenthesized, e.g. ((S K) K)."""
    if not isinstance(term, Term):
        raise TypeError('Expected a term, got {!r}'.format(term))
    return _render(term)


@memoize_arg
def _render(term):
    if is_atom(term):
        return term[0]
    elif is_app(term):
        return '({} {})'.format(_render(term[1]), _render(term[2]))
    raise UnreachableError(term)


# ----------------------------------------------------------------------------
# Complexity

@memoize_arg
def size(term):
    """Number of atoms in a term."""
    if is_atom(term):
        return 1
    return size(term[1]) + size(term[2])


@memoize_arg
def depth(term):
    if is_atom(term):
        return 0
    return 1 + max(depth(term[1]), depth(term[2]))
