"""Simple types for SKI terms.

Types are immutable tuples, either TVAR(name) or ARROW(dom, cod). A closed
term has a principal type whose variables are implicitly quantified at the
top level only. There is no way to write (forall a. Bool a) in argument
position, so a boolean passed to an operator is used at one payload type.

Substitutions are persistent maps from type variables to types.
"""

import itertools
import re
import sys
from typing import FrozenSet, Optional

from immutables import Map

from skicomb.util import UnreachableError


class Type(tuple):
    def __repr__(self):
        if self[0] is _TVAR:
            return 'TVAR({!r})'.format(self[1])
        return 'ARROW({!r}, {!r})'.format(self[1], self[2])

    def __str__(self):
        return pretty(self)


class UnificationError(TypeError):
    def __init__(self, lhs, rhs, message=None):
        self.lhs = lhs
        self.rhs = rhs
        if message is None:
            message = 'Cannot unify {} with {}'.format(pretty(lhs), pretty(rhs))
        super().__init__(message)


class OccursError(UnificationError):
    def __init__(self, var, typ):
        message = 'Cannot construct infinite type {} = {}'.format(
            pretty(var), pretty(typ))
        super().__init__(var, typ, message)


_TVAR = sys.intern('TVAR')
_ARROW = sys.intern('ARROW')
re_tvar = re.compile(r'[a-z][a-z0-9]*$')

EMPTY_SUBST = Map()


def TVAR(name: str) -> Type:
    if not isinstance(name, str) or not re_tvar.match(name):
        raise ValueError('Invalid type variable name: {!r}'.format(name))
    return Type((_TVAR, sys.intern(name)))


def ARROW(dom: Type, cod: Type) -> Type:
    assert isinstance(dom, Type), dom
    assert isinstance(cod, Type), cod
    return Type((_ARROW, dom, cod))


def arrow(*types: Type) -> Type:
    """Right-associated function type: arrow(a, b, c) is a -> (b -> c)."""
    if not types:
        raise TypeError('Too few arguments: arrow()')
    result = types[-1]
    for typ in reversed(types[:-1]):
        result = ARROW(typ, result)
    return result


def Bool(a: Type) -> Type:
    """Church boolean selecting between two values of type a."""
    return arrow(a, a, a)


def is_tvar(typ):
    assert isinstance(typ, Type), typ
    return typ[0] is _TVAR


def is_arrow(typ):
    assert isinstance(typ, Type), typ
    return typ[0] is _ARROW


_fresh_ids = itertools.count()


def fresh() -> Type:
    # Fresh names start with an underscore, so never collide with TVAR names.
    return Type((_TVAR, '_{}'.format(next(_fresh_ids))))


def free_tvars(typ: Type) -> FrozenSet[Type]:
    if is_tvar(typ):
        return frozenset([typ])
    elif is_arrow(typ):
        return free_tvars(typ[1]) | free_tvars(typ[2])
    raise UnreachableError(typ)


def iter_tvars(typ):
    """Iterate over type variables in order of first appearance."""
    seen = set()
    pending = [typ]
    while pending:
        typ = pending.pop()
        if is_tvar(typ):
            if typ not in seen:
                seen.add(typ)
                yield typ
        else:
            pending.append(typ[2])
            pending.append(typ[1])


# ----------------------------------------------------------------------------
# Substitution

def _walk(typ, subst):
    while is_tvar(typ):
        bound = subst.get(typ)
        if bound is None:
            break
        typ = bound
    return typ


def resolve(typ: Type, subst: Map) -> Type:
    """Apply a substitution until no bound variable remains."""
    typ = _walk(typ, subst)
    if is_tvar(typ):
        return typ
    return ARROW(resolve(typ[1], subst), resolve(typ[2], subst))


def rename(typ: Type, names: Map) -> Type:
    """Rename variables simultaneously, without chasing bindings."""
    if is_tvar(typ):
        return names.get(typ, typ)
    return ARROW(rename(typ[1], names), rename(typ[2], names))


def instantiate(typ: Type) -> Type:
    """Replace every variable of a type scheme with a fresh variable."""
    names = Map({var: fresh() for var in iter_tvars(typ)})
    return rename(typ, names)


def _canonical_name(index):
    letter = chr(ord('a') + index % 26)
    suffix = index // 26
    return letter + str(suffix) if suffix else letter


def canonicalize(typ: Type) -> Type:
    """Rename variables to a, b, c, ... by order of first appearance."""
    names = Map({
        var: TVAR(_canonical_name(i))
        for i, var in enumerate(iter_tvars(typ))
    })
    return rename(typ, names)


# ----------------------------------------------------------------------------
# Unification

def _bind(var, typ, subst):
    if var in free_tvars(resolve(typ, subst)):
        raise OccursError(var, resolve(typ, subst))
    return subst.set(var, typ)


def unify(lhs: Type, rhs: Type, subst: Map = EMPTY_SUBST) -> Map:
    """Extend subst so that lhs and rhs become equal.

    Raises:
      OccursError if a variable would have to contain itself.
    """
    lhs = _walk(lhs, subst)
    rhs = _walk(rhs, subst)
    if lhs == rhs:
        return subst
    elif is_tvar(lhs):
        return _bind(lhs, rhs, subst)
    elif is_tvar(rhs):
        return _bind(rhs, lhs, subst)
    subst = unify(lhs[1], rhs[1], subst)
    return unify(lhs[2], rhs[2], subst)


def match(pattern: Type, typ: Type, subst: Map = EMPTY_SUBST) -> Optional[Map]:
    """One-way matching: a substitution s with s(pattern) == typ, or None.

    Variables of typ are treated as constants.
    """
    if is_tvar(pattern):
        bound = subst.get(pattern)
        if bound is None:
            return subst.set(pattern, typ)
        return subst if bound == typ else None
    elif not is_arrow(typ):
        return None
    subst = match(pattern[1], typ[1], subst)
    if subst is None:
        return None
    return match(pattern[2], typ[2], subst)


def is_instance(specific: Type, general: Type) -> bool:
    return match(general, specific) is not None


# ----------------------------------------------------------------------------
# Printing

def pretty(typ: Type) -> str:
    if is_tvar(typ):
        return typ[1]
    dom = pretty(typ[1])
    if is_arrow(typ[1]):
        dom = '({})'.format(dom)
    return '{} -> {}'.format(dom, pretty(typ[2]))
