"""Evaluation of SKI terms to curried Python functions.

Evaluation is structural: atoms denote fixed functions and APP denotes
function application, so it terminates on every term. Denoted functions
never call an operand unless the combinator equation applies it. In
particular K never touches its second argument and a Church boolean never
touches the branch it does not select; a host value that would raise when
called is therefore safe to pass in an unselected position.

Host computations that must not run eagerly can be wrapped with delay()
and run with force().
"""

from skicomb.syntax import I, K, S, Term, is_app, is_atom
from skicomb.util import UnreachableError, logged, memoize_arg

__all__ = ['evaluate', 'delay', 'force', 'Thunk']


def _I(x):
    return x


def _K(x):
    return lambda y: x


def _S(p):
    return lambda f: lambda x: p(x)(f(x))


_DENOTATIONS = {
    I: _I,
    K: _K,
    S: _S,
}


def evaluate(term):
    """Denoted Python value of a term."""
    if not isinstance(term, Term):
        raise TypeError('Expected a term, got {!r}'.format(term))
    return _evaluate(term)


@memoize_arg
@logged(str)
def _evaluate(term):
    if is_atom(term):
        if term not in _DENOTATIONS:
            raise UnreachableError(term)
        return _DENOTATIONS[term]
    elif is_app(term):
        fun = _evaluate(term[1])
        arg = _evaluate(term[2])
        return fun(arg)
    raise UnreachableError(term)


# ----------------------------------------------------------------------------
# Thunks

class Thunk(object):
    """A deferred zero-argument computation, run at most once."""
    __slots__ = ['_fun', '_value']

    def __init__(self, fun):
        self._fun = fun

    def __call__(self):
        if self._fun is not None:
            self._value = self._fun()
            self._fun = None
        return self._value

    def __repr__(self):
        state = 'pending' if self._fun is not None else 'forced'
        return 'Thunk({})'.format(state)


def delay(fun):
    if isinstance(fun, Thunk):
        return fun
    if not callable(fun):
        raise TypeError('Cannot delay a non-callable: {!r}'.format(fun))
    return Thunk(fun)


def force(value):
    if isinstance(value, Thunk):
        return value()
    return value
