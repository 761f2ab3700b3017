"""DSL compiling Python lambdas to SKI terms by abstraction elimination."""

import functools
import inspect

from skicomb.syntax import APP, I, K, S, Term
from skicomb.util import LOG


# ----------------------------------------------------------------------------
# Open expressions

class _Open(object):
    """Base of expressions that may mention symbolic variables."""
    __slots__ = []

    def __call__(*args):
        return app(*args)

    def __matmul__(lhs, rhs):
        return app(lhs, rhs)

    def __rmatmul__(rhs, lhs):
        return app(lhs, rhs)


class Var(_Open):
    __slots__ = ['name']

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return 'Var({!r})'.format(self.name)

    def __str__(self):
        return self.name


class App(_Open):
    __slots__ = ['lhs', 'rhs']

    def __init__(self, lhs, rhs):
        self.lhs = lhs
        self.rhs = rhs

    def __repr__(self):
        return 'App({!r}, {!r})'.format(self.lhs, self.rhs)

    def __str__(self):
        return '({} {})'.format(self.lhs, self.rhs)


def free_vars(expr):
    if isinstance(expr, Term):
        return frozenset()
    elif isinstance(expr, Var):
        return frozenset([expr])
    elif isinstance(expr, App):
        return free_vars(expr.lhs) | free_vars(expr.rhs)
    raise ValueError(expr)


# ----------------------------------------------------------------------------
# Abstraction

def _try_abstract(var, body):
    """Returns abstraction if var occurs in body, else None."""
    if body is var:
        return I  # Rule I
    elif isinstance(body, App):
        lhs_abs = _try_abstract(var, body.lhs)
        rhs_abs = _try_abstract(var, body.rhs)
        if lhs_abs is None:
            if rhs_abs is None:
                return None  # Rule K
            elif body.rhs is var:
                return body.lhs  # Rule eta
            else:
                return app(S, app(K, body.lhs), rhs_abs)  # Rule B
        else:
            if rhs_abs is None:
                return app(S, lhs_abs, app(K, body.rhs))  # Rule C
            else:
                return app(S, lhs_abs, rhs_abs)  # Rule S
    else:
        return None  # Rule K


def abstract(var, body):
    """Eliminate var from body, returning an expression free of var."""
    assert isinstance(var, Var), var
    result = _try_abstract(var, body)
    if result is None:
        result = app(K, body)  # Rule K
    LOG.debug('abstract {} in {} = {}'.format(var, body, result))
    return result


# ----------------------------------------------------------------------------
# Compiler

def _compile(fun):
    """Convert a Python function to an expression via Higher Order Abstract
    Syntax; the result may mention variables of enclosing functions."""
    args, vargs, kwargs, defaults = inspect.getfullargspec(fun)[:4]
    if vargs or kwargs or defaults:
        raise SyntaxError('Unsupported signature: {}'.format(fun))
    symbolic_args = list(map(Var, args))
    body = as_expr(fun(*symbolic_args))
    LOG.debug('compiling {}{} = {}'.format(
        fun.__name__, tuple(map(str, symbolic_args)), body))
    for var in reversed(symbolic_args):
        body = abstract(var, body)
    return body


def compile_(fun):
    """Compile a closed Python function to a well-typed term.

    Raises:
      SyntaxError if the function mentions unbound variables.
      IllTypedApplication if the function has no simple type, e.g. x(x).
    """
    expr = _compile(fun)
    if not isinstance(expr, Term):
        free = sorted(v.name for v in free_vars(expr))
        raise SyntaxError('Unbound variables: {}'.format(' '.join(free)))
    return expr


class _Combinator(object):
    """Class for results of the @combinator decorator.

    Compilation is deferred to first use. Combinators cannot refer to
    themselves: simple types admit no fixed point.
    """

    def __init__(self, fun):
        functools.update_wrapper(self, fun)
        self._fun = fun
        self._compiling = False

    def __repr__(self):
        return repr(self.term)

    def __str__(self):
        return self.__name__

    def __call__(self, *args):
        return app(self.term, *args)

    def __matmul__(lhs, rhs):
        return app(lhs, rhs)

    def __rmatmul__(rhs, lhs):
        return app(lhs, rhs)

    @property
    def term(self):
        try:
            return self._term
        except AttributeError:
            self._compile()
            return self._term

    def _compile(self):
        if self._compiling:
            raise SyntaxError('Recursive combinator: {}'.format(self.__name__))
        self._compiling = True
        try:
            self._term = compile_(self._fun)
        finally:
            self._compiling = False


def combinator(arg):
    if isinstance(arg, _Combinator):
        return arg
    if not callable(arg):
        raise SyntaxError('Cannot apply @combinator to {}'.format(arg))
    return _Combinator(arg)


def as_expr(arg):
    if isinstance(arg, (Term, _Open)):
        return arg
    elif isinstance(arg, _Combinator):
        return arg.term
    elif callable(arg):
        return _compile(arg)
    raise SyntaxError('Cannot convert to term: {!r}'.format(arg))


# ----------------------------------------------------------------------------
# Sugar

def app(*args):
    """Left-associated application of terms and open expressions."""
    args = list(map(as_expr, args))
    if not args:
        raise SyntaxError('Too few arguments: app{}'.format(tuple(args)))
    result = args[0]
    for arg in args[1:]:
        if isinstance(result, Term) and isinstance(arg, Term):
            result = APP(result, arg)
        else:
            result = App(result, arg)
    return result


Term.__call__ = app
