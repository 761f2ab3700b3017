"""Hypothesis strategies for well-typed terms."""

import hypothesis.strategies as s

from skicomb.syntax import APP, I, K, S, IllTypedApplication


def try_app(lhs, rhs):
    """Apply lhs to rhs, or fall back to K lhs rhs which always typechecks."""
    try:
        return APP(lhs, rhs)
    except IllTypedApplication:
        return APP(APP(K, lhs), rhs)


s_atoms = s.one_of(
    s.just(S),
    s.just(K),
    s.just(I),
)


def s_terms_extend(terms):
    return s.builds(try_app, terms, terms)


s_terms = s.recursive(s_atoms, s_terms_extend, max_leaves=16)
