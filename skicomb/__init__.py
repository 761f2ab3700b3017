"""Typed SKI combinator calculus: terms, evaluation and printing."""

from skicomb.engine import evaluate
from skicomb.sugar import combinator, compile_
from skicomb.syntax import APP, I, K, S, IllTypedApplication, Term, render, type_of

__all__ = [
    'APP',
    'I',
    'IllTypedApplication',
    'K',
    'S',
    'Term',
    'combinator',
    'compile_',
    'evaluate',
    'render',
    'type_of',
]
