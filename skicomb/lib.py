"""Standard library of combinators built from S, K, I.

Every constant is checked against its documented type at import time.
Derivations are written as chains of abstraction steps; sugar.compile_
performs the same steps mechanically (see sugar_test.py).

Booleans are Church selectors: true x y = x and false x y = y. Their types
are instances at one payload type a, since (forall a. Bool a) cannot be
expressed by simple types.
"""

from collections import OrderedDict

from skicomb.engine import delay, evaluate, force
from skicomb.stlc import TVAR, Bool, arrow
from skicomb.syntax import I, K, S, annotate

a = TVAR('a')
b = TVAR('b')
c = TVAR('c')


# ----------------------------------------------------------------------------
# Arrangement

# \f g x. f (g x)
#   = \f g x. K f x (g x)
#   = \f g. S (K f) g
#   = \f. S (K f)
#   = S (K S) K
comp = annotate(S @ (K @ S) @ K, arrow(arrow(b, c), arrow(a, b), a, c))

# \p x y. p y x
#   = \p x y. p y (K x y)
#   = \p x. S p (K x)
#   = \p. comp (S p) K
#   = \p. S (K comp) S p (K K p)
#   = S (S (K comp) S) (K K)
flip = annotate(
    S @ (S @ (K @ comp) @ S) @ (K @ K),
    arrow(arrow(a, b, c), b, a, c),
)

# \x f. f x = \x f. I f x = flip I
rev = annotate(flip @ I, arrow(a, arrow(a, b), b))

rotr = annotate(flip @ flip, arrow(a, arrow(c, a, b), c, b))

# \x y p. p x y = \x. flip (rev x) = comp flip rev
rotv = annotate(comp @ flip @ rev, arrow(a, b, arrow(a, b, c), c))

# \p x. p x x
#   = \p x. p x (I x)
#   = \p. S p I
#   = flip S I
join = annotate(flip @ S @ I, arrow(arrow(a, a, b), a, b))


# ----------------------------------------------------------------------------
# Bool

true = annotate(K, Bool(a))
false = annotate(K @ I, Bool(a))

not_ = annotate(flip, arrow(Bool(a), Bool(a)))

# \x y. x y false
#   = \x y. rev false (I x y)
#   = \x. comp (rev false) (I x)
#   = comp (comp (rev false)) I
and_ = annotate(
    comp @ (comp @ (rev @ false)) @ I,
    arrow(Bool(Bool(a)), Bool(a), Bool(a)),
)

# \x y. x true y = \x. rev true x = rev true
or_ = annotate(rev @ true, arrow(Bool(Bool(a)), Bool(a), Bool(a)))

# \x y. x (not y) y
#   = \x. join (\u v. x (not u) v)
#   = \x. join (comp x not)
#   = comp join (flip comp not)
xor = annotate(
    comp @ join @ (flip @ comp @ not_),
    arrow(Bool(Bool(a)), Bool(a), Bool(a)),
)


LIBRARY = OrderedDict([
    ('comp', comp),
    ('flip', flip),
    ('rev', rev),
    ('rotr', rotr),
    ('rotv', rotv),
    ('join', join),
    ('true', true),
    ('false', false),
    ('not', not_),
    ('and', and_),
    ('or', or_),
    ('xor', xor),
])


def lookup(name):
    try:
        return LIBRARY[name]
    except KeyError:
        raise ValueError('Unknown combinator {}, try one of: {}'.format(
            name, ', '.join(LIBRARY)))


# ----------------------------------------------------------------------------
# Host interface

def encode_bool(flag):
    """Evaluated selector for a Python bool."""
    return evaluate(true if flag else false)


def decode_bool(selector):
    """Python bool selected by an evaluated boolean."""
    result = selector(True)(False)
    if not isinstance(result, bool):
        raise TypeError('Not a boolean selector: {!r}'.format(selector))
    return result


def branch(selector, then, else_):
    """Lazy if-else: only the selected computation is run."""
    return force(selector(delay(then))(delay(else_)))
