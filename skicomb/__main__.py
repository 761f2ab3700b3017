import itertools

from parsable import parsable

from skicomb import lib
from skicomb.engine import evaluate
from skicomb.stlc import pretty
from skicomb.syntax import render, type_of

OPERATORS = {
    'not': (lib.not_, 1),
    'and': (lib.and_, 2),
    'or': (lib.or_, 2),
    'xor': (lib.xor, 2),
}


def _letter(flag):
    return 'T' if flag else 'F'


@parsable
def show(name):
    """Print a library combinator as a fully parenthesized term."""
    result = render(lib.lookup(name))
    print(result)
    return result


@parsable
def types():
    """Print every library combinator with its principal type."""
    width = max(len(name) for name in lib.LIBRARY)
    lines = []
    for name, term in lib.LIBRARY.items():
        line = '{} : {}'.format(name.ljust(width), pretty(type_of(term)))
        print(line)
        lines.append(line)
    return lines


@parsable
def table(op='and'):
    """Print the truth table of a boolean operator.

    Args:
        op: one of 'not', 'and', 'or', 'xor'

    """
    if op not in OPERATORS:
        raise ValueError(
            'Unknown operator {}, try one of: {}'.format(
                op, ', '.join(OPERATORS)))
    term, arity = OPERATORS[op]
    fun = evaluate(term)
    rows = []
    for args in itertools.product([True, False], repeat=arity):
        result = fun
        for arg in args:
            result = result(lib.encode_bool(arg))
        row = ''.join(map(_letter, args)) + ' ' + _letter(lib.decode_bool(result))
        print(row)
        rows.append(row)
    return rows


if __name__ == '__main__':
    parsable()
