import logging

from skicomb.util import _logged, memoize_arg, memoize_args


def test_memoize_arg():
    calls = []

    @memoize_arg
    def square(x):
        calls.append(x)
        return x * x

    assert square(3) == 9
    assert square(3) == 9
    assert calls == [3]


def test_memoize_args():
    calls = []

    @memoize_args
    def add(x, y):
        calls.append((x, y))
        return x + y

    assert add(1, 2) == 3
    assert add(1, 2) == 3
    assert add(2, 1) == 3
    assert calls == [(1, 2), (2, 1)]


def test_logged(caplog):

    @_logged(str, returns=str)
    def double(x):
        return 2 * x

    with caplog.at_level(logging.DEBUG, logger='skicomb'):
        assert double(3) == 6
    messages = [record.getMessage() for record in caplog.records]
    assert 'double(3)' in messages
    assert ' return 6' in messages
