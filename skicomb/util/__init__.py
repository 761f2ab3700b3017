import functools
import inspect
import logging
import os

LOG_LEVEL = int(os.environ.get('SKICOMB_LOG_LEVEL', 0))
LOG_LEVEL_ERROR = 0
LOG_LEVEL_WARNING = 1
LOG_LEVEL_INFO = 2
LOG_LEVEL_DEBUG = 3


class UnreachableError(RuntimeError):
    pass


def memoize_arg(fun):
    cache = {}

    @functools.wraps(fun)
    def memoized(arg):
        try:
            return cache[arg]
        except KeyError:
            result = fun(arg)
            cache[arg] = result
            return result

    return memoized


def memoize_args(fun):
    cache = {}

    @functools.wraps(fun)
    def memoized(*args):
        try:
            return cache[args]
        except KeyError:
            result = fun(*args)
            cache[args] = result
            return result

    return memoized


# ----------------------------------------------------------------------------
# Logging

LOG_LEVELS = {
    LOG_LEVEL_ERROR: logging.ERROR,
    LOG_LEVEL_WARNING: logging.WARNING,
    LOG_LEVEL_INFO: logging.INFO,
    LOG_LEVEL_DEBUG: logging.DEBUG,
}


class IndentingFormatter(logging.Formatter):

    def __init__(self):
        logging.Formatter.__init__(self, '%(indent)s %(message)s')
        self.min_indent = float('inf')

    def format(self, record):
        stack = inspect.stack()
        indent = len(stack)
        if indent < self.min_indent:
            self.min_indent = indent
        indent -= self.min_indent
        record.indent = ' ' * indent
        return logging.Formatter.format(self, record)


LOG = logging.getLogger('skicomb')
LOG.setLevel(LOG_LEVELS.get(LOG_LEVEL, logging.DEBUG))
handler = logging.StreamHandler()
handler.setFormatter(IndentingFormatter())
LOG.addHandler(handler)


def _logged(*format_args, **format_kwargs):
    formatters = dict(format_kwargs)
    for i, fmt in enumerate(format_args):
        formatters[i] = fmt

    def decorator(fun):

        @functools.wraps(fun)
        def decorated(*args, **kwargs):
            akwargs = []
            for i, arg in enumerate(args):
                arg = formatters.get(i, repr)(arg)
                akwargs.append(arg)
            for key, val in kwargs.items():
                val = formatters.get(key, repr)(val)
                akwargs.append('{}={}'.format(key, val))
            LOG.debug('{}({})'.format(fun.__name__, ', '.join(akwargs)))
            result = fun(*args, **kwargs)
            returns = formatters.get('returns', repr)(result)
            LOG.debug(' return {}'.format(returns))
            return result

        return decorated

    return decorator


def _not_logged(*args, **kwargs):
    return lambda fun: fun


logged = _logged if LOG.isEnabledFor(logging.DEBUG) else _not_logged
