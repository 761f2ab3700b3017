import inspect

import pytest


def for_each(examples):
    def decorator(fun):
        args, vargs, kwargs, defaults = inspect.getfullargspec(fun)[:4]
        if vargs or kwargs or defaults:
            raise TypeError(
                "\n  ".join(
                    [
                        f"Unsupported signature: {fun}",
                        f"args = {args}",
                        f"vargs = {vargs}",
                        f"kwargs = {kwargs}",
                        f"defaults = {defaults}",
                    ]
                )
            )
        argnames = ",".join(args)
        return pytest.mark.parametrize(argnames, examples)(fun)

    return decorator
