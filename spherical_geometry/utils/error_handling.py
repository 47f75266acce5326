"""
Error handling utilities for spherical-geometry.

Provides decorators that turn degenerate input into a documented result
instead of an exception.
"""
import inspect
from functools import wraps
from typing import Any, Callable

from spherical_geometry.utils.logging_config import get_logger


def handle_empty_path(return_value: Any, path_param: str = "path"):
    """
    Decorator to short-circuit functions called with an empty path.

    Parameters
    ----------
    return_value : Any
        Value returned when the path argument has no points
    path_param : str
        Name of the path/polygon parameter to check

    Returns
    -------
    Callable
        Decorated function that returns return_value for empty paths

    Raises
    ------
    TypeError
        At decoration time, if the function has no parameter named path_param

    Example
    -------
    >>> @handle_empty_path(return_value=False, path_param="polygon")
    ... def contains(point, polygon):
    ...     ...
    >>> contains((0, 0), [])
    False
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        if path_param not in sig.parameters:
            raise TypeError(f"{func.__name__} has no parameter named '{path_param}'")

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            path = bound.arguments.get(path_param)

            if path is not None and len(path) == 0:
                get_logger(__name__).debug(
                    "empty_path",
                    function=func.__name__,
                    returning=return_value,
                )
                return return_value

            return func(*args, **kwargs)
        return wrapper
    return decorator
