# -*- coding: utf-8 -*-
from numbers import Number

from .exception import InvalidArgument


def cbany(callback, iterable, *args):
    """Return True if any callback(v, *args) of the iterable is true. If the
    iterable is empty, return False

    :param callback: callable
    :param iterable: Iterable
    :param *args: passed to callback after each value
    :returns: bool
    """
    for v in iterable:
        if callback(v, *args):
            return True
    return False


def cball(callback, iterable, *args):
    """Return True if all callback(v, *args) of the iterable are true (or if
    the iterable is empty)

    :param callback: callable
    :param iterable: Iterable
    :param *args: passed to callback after each value
    :returns: bool
    """
    for v in iterable:
        if not callback(v, *args):
            return False
    return True


def is_int(v):
    """True if v is an int, bools don't count"""
    return isinstance(v, int) and not isinstance(v, bool)


def is_number(v):
    """True if v is a real number, bools don't count"""
    return isinstance(v, Number) and not isinstance(v, (bool, complex))


def is_sequence(v):
    """True if v is a builtin sequence a table treats as a nested container"""
    return isinstance(v, (list, tuple))


def assert_callable(operator, func):
    if not callable(func):
        raise InvalidArgument(operator, "require a callable function!")


def assert_number(operator, *values):
    for v in values:
        if not is_number(v):
            raise InvalidArgument(operator, f"require a number, got {v!r}!")


def assert_int(operator, *values):
    for v in values:
        if not is_int(v):
            raise InvalidArgument(operator, f"require an integer, got {v!r}!")


def assert_size(operator, size):
    """sizes are non-negative integers"""
    assert_int(operator, size)
    if size < 0:
        raise InvalidArgument(operator, f"size must be >= 0, got {size}!")


def assert_positive(operator, k):
    """group sizes must be integers bigger than zero"""
    if not is_int(k) or k <= 0:
        raise InvalidArgument(operator, "k must be > 0!")
