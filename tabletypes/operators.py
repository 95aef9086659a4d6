# -*- coding: utf-8 -*-
"""
Small named functions that read well when passed to the functional table
operators

:Example:
    from tabletypes import Table, operators as op

    t = Table(1, -2, 3)
    t.map(op.double) # [2, -4, 6]
    t.accept(op.positive) # [1, 3]
    t.reduce(0, op.add) # 2
"""
import math


def void(*args):
    pass


def nils(a):
    return a is None


def odd(a):
    return a % 2 == 1


def even(a):
    return a % 2 == 0


def half(a):
    return a * .5


def double(a):
    return a * 2


def sqr(a):
    return a * a


sqrt = math.sqrt
abs = abs


def increase(a):
    return a + 1


def decrease(a):
    return a - 1


def positive(a):
    """zero counts as positive"""
    return a >= 0


def negative(a):
    return a < 0


def itself(a):
    return a


def identity(a):
    """always True except for values that aren't equal to themselves, like
    float("nan")"""
    return a == a


def eq(a, b):
    return a == b


def neq(a, b):
    return a != b


def gt(a, b):
    return a > b


def lt(a, b):
    return a < b


def ge(a, b):
    return a >= b


def le(a, b):
    return a <= b


def add(a, b):
    return a + b


def mul(a, b):
    return a * b
