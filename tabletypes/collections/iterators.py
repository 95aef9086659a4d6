# -*- coding: utf-8 -*-
"""
Iterators over a table

Every method validates its arguments when it is called and returns a
single-pass iterator, calling the method again gives an independent cursor
over the same table. The iterators read the table as they go, so changing the
table while one of them is running gives undefined results (keys(), values()
and items() are the exception, they snapshot the table when called)
"""

from ..utils import (
    assert_callable,
    assert_number,
    assert_positive,
)


def forward(table):
    i = 1
    while (v := table[i]) is not None:
        yield v
        i += 1


def inverse(table, n):
    while n > 0:
        yield table[n]
        n -= 1


def step(table, start, stride):
    i = start
    while True:
        yield i, table[i]
        i += stride


def count_range(table, start, count, stride):
    i = start
    while count > 0:
        yield i, table[i]
        i += stride
        count -= 1


def window(table, k, advance):
    """yields k-tuples starting at position 1 and moving advance positions
    each time, stops once a tuple would start on an absent position"""
    i = 0
    while True:
        values = tuple(table[i + j] for j in range(1, k + 1))
        if values[0] is None:
            break

        yield values
        i += advance


class IteratorMixin(object):
    """Iterator protocol for Table"""
    def forward(self):
        """Yields self[1], self[2], ... until an absent position"""
        return forward(self)

    def inverse(self):
        """Yields self[N], self[N - 1], ... self[1] where N is the length
        when this is called"""
        return inverse(self, len(self))

    def step(self, start=1, stride=1):
        """Yields (position, value) tuples for position start, start + stride,
        ... forever, the caller has to stop it

        :param start: int|float
        :param stride: int|float
        :returns: Iterator[tuple]
        """
        assert_number("step", start, stride)
        return step(self, start, stride)

    def range(self, start=1, count=0, stride=1):
        """Yields exactly count (position, value) tuples starting at start and
        moving stride positions each time

        :Example:
            t = Table("a", "b", "c", "d")
            list(t.range(2, 2, 2)) # [(2, "b"), (4, "d")]
        """
        assert_number("range", start, count, stride)
        return count_range(self, start, count, stride)

    def group(self, k):
        """Yields non-overlapping k-tuples, the last tuple is padded with None
        if the length isn't a multiple of k

        :Example:
            t = Table(1, 2, 3, 4, 5)
            list(t.group(3)) # [(1, 2, 3), (4, 5, None)]
        """
        assert_positive("group", k)
        return window(self, k, k)

    def slide(self, k):
        """Yields overlapping k-tuples, moving one position each time, tuples
        near the end are padded with None

        :Example:
            t = Table(1, 2, 3)
            list(t.slide(2)) # [(1, 2), (2, 3), (3, None)]
        """
        assert_positive("slide", k)
        return window(self, k, 1)

    def keys(self):
        """Iterate a snapshot of every key of the table"""
        return iter([k for k, _ in self.iter_pairs()])

    def values(self):
        """Iterate a snapshot of every value of the table"""
        return iter([v for _, v in self.iter_pairs()])

    def items(self):
        """Iterate a snapshot of every (key, value) of the table"""
        return iter(list(self.iter_pairs()))

    def key_set(self):
        return self.new_table(list(self.keys()))

    def value_set(self):
        return self.new_table(list(self.values()))

    def each(self, func, *args):
        """Call func(key, value, *args) for every pair of the table

        :returns: Table, self
        """
        assert_callable("each", func)
        for k, v in self.items():
            func(k, v, *args)
        return self

    def eachi(self, func, *args):
        """Call func(value, *args) for every value of the sequence

        :returns: Table, self
        """
        assert_callable("eachi", func)
        for i in range(1, len(self) + 1):
            func(self[i], *args)
        return self
