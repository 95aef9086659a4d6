# -*- coding: utf-8 -*-
"""
Operators that change the sequence part of a table in place

https://docs.python.org/3/tutorial/datastructures.html#more-on-lists
"""
import functools

from .. import operators
from ..utils import (
    is_int,
    assert_callable,
    assert_int,
)


class SequenceMixin(object):
    """Stack like mutation for Table

    Unless they return removed values, these all return the table so calls
    can be chained:

        t.append(4, 5).reverse().sort()
    """
    def append(self, *values):
        """Add values to the end of the sequence

        :param *values: Any, None values are skipped with a warning
        :returns: Table, self
        """
        if not values:
            self.log_warning("Table.append(): nothing to append")

        for value in values:
            if value is None:
                self.log_warning("Table.append(): nil value")

            else:
                self[len(self.array) + 1] = value

        return self

    def push(self, *values):
        """Insert values at the beginning of the sequence

        Each value is inserted at position 1 in argument order, so the values
        end up reversed, the same as calling .push() once for each value:

            Table(9).push(1, 2, 3) # [3, 2, 1, 9]

        :param *values: Any, None values are skipped with a warning
        :returns: Table, self
        """
        if not values:
            self.log_warning("Table.push(): nothing to push")

        for value in values:
            if value is None:
                self.log_warning("Table.push(): nil value")

            else:
                self.array.insert(0, value)
                self.migrate()

        return self

    def pop(self):
        """Remove and return the last element, None if the sequence is empty"""
        return self.array.pop() if self.array else None

    def head(self):
        """Remove and return the first element, everything else moves one
        position down. None if the sequence is empty"""
        return self.array.pop(0) if self.array else None

    def lshift(self, n):
        """Remove n elements from the front of the sequence

        :param n: int, clamped to the length of the sequence
        :returns: tuple, the removed elements in their original order
        """
        assert_int("lshift", n)
        n = max(0, min(n, len(self.array)))
        values = tuple(self.array[:n])
        del self.array[:n]
        return values

    def rshift(self, n):
        """Remove n elements from the back of the sequence

        :param n: int, clamped to the length of the sequence
        :returns: tuple, the removed elements in their original order
        """
        assert_int("rshift", n)
        n = max(0, min(n, len(self.array)))
        if n == 0:
            return ()

        values = tuple(self.array[-n:])
        del self.array[-n:]
        return values

    def shift(self, n):
        """rshift(n) if n >= 0, lshift(-n) otherwise"""
        assert_int("shift", n)
        return self.rshift(n) if n >= 0 else self.lshift(-n)

    def clear(self, mapping=False):
        """Empty the sequence

        :param mapping: bool, True to also remove every other key
        :returns: Table, self
        """
        self.array.clear()
        if mapping:
            self.hash.clear()
        return self

    def shuffle(self, rng=None):
        """Randomly reorder the sequence in place, each position i, in order,
        is swapped with a uniformly chosen position

        :param rng: RandomSource, defaults to the table's source
        :returns: Table, self
        """
        rng = self.get_rng(rng)
        n = len(self.array)
        for i in range(n):
            k = rng.uniform(1, n) - 1
            self.array[i], self.array[k] = self.array[k], self.array[i]
        return self

    def sample(self, rng=None):
        """Return a random element of the sequence, None if it is empty"""
        n = len(self.array)
        if n == 0:
            return None
        return self.array[self.get_rng(rng).next_int(n) - 1]

    def reverse(self):
        self.array.reverse()
        return self

    def sort(self, comparator=None):
        """Sort the sequence in place

        :param comparator: Callable[[Any, Any], bool], returns True if the
            first argument should come before the second, defaults to
            ascending order
        :returns: Table, self
        """
        if comparator is None:
            comparator = operators.lt
        assert_callable("sort", comparator)

        def cmp(a, b):
            if comparator(a, b):
                return -1

            elif comparator(b, a):
                return 1

            return 0

        self.log_debug("Table.sort(): sorting {} elements", len(self.array))
        self.array.sort(key=functools.cmp_to_key(cmp))
        return self

    def slice(self, start=1, stop=None):
        """Return a new table with the values from position start to stop,
        both inclusive, absent values are skipped

        :Example:
            Table(1, 2, 3, 4, 5).slice(1, -2) # [1, 2, 3, 4]

        :param start: int, a negative value counts from the end (-1 is the
            last position)
        :param stop: int, same as start, defaults to the last position
        :returns: Table, empty (with a warning) if start > stop
        """
        n = len(self.array)
        if stop is None:
            stop = n
        assert_int("slice", start, stop)

        if start < 0:
            start = max(n + 1 + start, 1)

        if stop < 0:
            stop = max(n + 1 + stop, 1)

        if start > stop:
            self.log_warning("Table.slice(): {} > {}", start, stop)
            return self.new_table()

        # integer keys outside the sequence can still fall in the range
        keys = sorted(
            k for k in self.hash if is_int(k) and start <= k <= stop
        )
        part = [self.hash[k] for k in keys if k < 1]
        part.extend(self.array[max(start, 1) - 1:max(min(stop, n), 0)])
        part.extend(self.hash[k] for k in keys if k > n)
        return self.new_table(part)
