# -*- coding: utf-8 -*-
"""
Pure operators, each one returns a new table and leaves the receiver alone
"""
from collections import deque

from ..utils import (
    is_int,
    is_sequence,
    assert_callable,
)


class FunctionalMixin(object):
    """map, filter, reduce and flatten for Table

    Any extra positional arguments given to an operator are passed to the
    callback after the value, so these are the same:

        t.map(lambda v: pow(v, 2))
        t.map(pow, 2)
    """
    def map(self, func, *args):
        """Return a table where element i is func(self[i], *args)"""
        assert_callable("map", func)
        return self.new_table([func(v, *args) for v in self.array])

    def accept(self, predicate, *args):
        """Return a table with the elements where predicate(v, *args) is true,
        in the same relative order"""
        assert_callable("accept", predicate)
        return self.new_table([v for v in self.array if predicate(v, *args)])

    def reject(self, predicate, *args):
        """The opposite of .accept()"""
        assert_callable("reject", predicate)
        return self.new_table(
            [v for v in self.array if not predicate(v, *args)]
        )

    def reduce(self, initial, func, *args):
        """Left fold of the sequence

        :Example:
            Table(1, 2, 3).reduce(0, lambda acc, v: acc + v) # 6

        :param initial: Any, the starting accumulator
        :param func: Callable[[Any, Any, ...], Any], called as
            func(accumulator, value, *args)
        :returns: Any, the final accumulator
        """
        assert_callable("reduce", func)
        value = initial
        for v in self.array:
            value = func(value, v, *args)
        return value

    @classmethod
    def leaves(cls, root, deep=False):
        """Breadth-first walk of root yielding every value that isn't a nested
        container

        All the leaves of one nesting level are yielded before the leaves of
        the next level, so [1, [2, [3]], 4] yields 1, 4, 2, 3

        :param root: Table|list|tuple
        :param deep: bool, False to only descend through the sequence parts,
            True to descend through every (key, value) pair
        :returns: generator[Any]
        """
        queue = deque([root])
        while queue:
            container = queue.popleft()
            for v in cls.container_values(container, deep=deep):
                if cls.is_container(v):
                    queue.append(v)

                elif v is not None:
                    yield v

    def iter_leaves(self, deep=False):
        return self.leaves(self, deep=deep)

    def flatten(self):
        """Return a flat table of the leaves reachable through the sequence
        parts of this table and its nested tables"""
        return self.new_table(list(self.iter_leaves()))

    def flatten_deep(self):
        """Like .flatten() but it also descends through the non-sequence keys,
        the leaves of the mapping part come after the sequence part's leaves
        of the same nesting level"""
        return self.new_table(list(self.iter_leaves(deep=True)))

    def flat_map(self, func, *args):
        """Map each element with func then flatten each result and concatenate
        them in order

        :Example:
            Table(1, 2).flat_map(lambda v: [v, [v * 10]]) # [1, 10, 2, 20]
        """
        assert_callable("flat_map", func)
        array = []
        for v in self.array:
            r = func(v, *args)
            if self.is_container(r):
                array.extend(self.leaves(r))

            elif r is not None:
                array.append(r)

        return self.new_table(array)

    def purify(self):
        """Return a copy of the table with every absent value removed, at
        every nesting level

        Integer keys are renumbered 1..M keeping their relative order so the
        surviving values all end up in the sequence, other keys are kept
        as they are. Nested lists and tuples are rebuilt as tables
        """
        t = self.new_table()
        positions = []
        for k, v in self.iter_pairs():
            if is_sequence(v):
                v = self.new_table(list(v))

            if self.is_container(v):
                v = v.purify()

            if is_int(k):
                positions.append((k, v))

            else:
                t[k] = v

        positions.sort(key=lambda kv: kv[0])
        for i, (_, v) in enumerate(positions, 1):
            t[i] = v

        return t

    def clone(self):
        """Deep copy, nested tables, lists and tuples are copied too, other
        values are shared"""
        t = self.new_table()
        for k, v in self.iter_pairs():
            t[k] = self.clone_value(v)
        return t

    def clone_value(self, v):
        if is_sequence(v):
            values = [self.clone_value(x) for x in v]
            if hasattr(v, "_fields"):
                # namedtuples take their fields positionally
                return type(v)._make(values)
            return type(v)(values)

        elif self.is_container(v):
            return v.clone()

        return v
