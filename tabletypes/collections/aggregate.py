# -*- coding: utf-8 -*-
"""
Set like operators and aggregates over the sequence part of a table
"""
from .. import operators
from ..exception import InvalidArgument
from ..utils import (
    cbany,
    cball,
    is_sequence,
    assert_callable,
)
from .container import OrderedSet


class AggregateMixin(object):
    """union, intersection, min, max and friends for Table

    Membership is by equality for hashable values and by identity for the
    rest, so nested tables are never compared structurally here
    """
    def sequence_of(self, operator, other):
        """Return the sequence values of other

        :param operator: str, the calling operator's name, for the error
        :param other: Table|list|tuple
        :returns: list
        """
        if is_sequence(other):
            return list(other)

        elif self.is_container(other):
            return list(other.array)

        raise InvalidArgument(operator, "require a table!")

    def table_of(self, operator, other):
        if is_sequence(other):
            return self.new_table(list(other))

        elif self.is_container(other):
            return other

        raise InvalidArgument(operator, "require a table!")

    def unique(self):
        """Return the distinct values of the sequence in first seen order"""
        return self.new_table(list(OrderedSet(self.array)))

    def union(self, other):
        """Distinct values of this sequence followed by the ones of other"""
        values = self.sequence_of("union", other)
        return self.new_table(list(OrderedSet(self.array + values)))

    def intersect(self, other):
        """Distinct values of this sequence that are also in other"""
        members = OrderedSet(self.sequence_of("intersect", other))
        return self.new_table(
            [v for v in OrderedSet(self.array) if v in members]
        )

    def negation(self, other):
        """Distinct values of this sequence that are not in other"""
        members = OrderedSet(self.sequence_of("negation", other))
        return self.new_table(
            [v for v in OrderedSet(self.array) if v not in members]
        )

    def merge(self, other):
        """This sequence followed by the sequence of other, duplicates kept"""
        return self.new_table(self.array + self.sequence_of("merge", other))

    def equal(self, other, deep=False):
        """True if the flattened leaves of both tables are equal, position by
        position

        The nesting doesn't matter, Table(1, Table(2)) is equal to Table(1, 2)

        :param other: Table|list|tuple
        :param deep: bool, True to flatten through every key instead of only
            the sequence parts
        :returns: bool
        """
        other = self.table_of("equal", other)
        return (
            list(self.iter_leaves(deep=deep))
            == list(other.iter_leaves(deep=deep))
        )

    def max(self, comparator=None):
        """Return the biggest value of the sequence, None if it is empty

        :param comparator: Callable[[Any, Any], bool], comparator(item, best)
            returns True if item should replace best, defaults to >
        """
        if comparator is None:
            comparator = operators.gt
        return self.best("max", comparator)

    def min(self, comparator=None):
        """Return the smallest value of the sequence, None if it is empty

        :param comparator: Callable[[Any, Any], bool], comparator(item, best)
            returns True if item should replace best, defaults to <
        """
        if comparator is None:
            comparator = operators.lt
        return self.best("min", comparator)

    def best(self, operator, comparator):
        assert_callable(operator, comparator)
        if not self.array:
            return None

        best = self.array[0]
        for item in self.array[1:]:
            if comparator(item, best):
                best = item
        return best

    def avg(self):
        """The mean of the sequence, 0 if it is empty"""
        if not self.array:
            return 0
        return self.sum() / len(self.array)

    def sum(self):
        return self.reduce(0, operators.add)

    def mul(self):
        """The product of the sequence, 1 if it is empty"""
        return self.reduce(1, operators.mul)

    def maximize(self, func, *args):
        """Return the element that gives the biggest func(element, *args), the
        first one wins ties, None if the sequence is empty"""
        return self.optimize("maximize", operators.gt, func, *args)

    def minimize(self, func, *args):
        """Return the element that gives the smallest func(element, *args),
        the first one wins ties, None if the sequence is empty"""
        return self.optimize("minimize", operators.lt, func, *args)

    def optimize(self, operator, comparator, func, *args):
        assert_callable(operator, func)
        if not self.array:
            return None

        best = self.array[0]
        fbest = func(best, *args)
        for item in self.array[1:]:
            fitem = func(item, *args)
            if comparator(fitem, fbest):
                best = item
                fbest = fitem
        return best

    def all(self, predicate, *args):
        """True if predicate(v, *args) is true for every sequence value"""
        assert_callable("all", predicate)
        return cball(predicate, self.array, *args)

    def any(self, predicate, *args):
        assert_callable("any", predicate)
        return cbany(predicate, self.array, *args)

    def all_pairs(self, predicate, *args):
        """True if predicate(key, value, *args) is true for every pair"""
        assert_callable("all_pairs", predicate)
        return cball(lambda kv: predicate(*kv, *args), self.items())

    def any_pairs(self, predicate, *args):
        assert_callable("any_pairs", predicate)
        return cbany(lambda kv: predicate(*kv, *args), self.items())

    def __or__(self, other):
        if not self.is_container(other):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not self.is_container(other):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not self.is_container(other):
            return NotImplemented
        return self.negation(other)

    def __add__(self, other):
        if not self.is_container(other):
            return NotImplemented
        return self.merge(other)
