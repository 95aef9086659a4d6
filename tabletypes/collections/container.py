# -*- coding: utf-8 -*-
"""
Container and membership like objects (eg, sets)

https://docs.python.org/3/library/collections.abc.html#collections.abc.Container
"""
from collections.abc import Hashable


class OrderedSet(object):
    """An ordered set (a unique list) that can also hold unhashable values

    This keeps the order that elements were added in. Hashable elements are
    compared by equality like a normal set, unhashable elements (lists, dicts,
    tables) are compared by identity, so two different tables with the same
    contents are both kept

    This has O(1) for add and contains
    """
    def __init__(self, iterable=None):
        self.order = []
        self.hashed = set()
        self.identities = set()

        if iterable:
            self.update(iterable)

    def is_hashable(self, elem):
        if isinstance(elem, Hashable):
            try:
                hash(elem)
                return True

            except TypeError:
                # tuples are Hashable even when their items aren't
                pass

        return False

    def update(self, *others):
        for other in others:
            for elem in other:
                self.add(elem)

    def add(self, elem):
        if elem not in self:
            if self.is_hashable(elem):
                self.hashed.add(elem)

            else:
                self.identities.add(id(elem))

            self.order.append(elem)

    def __contains__(self, elem):
        if self.is_hashable(elem):
            return elem in self.hashed
        return id(elem) in self.identities

    def __iter__(self):
        """iterate through the set in add order"""
        yield from self.order

    def __len__(self):
        return len(self.order)
