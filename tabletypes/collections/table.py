# -*- coding: utf-8 -*-
"""
The Table container, a list and a dict sharing one key space

Positions 1..N are the sequence part of the table and every other key lives
in the mapping part. None is the absent marker, setting a key to None removes
it, and reading a missing key returns None, so "not there" and "set to None"
are the same thing.

:Example:
    t = Table(1, 2, 3, name="foo")
    t[1] # 1
    t["name"] # "foo"
    len(t) # 3, only the sequence part counts
    t[4] = 4 # appends, len(t) is now 4
    t[2] = None # truncates, len(t) is now 1 and 3, 4 move to the mapping part

https://www.lua.org/pil/2.5.html
"""
import logging
from collections.abc import Iterable, Mapping

from ..exception import InvalidArgument
from ..logging import LogMixin
from ..random import default_source
from ..utils import (
    is_int,
    is_sequence,
    assert_int,
    assert_size,
)
from .iterators import IteratorMixin
from .functional import FunctionalMixin
from .sequence import SequenceMixin
from .aggregate import AggregateMixin


logger = logging.getLogger(__name__)


class BoolKey(object):
    """Stores a bool key in .hash, a dict treats True and 1 (False and 0) as
    the same key but a table keeps them apart"""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, BoolKey) and other.value is self.value

    def __hash__(self):
        return hash((BoolKey, self.value))

    def __repr__(self):
        return repr(self.value)


class Table(
    IteratorMixin,
    FunctionalMixin,
    SequenceMixin,
    AggregateMixin,
    LogMixin,
):
    """A sequence and a mapping in one object

    The sequence part is stored in .array (position i lives at .array[i - 1])
    and everything else is stored in .hash. The two are kept consistent so
    .array always holds the longest run of populated positions starting at 1

    Iterating the mapping part (keys(), values(), items()) yields the sequence
    positions in order and then the rest of the keys. Beyond the sequence
    positions, callers shouldn't depend on the order, it just happens to be
    insertion order because that is what dict does
    """
    __hash__ = None

    def __init__(self, *values, rng=None, **pairs):
        """
        :param *values: Any, the sequence values, if there is exactly one value
            and it is a Table it is adopted (the new table shares its storage),
            a list is wrapped like .of() does and a Mapping has all its pairs
            loaded
        :param rng: RandomSource, used by shuffle() and sample(), defaults to
            the shared random source
        :param **pairs: str keys that will be set in the mapping part
        """
        self.rng = rng
        self.array = []
        self.hash = {}

        if len(values) == 1:
            value = values[0]
            if isinstance(value, Table):
                self.array = value.array
                self.hash = value.hash
                if rng is None:
                    self.rng = value.rng
                values = ()

            elif isinstance(value, list):
                self.adopt(value)
                values = ()

            elif isinstance(value, Mapping):
                self.update(value)
                values = ()

        for i, value in enumerate(values, 1):
            self[i] = value

        self.update(pairs)

    @classmethod
    def of(cls, iterable, rng=None):
        """Create a table whose sequence is iterable

        A list is wrapped without copying, so the table and the caller share
        it, anything after the first None in the list moves to the mapping
        part of the table

        :param iterable: Iterable
        :param rng: RandomSource
        :returns: Table
        """
        if isinstance(iterable, (str, bytes)) or not isinstance(iterable, Iterable):
            raise InvalidArgument("of", "require an iterable!")

        if not isinstance(iterable, list):
            iterable = list(iterable)

        t = cls(rng=rng)
        t.adopt(iterable)
        return t

    @classmethod
    def from_pairs(cls, pairs, rng=None):
        """Create a table from a mapping or an iterable of (key, value) tuples

        :param pairs: Mapping|Iterable[tuple]
        :returns: Table
        """
        t = cls(rng=rng)
        t.update(pairs)
        return t

    @classmethod
    def new(cls, size, init, *args):
        """Create a table of size elements

        :Example:
            Table.new(5, lambda i: i * i) # [1, 4, 9, 16, 25]
            Table.new(3, "x") # ["x", "x", "x"]

        :param size: int, how many elements
        :param init: Callable[[int, ...], Any]|Any, if callable it is called
            with the position (and *args) to get the value of that position,
            otherwise every position gets init
        :param *args: passed to init after the position
        :returns: Table
        """
        assert_size("new", size)
        if init is None:
            raise InvalidArgument("new", "require an init value or function!")

        if callable(init):
            array = [init(i, *args) for i in range(1, size + 1)]

        else:
            array = [init] * size

        return cls.of(array)

    @classmethod
    def zeros(cls, size):
        return cls.new(size, 0)

    @classmethod
    def ones(cls, size):
        return cls.new(size, 1)

    @classmethod
    def of_chars(cls, word):
        """Create a table with every character of word"""
        if not isinstance(word, str):
            raise InvalidArgument("of_chars", "require a valid string!")
        return cls.of(list(word))

    @classmethod
    def pack(cls, *values):
        """Create a table from values, dropping any None values instead of
        leaving holes"""
        return cls.of([v for v in values if v is not None])

    @classmethod
    def is_container(cls, value):
        """True if value is something the recursive operators descend into"""
        return isinstance(value, Table) or is_sequence(value)

    @classmethod
    def container_values(cls, value, deep=False):
        """Return the values of a nested container

        :param value: Table|list|tuple
        :param deep: bool, True to include the mapping part of a table
        :returns: list
        """
        if isinstance(value, Table):
            if deep:
                return [v for _, v in value.iter_pairs()]
            return list(value.array)
        return list(value)

    def new_table(self, array=None):
        """Create an empty table (or one wrapping array) that shares this
        table's random source"""
        t = type(self)(rng=self.rng)
        if array:
            t.adopt(array)
        return t

    def get_rng(self, rng=None):
        return rng or self.rng or default_source()

    def adopt(self, array):
        """Make array the sequence part of this table

        :param array: list, this list is used directly, if it contains a None
            it is truncated there and the values after it move to .hash
        """
        for i, v in enumerate(array):
            if v is None:
                tail = array[i + 1:]
                del array[i:]
                for k, tv in enumerate(tail, i + 2):
                    if tv is not None:
                        self.hash[k] = tv
                break

        self.array = array
        self.migrate()

    def migrate(self):
        """Move integer keys that continue the sequence out of .hash"""
        k = len(self.array) + 1
        while k in self.hash:
            self.array.append(self.hash.pop(k))
            k += 1

    def normalize_key(self, key):
        # 2.0 and 2 are the same key
        if isinstance(key, float) and key.is_integer():
            key = int(key)

        elif isinstance(key, bool):
            key = BoolKey(key)
        return key

    def __getitem__(self, key):
        key = self.normalize_key(key)
        if is_int(key) and 0 < key <= len(self.array):
            return self.array[key - 1]
        return self.hash.get(key)

    def __setitem__(self, key, value):
        key = self.normalize_key(key)
        if value is None:
            self.__delitem__(key)

        elif is_int(key) and 0 < key <= len(self.array):
            self.array[key - 1] = value

        elif is_int(key) and key == len(self.array) + 1:
            self.array.append(value)
            self.migrate()

        else:
            self.hash[key] = value

    def __delitem__(self, key):
        """Remove key, removing a missing key does nothing

        Removing a sequence position truncates the sequence there, the
        positions after key move to the mapping part
        """
        key = self.normalize_key(key)
        if is_int(key) and 0 < key <= len(self.array):
            tail = self.array[key:]
            del self.array[key - 1:]
            for k, v in enumerate(tail, key + 1):
                self.hash[k] = v

        else:
            self.hash.pop(key, None)

    def __len__(self):
        """The length of the sequence part"""
        return len(self.array)

    def __bool__(self):
        return self.size() > 0

    def __contains__(self, value):
        return self.has(value)

    def __iter__(self):
        return self.forward()

    def __reversed__(self):
        return self.inverse()

    def __eq__(self, other):
        if isinstance(other, Table):
            return self.array == other.array and self.hash == other.hash

        elif isinstance(other, list):
            return not self.hash and self.array == other

        return NotImplemented

    def __repr__(self):
        if self.hash:
            return f"{type(self).__name__}({self.array!r}, {self.hash!r})"
        return f"{type(self).__name__}({self.array!r})"

    def iter_pairs(self):
        """Live (key, value) iterator over the whole table, sequence first"""
        yield from enumerate(self.array, 1)
        for k, v in self.hash.items():
            yield (k.value if isinstance(k, BoolKey) else k), v

    def update(self, pairs):
        """Set every (key, value) of pairs into this table

        :param pairs: Mapping|Iterable[tuple]
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        for k, v in pairs:
            self[k] = v
        return self

    def size(self):
        """How many pairs are in the table, sequence and mapping parts"""
        return len(self.array) + len(self.hash)

    def at(self, index, default=None):
        """Return the element at index, a negative index counts from the end
        of the sequence (-1 is the last element)

        :param index: int
        :param default: Any, returned when there is no value at index
        """
        assert_int("at", index)
        if index < 0:
            index = len(self.array) + index + 1

        value = self[index]
        return default if value is None else value

    def get(self, key, default=None):
        value = self[key]
        return default if value is None else value

    def first(self):
        return self[1]

    def last(self):
        return self[len(self.array)]

    def find(self, value):
        """Return the position of value in the sequence or None"""
        for i, v in enumerate(self.array, 1):
            if v == value:
                return i
        return None

    def has(self, value):
        return self.find(value) is not None

    def has_key(self, key):
        """True if key has a value, a key set to None has no value since that
        is the same as the key not being there"""
        return self[key] is not None

    def empty(self):
        """True if the sequence part is empty, mapping keys aren't considered"""
        return len(self.array) == 0

    def not_empty(self):
        return len(self.array) > 0

    def to_list(self):
        return list(self.array)

    def to_dict(self):
        return dict(self.iter_pairs())

    def copy(self):
        """Shallow copy, nested containers are shared"""
        t = self.new_table(list(self.array))
        t.hash.update(self.hash)
        return t
