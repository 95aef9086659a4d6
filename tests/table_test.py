# -*- coding: utf-8 -*-

from tabletypes.collections.table import Table
from tabletypes.exception import InvalidArgument

from . import TestCase, testdata


class TableTest(TestCase):
    def test_empty(self):
        t = Table()
        self.assertEqual(0, len(t))
        self.assertEqual(0, t.size())
        self.assertTrue(t.empty())
        self.assertFalse(t.not_empty())
        self.assertFalse(t)
        self.assertIsNone(t[1])

    def test_values(self):
        t = Table(1, 2, 3)
        self.assertEqual([1, 2, 3], t)
        self.assertEqual(3, len(t))
        self.assertEqual(1, t[1])
        self.assertEqual(3, t[3])
        self.assertIsNone(t[0])
        self.assertIsNone(t[4])

    def test_values_with_holes(self):
        t = Table(1, None, 3)
        self.assertEqual(1, len(t))
        self.assertEqual(3, t[3])
        self.assertEqual(2, t.size())

        t[2] = 2
        self.assertEqual(3, len(t))
        self.assertEqual([1, 2, 3], t)

    def test_pairs(self):
        t = Table(1, 2, name="foo")
        self.assertEqual(2, len(t))
        self.assertEqual(3, t.size())
        self.assertEqual("foo", t["name"])
        self.assertNotEqual([1, 2], t)
        self.assertTrue(Table(name="foo"))

    def test_adopt_table(self):
        t = Table(1, 2)
        t2 = Table(t)
        t2.append(3)
        self.assertIsNot(t, t2)
        self.assertEqual([1, 2, 3], t)

        t2["foo"] = 1
        self.assertEqual(1, t["foo"])

    def test_of_list_is_shared(self):
        values = [1, 2, 3]
        t = Table.of(values)
        t.append(4)
        self.assertEqual([1, 2, 3, 4], values)

        values = [1, 2]
        t = Table(values)
        t.pop()
        self.assertEqual([1], values)

    def test_of_list_with_none(self):
        values = [1, None, 3]
        t = Table.of(values)
        self.assertEqual([1], t.to_list())
        self.assertEqual(3, t[3])
        self.assertEqual([1], values)

    def test_of_iterable(self):
        self.assertEqual([1, 2, 3], Table.of(range(1, 4)))
        self.assertEqual(["a", "b"], Table.of(c for c in "ab"))

        with self.assertRaises(InvalidArgument):
            Table.of("abc")

        with self.assertRaises(InvalidArgument):
            Table.of(1)

    def test_mapping(self):
        t = Table({"foo": 1, 1: "a", 2: "b"})
        self.assertEqual(["a", "b"], t.to_list())
        self.assertEqual(1, t["foo"])

    def test_from_pairs(self):
        t = Table.from_pairs([(2, "b"), (1, "a"), ("x", 1)])
        self.assertEqual(["a", "b"], t.to_list())
        self.assertEqual({"x": 1}, t.hash)

    def test_new(self):
        self.assertEqual([1, 4, 9, 16, 25], Table.new(5, lambda i: i * i))
        self.assertEqual(["x", "x", "x"], Table.new(3, "x"))
        self.assertEqual([10, 20, 30], Table.new(3, lambda i, n: i * n, 10))
        self.assertEqual([], Table.new(0, 1))

        for size in [-1, 2.5, "5", True, None]:
            with self.assertRaises(InvalidArgument):
                Table.new(size, 0)

        with self.assertRaises(InvalidArgument):
            Table.new(3, None)

    def test_zeros_ones(self):
        self.assertEqual([0, 0, 0], Table.zeros(3))
        self.assertEqual([1, 1], Table.ones(2))
        self.assertEqual([], Table.zeros(0))

    def test_of_chars(self):
        self.assertEqual(["a", "b", "c"], Table.of_chars("abc"))
        self.assertEqual([], Table.of_chars(""))

        with self.assertRaises(InvalidArgument):
            Table.of_chars(123)

    def test_pack(self):
        self.assertEqual([1, 2], Table.pack(1, None, 2, None))
        self.assertEqual([], Table.pack())

    def test_setitem_migrates(self):
        t = Table()
        t[3] = "c"
        t[2] = "b"
        self.assertEqual(0, len(t))

        t[1] = "a"
        self.assertEqual(["a", "b", "c"], t)
        self.assertEqual({}, t.hash)

    def test_setitem_none_truncates(self):
        t = Table(1, 2, 3, 4)
        t[2] = None
        self.assertEqual(1, len(t))
        self.assertEqual(3, t[3])
        self.assertEqual(4, t[4])
        self.assertEqual({3: 3, 4: 4}, t.hash)

        del t[1]
        self.assertEqual(0, len(t))

        # missing keys are already absent
        del t["missing"]
        t["missing"] = None

    def test_float_keys(self):
        t = Table("a", "b")
        self.assertEqual("b", t[2.0])

        t[3.0] = "c"
        self.assertEqual(3, len(t))

        t[1.5] = "d"
        self.assertEqual(3, len(t))
        self.assertEqual("d", t[1.5])

    def test_at(self):
        t = Table(1, 2, 3)
        self.assertEqual(1, t.at(1))
        self.assertEqual(3, t.at(-1))
        self.assertEqual(1, t.at(-3))
        self.assertIsNone(t.at(-4))
        self.assertEqual("d", t.at(5, "d"))

        with self.assertRaises(InvalidArgument):
            t.at("1")

    def test_get(self):
        t = Table(name="foo")
        self.assertEqual("foo", t.get("name"))
        self.assertEqual(1, t.get("bar", 1))
        self.assertIsNone(t.get("bar"))

    def test_first_last(self):
        t = Table(1, 2, 3)
        self.assertEqual(1, t.first())
        self.assertEqual(3, t.last())

        t = Table()
        self.assertIsNone(t.first())
        self.assertIsNone(t.last())

    def test_find_has(self):
        t = Table("a", "b")
        self.assertEqual(2, t.find("b"))
        self.assertIsNone(t.find("c"))
        self.assertTrue("a" in t)
        self.assertTrue(t.has("b"))
        self.assertFalse(t.has("c"))

    def test_has_key(self):
        t = Table(1, foo="bar")
        self.assertTrue(t.has_key(1))
        self.assertTrue(t.has_key("foo"))
        self.assertFalse(t.has_key(2))

        t["foo"] = None
        self.assertFalse(t.has_key("foo"))

    def test_to_dict(self):
        self.assertEqual({1: 1, 2: 2, "x": 3}, Table(1, 2, x=3).to_dict())

    def test_copy(self):
        t = Table(1, Table(2))
        c = t.copy()
        c.append(3)
        self.assertEqual(2, len(t))
        self.assertIs(t[2], c[2])

    def test_eq(self):
        self.assertEqual(Table(1, 2), Table(1, 2))
        self.assertNotEqual(Table(1, 2), Table(2, 1))
        self.assertNotEqual(Table(1, x=1), Table(1))
        self.assertEqual(Table(1, Table(2)), Table(1, Table(2)))

        with self.assertRaises(TypeError):
            hash(Table())

    def test_repr(self):
        self.assertEqual("Table([1, 2])", repr(Table(1, 2)))
        self.assertEqual("Table([1], {'x': 2})", repr(Table(1, x=2)))

    def test_random_values(self):
        values = [testdata.get_int() for _ in range(10)]
        t = Table.of(list(values))
        self.assertEqual(len(values), len(t))
        for i, v in enumerate(values, 1):
            self.assertEqual(v, t[i])

    def test_bool_keys(self):
        t = Table()
        t[True] = "x"
        t[False] = "y"
        self.assertEqual(0, len(t))
        self.assertIsNone(t[1])
        self.assertIsNone(t[0])
        self.assertEqual("x", t[True])
        self.assertEqual("y", t[False])

        t[1] = "a"
        self.assertEqual(["a"], t.to_list())
        self.assertEqual("x", t[True])
        self.assertEqual([(1, "a"), (True, "x"), (False, "y")], list(t.items()))

        t[True] = None
        self.assertIsNone(t[True])
        self.assertEqual("a", t[1])

    def test_bool_keys_not_migrated(self):
        t = Table()
        t[True] = "x"
        t[2] = "b"
        t[1] = "a"
        self.assertEqual(["a", "b"], t.to_list())
        self.assertEqual("x", t[True])
