# -*- coding: utf-8 -*-

from tabletypes.collections.table import Table
from tabletypes.exception import InvalidArgument

from . import TestCase


class IteratorMixinTest(TestCase):
    def test_forward(self):
        t = Table(1, 2, 3)
        self.assertEqual([1, 2, 3], list(t.forward()))
        self.assertEqual([1, 2, 3], list(t))

        it = t.forward()
        self.assertEqual(1, next(it))
        it2 = t.forward()
        self.assertEqual(1, next(it2))
        self.assertEqual(2, next(it))

    def test_forward_exhausted(self):
        it = Table(1).forward()
        self.assertEqual(1, next(it))
        with self.assertRaises(StopIteration):
            next(it)

        # not restartable
        self.assertEqual([], list(it))

    def test_forward_stops_at_hole(self):
        t = Table(1, None, 3)
        self.assertEqual([1], list(t.forward()))

    def test_inverse(self):
        t = Table(1, 2, 3)
        self.assertEqual([3, 2, 1], list(t.inverse()))
        self.assertEqual([3, 2, 1], list(reversed(t)))
        self.assertEqual([], list(Table().inverse()))

    def test_step(self):
        t = Table("a", "b", "c", "d", "e")

        it = t.step(1, 2)
        self.assertEqual(
            [(1, "a"), (3, "c"), (5, "e"), (7, None)],
            [next(it) for _ in range(4)]
        )

        it = t.step()
        self.assertEqual((1, "a"), next(it))
        self.assertEqual((2, "b"), next(it))

        it = t.step(5, -2)
        self.assertEqual(
            [(5, "e"), (3, "c"), (1, "a")],
            [next(it) for _ in range(3)]
        )

        with self.assertRaises(InvalidArgument):
            t.step("1")

        with self.assertRaises(InvalidArgument):
            t.step(1, None)

    def test_range(self):
        t = Table("a", "b", "c", "d")
        self.assertEqual([(2, "b"), (4, "d")], list(t.range(2, 2, 2)))
        self.assertEqual(
            [(1, "a"), (2, "b"), (3, "c"), (4, "d"), (5, None)],
            list(t.range(1, 5))
        )
        self.assertEqual([], list(t.range()))

        with self.assertRaises(InvalidArgument):
            t.range(1, "2")

    def test_group(self):
        t = Table(1, 2, 3, 4, 5)
        self.assertEqual([(1, 2, 3), (4, 5, None)], list(t.group(3)))
        self.assertEqual([(1, 2), (3, 4), (5, None)], list(t.group(2)))
        self.assertEqual([(1,), (2,), (3,), (4,), (5,)], list(t.group(1)))
        self.assertEqual([], list(Table().group(2)))

    def test_group_errors(self):
        t = Table(1, 2)
        for k in [0, -1, "2", 1.5, None]:
            # raised when the iterator is created, not when it is used
            with self.assertRaises(InvalidArgument):
                t.group(k)

    def test_slide(self):
        t = Table(1, 2, 3)
        self.assertEqual([(1, 2), (2, 3), (3, None)], list(t.slide(2)))
        self.assertEqual(
            [(1, 2, 3), (2, 3, None), (3, None, None)],
            list(t.slide(3))
        )

        with self.assertRaises(InvalidArgument):
            t.slide(0)

    def test_snapshots(self):
        t = Table("a", "b", x=1)
        keys = t.keys()
        values = t.values()
        t["y"] = 2
        t.append("c")

        self.assertEqual([1, 2, "x"], list(keys))
        self.assertEqual(["a", "b", 1], list(values))
        self.assertEqual(
            [(1, "a"), (2, "b"), (3, "c"), ("x", 1), ("y", 2)],
            list(t.items())
        )

    def test_key_set_value_set(self):
        t = Table("a", x="b")
        self.assertEqual([1, "x"], t.key_set())
        self.assertEqual(["a", "b"], t.value_set())

    def test_each(self):
        seen = []
        t = Table("a", x="b")
        r = t.each(lambda k, v, s: s.append((k, v)), seen)
        self.assertIs(r, t)
        self.assertEqual([(1, "a"), ("x", "b")], seen)

        with self.assertRaises(InvalidArgument):
            t.each(None)

    def test_eachi(self):
        seen = []
        t = Table(1, 2, x=3)
        r = t.eachi(seen.append)
        self.assertIs(r, t)
        self.assertEqual([1, 2], seen)

        with self.assertRaises(InvalidArgument):
            t.eachi("append")
