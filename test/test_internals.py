# python
"""
Internal helpers tests.

Scope
- Validate the Unset sentinel.
- Validate StorageGuard/view: writable only while building, read-only views afterwards.
- Validate the token shape predicates, deproto() and ensure_number().

Conventions
- Test method names follow CamelCase per project convention.
"""

import unittest
from collections import defaultdict
from types import MappingProxyType
from unittest import TestCase

from argstree.internals import StorageGuard, Unset, UnsetType, rename, view
from argstree.utils import (
    deproto,
    display_name,
    ensure_number,
    get_type,
    is_alias,
    is_assignable,
    is_option,
    pluralize,
)


class Record(StorageGuard):
    items = view("items")
    table = view("table")

    def __new__(cls, items, table):
        with super().__new__(cls) as self:
            setattr(self, "-items", items)
            setattr(self, "-table", table)
        return self


class TestUnset(TestCase):
    """The Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testRename(self):
        def handler():
            pass

        self.assertIs(rename(handler, "items"), handler)
        self.assertEqual((handler.__name__, handler.__qualname__), ("items", "items"))
        self.assertEqual(rename("table")(handler).__name__, "table")
        with self.assertRaises(TypeError):
            rename(handler, 1)


class TestStorageGuard(TestCase):
    """StorageGuard and view()."""

    def testViews(self):
        record = Record(["a"], {"k": "v"})
        self.assertEqual(record.items, ("a",))
        self.assertIsInstance(record.table, MappingProxyType)

    def testReadOnly(self):
        record = Record([], {})
        with self.assertRaises(AttributeError):
            setattr(record, "-items", ["b"])
        with self.assertRaises(AttributeError):
            getattr(record, "-items")
        with self.assertRaises(AttributeError):
            record.items = ()


class TestUtils(TestCase):
    """Token predicates and option readers."""

    def testShapes(self):
        self.assertTrue(is_alias("-a"))
        self.assertTrue(is_alias("-ab"))
        self.assertFalse(is_alias("-"))
        self.assertFalse(is_alias("--a"))
        self.assertFalse(is_alias("a"))
        self.assertTrue(is_option("-a"))
        self.assertTrue(is_option("--ab"))
        self.assertTrue(is_option("--a"))
        self.assertFalse(is_option("--"))
        self.assertFalse(is_option("a"))

    def testAssignable(self):
        self.assertTrue(is_assignable("--foo", {}))
        self.assertFalse(is_assignable("--foo", {"assign": False}))
        self.assertFalse(is_assignable("foo", {}))
        self.assertTrue(is_assignable("foo", {"assign": True}))
        self.assertFalse(is_assignable("--", {}))

    def testDeproto(self):
        source = defaultdict(lambda: "x", {"a": 1})
        copy = deproto(source)
        self.assertEqual(copy, {"a": 1})
        self.assertIs(type(copy), dict)
        self.assertEqual(deproto(), {})

    def testEnsureNumber(self):
        self.assertEqual(ensure_number(0), 0)
        self.assertEqual(ensure_number(2.5), 2.5)
        for value in (-1, float("inf"), float("nan"), True, "1", None):
            with self.subTest(value=value):
                self.assertIsNone(ensure_number(value))

    def testDisplayName(self):
        self.assertEqual(get_type("--foo"), "Option")
        self.assertEqual(get_type("foo"), "Command")
        self.assertEqual(get_type(None), "Command")
        self.assertEqual(display_name("--foo"), "Option '--foo' ")
        self.assertEqual(display_name("run", "runner"), "Command 'runner' ")
        self.assertEqual(display_name(None), "")
        self.assertEqual(display_name(None, "root"), "Command 'root' ")

    def testPluralize(self):
        self.assertEqual(pluralize("argument"), "arguments")
        self.assertEqual(pluralize("alias"), "aliases")
        self.assertEqual(pluralize("Entry"), "Entries")


if __name__ == "__main__":
    unittest.main()
