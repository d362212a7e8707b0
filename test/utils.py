# python
"""
Utils module behavioral tests.

Scope
- Unset sentinel identity and falsiness; coalesce() preserving falsy values.
- rename() in both forms; mirror() read-only snapshots of built-in containers only.

Conventions
- Test method names follow CamelCase per project convention.
"""
from __future__ import annotations

import unittest
from types import MappingProxyType
from unittest import TestCase

from herald.utils import Unset, UnsetType, coalesce, mirror, rename


class Holder:
    items = mirror("items")
    table = mirror("table")
    other = mirror("other")

    def __init__(self, items, table, other):
        self._items = items
        self._table = table
        self._other = other


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel and coalesce()."""

    def testSingletonAndFalsy(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        for falsy in (None, 0, "", ()):
            with self.subTest(falsy=falsy):
                self.assertIs(coalesce(falsy, "fallback"), falsy)


class TestRename(TestCase):
    """Behavioral tests for rename()."""

    def testDirectForm(self):
        def work():
            pass

        self.assertIs(rename(work, "natural"), work)
        self.assertEqual(work.__name__, "natural")
        self.assertEqual(work.__qualname__, "natural")

    def testDecoratorForm(self):
        @rename("shout")
        def work():
            pass

        self.assertEqual(work.__name__, "shout")

    def testBadArguments(self):
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename(len, "length")
        with self.assertRaises(TypeError):
            rename(3)


class TestMirror(TestCase):
    """Behavioral tests for mirror()."""

    def testContainersAreFrozen(self):
        holder = Holder([1, 2], {"a": 1}, {"b": 2}.keys())
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        with self.assertRaises(TypeError):
            holder.table["a"] = 2

    def testOtherObjectsAreHandedOutAsIs(self):
        marker = object()
        holder = Holder((), {}, marker)
        self.assertIs(holder.other, marker)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            Holder([], {}, None).items = ()


if __name__ == "__main__":
    unittest.main()
