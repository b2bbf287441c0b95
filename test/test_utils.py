"""
Tests for the internal helpers (Unset sentinel, coalesce, mirror, ordinal).
"""
import copy
import pickle
import unittest
from unittest import TestCase

from argot.utils import *


class UnsetTest(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testCopyPreservesIdentity(self):
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)


class MirrorTest(TestCase):

    def testContainersAreFrozen(self):
        class Holder:
            items = mirror("items")
            table = mirror("table")
            name = mirror("name")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}
                self._name = "holder"

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertEqual(holder.name, "holder")
        with self.assertRaises(TypeError):
            holder.table["b"] = 2
        self.assertEqual(holder._table, {"a": 1})

    def testRequiresString(self):
        with self.assertRaises(TypeError):
            mirror(1)


class RenameTest(TestCase):

    def testFunctionAndDecoratorForms(self):
        def f():
            pass

        self.assertEqual(rename(f, "g").__name__, "g")

        @rename("h")
        def k():
            pass

        self.assertEqual(k.__qualname__, "h")

    def testArity(self):
        with self.assertRaises(TypeError):
            rename()


class OrdinalTest(TestCase):

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(112), "112th")


if __name__ == "__main__":
    unittest.main()
