"""
Parse result behavioral tests (accessors are pure, repeatable lookups).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot import Kind, Registry, Parser, ParseResult


class TestParseResult(TestCase):

    def setUp(self):
        registry = Registry()
        registry.register_option("v", "verbose", kind=Kind.SWITCH)
        registry.register_option("q", kind=Kind.SWITCH)
        registry.register_option("o", "output", kind=Kind.MANDATORY, metavar="FILE")
        registry.register_option(long="color", kind=Kind.OPTIONAL, metavar="WHEN")
        registry.register_argument("SOURCE", kind=Kind.MANDATORY)
        registry.register_argument("REST...", kind=Kind.OPTIONAL)
        self.result = Parser(registry).parse(["prog", "-v", "-o", "out.txt", "in.txt", "x"]).result

    def testGetOptionByLongOrShortName(self):
        self.assertEqual(self.result.get_option("output"), "out.txt")
        self.assertEqual(self.result.get_option("o"), "out.txt")

    def testGetOptionUndeclaredReturnsDefault(self):
        self.assertEqual(self.result.get_option("missing", "fallback"), "fallback")
        self.assertIsNone(self.result.get_option("missing"))

    def testGetOptionUnboundValueOptionReturnsDefault(self):
        self.assertEqual(self.result.get_option("color", "auto"), "auto")

    def testIsSet(self):
        self.assertTrue(self.result.is_set("verbose"))
        self.assertTrue(self.result.is_set("v"))
        self.assertTrue(self.result.is_set("output"))
        self.assertFalse(self.result.is_set("q"))
        self.assertFalse(self.result.is_set("color"))
        self.assertFalse(self.result.is_set("missing"))

    def testGetArgument(self):
        self.assertEqual(self.result.get_argument(0), "in.txt")
        self.assertEqual(self.result.get_argument(1), "x")
        self.assertEqual(self.result.get_argument(5, "none"), "none")

    def testReadsAreIdempotent(self):
        first = (self.result.get_option("verbose"), self.result.get_argument(0), self.result.is_set("q"))
        for _ in range(3):
            self.assertEqual(
                (self.result.get_option("verbose"), self.result.get_argument(0), self.result.is_set("q")),
                first
            )
        self.assertEqual(self.result.arguments, ("in.txt", "x"))

    def testMappingsAreReadOnly(self):
        with self.assertRaises(TypeError):
            self.result.options["verbose"] = False  # type: ignore[index]
        self.assertIs(self.result.get_option("verbose"), True)

    def testSubscription(self):
        self.assertEqual(self.result[0], "in.txt")
        self.assertEqual(self.result["o"], "out.txt")
        with self.assertRaises(KeyError):
            self.result["color"]
        with self.assertRaises(KeyError):
            self.result[7]

    def testSubscriptionAgreesWithGetOption(self):
        for name in ("output", "o", "verbose", "v", "q"):
            with self.subTest(name=name):
                self.assertEqual(self.result[name], self.result.get_option(name))

    def testProgram(self):
        self.assertEqual(self.result.program, "prog")

    def testStandaloneConstruction(self):
        result = ParseResult(Registry(), "tool", {}, {0: "a"})
        self.assertEqual(result.get_argument(0), "a")
        self.assertEqual(result.get_option("anything", 1), 1)
        self.assertIn("tool", repr(result))


if __name__ == "__main__":
    unittest.main()
