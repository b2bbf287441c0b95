"""
Registry behavioral tests (registration, uniqueness, lookup).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot import Kind, Registry, OptionDefinition, ArgumentDefinition, DefinitionError, FaultCode


class TestRegistry(TestCase):

    def setUp(self):
        self.registry = Registry()

    def testRegisterThenFindByShortAndLong(self):
        self.registry.register_option("v", "verbose", kind=Kind.SWITCH)
        option = self.registry.find_option(short="v")
        self.assertIsNotNone(option)
        self.assertIs(self.registry.find_option(long="verbose"), option)

    def testRegisterReadyDefinition(self):
        option = OptionDefinition("o", "output", kind=Kind.MANDATORY, metavar="FILE")
        self.registry.register_option(option)
        self.assertIs(self.registry.find_option(long="output"), option)

    def testReadyDefinitionRejectsExtraArguments(self):
        option = OptionDefinition("o", kind=Kind.SWITCH)
        with self.assertRaises(TypeError):
            self.registry.register_option(option, kind=Kind.SWITCH)

    def testFindMissingReturnsNone(self):
        self.assertIsNone(self.registry.find_option(short="x"))
        self.assertIsNone(self.registry.find_option(long="x"))

    def testFindReturnsFirstMatch(self):
        self.registry.register_option("a", "alpha", kind=Kind.SWITCH)
        self.registry.register_option("b", "beta", kind=Kind.SWITCH)
        self.assertEqual(self.registry.find_option(short="b", long="alpha").key, "alpha")

    def testDuplicateShortNameRejected(self):
        self.registry.register_option("v", "verbose", kind=Kind.SWITCH)
        with self.assertRaises(DefinitionError) as context:
            self.registry.register_option("v", "version", kind=Kind.SWITCH)
        self.assertEqual(context.exception.code, FaultCode.DUPLICATED_OPTION)

    def testDuplicateLongNameRejected(self):
        self.registry.register_option("v", "verbose", kind=Kind.SWITCH)
        with self.assertRaises(DefinitionError):
            self.registry.register_option(long="verbose", kind=Kind.SWITCH)

    def testShortAndLongNamespacesAreSeparate(self):
        self.registry.register_option("x", kind=Kind.SWITCH)
        self.registry.register_option(long="x", kind=Kind.SWITCH)
        self.assertEqual(len(self.registry.options), 2)

    def testMalformedOptionNotAppended(self):
        with self.assertRaises(DefinitionError):
            self.registry.register_option("o", kind=Kind.MANDATORY)
        self.assertEqual(self.registry.options, ())

    def testArgumentsKeepRegistrationOrder(self):
        self.registry.register_argument("B", kind=Kind.OPTIONAL)
        self.registry.register_argument(ArgumentDefinition("A", kind=Kind.MANDATORY))
        self.registry.register_argument(name="C", kind=Kind.OPTIONAL)
        self.assertEqual([argument.name for argument in self.registry.arguments], ["B", "A", "C"])

    def testArgumentWithoutKindRejected(self):
        with self.assertRaises(DefinitionError):
            self.registry.register_argument("FILE")

    def testRegistrationIsFluent(self):
        result = self.registry.register_option("v", kind=Kind.SWITCH).register_argument("FILE", kind=Kind.MANDATORY)
        self.assertIs(result, self.registry)
        self.assertEqual(len(self.registry), 2)

    def testOptionsAreReadOnlySnapshots(self):
        self.registry.register_option("v", kind=Kind.SWITCH)
        self.assertIsInstance(self.registry.options, tuple)
        self.assertIsInstance(self.registry.arguments, tuple)

    def testSealedRegistryRejectsArguments(self):
        self.registry.seal()
        with self.assertRaises(DefinitionError) as context:
            self.registry.register_argument("FILE", kind=Kind.MANDATORY)
        self.assertEqual(context.exception.code, FaultCode.SEALED_REGISTRY)
        self.assertIn("sealed", repr(self.registry))


if __name__ == "__main__":
    unittest.main()
