"""
Registry behavioral tests (registration, resolution, validation).

Scope
- Validate construction-time faults for duplicate and reserved names.
- Validate exact resolution and unknown-name faults with suggestions.
- Validate required-flag checks and tolerance for undeclared flags.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from cliargs import (
    DuplicateCommandError,
    FaultCode,
    Flag,
    MissingRequiredFlagError,
    Registry,
    ReservedCommandError,
    UnknownCommandError,
    command,
)


def _noop(flags):
    pass


class TestRegistry(TestCase):
    """Behavioral tests for Registry."""

    def setUp(self) -> None:
        self.hello = command(_noop, name="hello", descr="greets", flags=[
            Flag("a", "who", required=True),
            Flag("b", "what", required=True),
            Flag("l", "language"),
        ])
        self.bye = command(_noop, name="bye", descr="leaves")
        self.registry = Registry([self.hello, self.bye])

    def testResolveReturnsExactInstance(self):
        self.assertIs(self.registry.resolve("hello"), self.hello)
        self.assertIs(self.registry.resolve("bye"), self.bye)

    def testRegistrationOrderIsKept(self):
        self.assertEqual(list(self.registry), ["hello", "bye"])
        self.assertEqual(len(self.registry), 2)
        self.assertIn("bye", self.registry)
        self.assertNotIn("help", self.registry)

    def testInformationIsCapturedAtRegistration(self):
        self.assertIs(self.registry.information("hello"), self.hello.get_information())
        self.assertEqual(list(self.registry.informations), ["hello", "bye"])

    def testDuplicateNameFails(self):
        with self.assertRaises(DuplicateCommandError) as context:
            Registry([self.hello, command(_noop, name="hello")])
        self.assertIsInstance(context.exception, ValueError)
        self.assertEqual(context.exception.options["code"], FaultCode.DUPLICATE_COMMAND)
        self.assertIn("'hello'", str(context.exception))

    def testNamesAreCaseSensitive(self):
        registry = Registry([self.hello, command(_noop, name="Hello")])
        self.assertEqual(list(registry), ["hello", "Hello"])

    def testHelpNameIsReserved(self):
        with self.assertRaises(ReservedCommandError) as context:
            Registry([command(_noop, name="help")])
        self.assertIsInstance(context.exception, DuplicateCommandError)

    def testNonCommandRejected(self):
        with self.assertRaises(TypeError):
            Registry([_noop])

    def testUnknownNameSuggestsCloseMatches(self):
        with self.assertRaises(UnknownCommandError) as context:
            self.registry.resolve("helo")
        self.assertEqual(context.exception.options["input"], "helo")
        self.assertIn("hello", context.exception.options["suggestions"])
        self.assertIn("did you mean 'hello'?", context.exception.options["hint"])

    def testValidateAcceptsRequiredAndExtraFlags(self):
        self.registry.validate(self.hello.get_information(), {"a": "x", "b": "y", "zzz": ""})

    def testValidateReportsFirstMissingInDeclarationOrder(self):
        with self.assertRaises(MissingRequiredFlagError) as context:
            self.registry.validate(self.hello.get_information(), {})
        self.assertEqual(context.exception.options["input"], "a")
        self.assertEqual(context.exception.options["command"], "hello")

        with self.assertRaises(MissingRequiredFlagError) as context:
            self.registry.validate(self.hello.get_information(), {"a": "x"})
        self.assertEqual(context.exception.options["input"], "b")

    def testValidateRejectsEmptyRequiredValue(self):
        with self.assertRaises(MissingRequiredFlagError):
            self.registry.validate(self.hello.get_information(), {"a": "", "b": "y"})

    def testUndeclaredFlags(self):
        undeclared = self.registry.undeclared(self.hello.get_information(), {"a": "x", "z": "", "q": "1"})
        self.assertEqual(undeclared, ("z", "q"))

    def testCommandsViewIsReadOnly(self):
        with self.assertRaises(TypeError):
            self.registry.commands["other"] = self.bye  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
