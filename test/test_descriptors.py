"""
Descriptor behavioral tests (Flag, CommandInformation, command factory).

Scope
- Validate metadata sanitation and construction errors.
- Validate read-only exposure of descriptor fields.
- Validate the command(...) factory in direct, decorator and bare-decorator modes.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from cliargs import Command, CommandInformation, Flag, command


class TestFlag(TestCase):
    """Behavioral tests for Flag descriptors."""

    def testDefaults(self):
        flag = Flag("a")
        self.assertEqual(flag.identifier, "a")
        self.assertEqual(flag.descr, "")
        self.assertFalse(flag.required)

    def testDescrIsTrimmed(self):
        self.assertEqual(Flag("a", "  the value  ").descr, "the value")

    def testIdentifierRules(self):
        with self.assertRaises(ValueError):
            Flag("")
        with self.assertRaises(ValueError):
            Flag("a b")
        with self.assertRaises(ValueError):
            Flag("-a")
        with self.assertRaises(TypeError):
            Flag(1)  # type: ignore[arg-type]

    def testRequiredMustBeBoolean(self):
        with self.assertRaises(TypeError):
            Flag("a", required="yes")  # type: ignore[arg-type]

    def testFieldsAreReadOnly(self):
        flag = Flag("a", "value", required=True)
        with self.assertRaises(AttributeError):
            flag.required = False  # type: ignore[misc]

    def testRepr(self):
        self.assertEqual(repr(Flag("a", "value", required=True)), "flag(identifier='a', descr='value', required=True)")

    def testEquality(self):
        self.assertEqual(Flag("a", "x"), Flag("a", "x"))
        self.assertNotEqual(Flag("a", "x"), Flag("a", "x", required=True))


class TestCommandInformation(TestCase):
    """Behavioral tests for CommandInformation descriptors."""

    def testFlagsKeepDeclarationOrder(self):
        information = CommandInformation("hello", "greets", [Flag("b"), Flag("a"), Flag("c")])
        self.assertEqual([flag.identifier for flag in information.flags], ["b", "a", "c"])

    def testDuplicateFlagIdentifierRejected(self):
        with self.assertRaises(ValueError):
            CommandInformation("hello", "greets", [Flag("a"), Flag("a", "again")])

    def testIdentifiersAreCaseSensitive(self):
        information = CommandInformation("hello", "greets", [Flag("a"), Flag("A")])
        self.assertEqual(len(information.flags), 2)

    def testNameRules(self):
        with self.assertRaises(ValueError):
            CommandInformation("")
        with self.assertRaises(ValueError):
            CommandInformation("two words")
        with self.assertRaises(TypeError):
            CommandInformation(None)  # type: ignore[arg-type]

    def testFlagsMustBeFlags(self):
        with self.assertRaises(TypeError):
            CommandInformation("hello", "greets", ["a"])  # type: ignore[list-item]
        with self.assertRaises(TypeError):
            CommandInformation("hello", "greets", "a")  # type: ignore[arg-type]

    def testFlagsCannotBeMutatedThroughProperty(self):
        information = CommandInformation("hello", "greets", [Flag("a")])
        information.flags.append(Flag("b"))
        self.assertEqual(len(information.flags), 1)

    def testFindAndRequired(self):
        information = CommandInformation("hello", "greets", [Flag("a", required=True), Flag("b")])
        self.assertEqual(information.find("b"), Flag("b"))
        self.assertIsNone(information.find("z"))
        self.assertEqual(information.required, ("a",))


class TestCommandFactory(TestCase):
    """Behavioral tests for command(...)."""

    def testDecoratorTakesNameAndDocstring(self):
        @command(flags=[Flag("a", required=True)])
        def hello(flags):
            """Greets someone.

            Longer explanation that is not part of the help line.
            """

        information = hello.get_information()
        self.assertIsInstance(hello, Command)
        self.assertEqual(information.name, "hello")
        self.assertEqual(information.descr, "Greets someone.")
        self.assertEqual(information.required, ("a",))

    def testBareDecorator(self):
        @command
        def ping(flags):
            pass

        self.assertEqual(ping.get_information().name, "ping")
        self.assertEqual(ping.get_information().descr, "")

    def testDirectModeWithOverrides(self):
        received = []
        echo = command(received.append, name="echo", descr="prints back")
        echo.execute_command({"t": "x"})
        self.assertEqual(echo.get_information().name, "echo")
        self.assertEqual(received, [{"t": "x"}])

    def testNonCallableRejected(self):
        with self.assertRaises(TypeError):
            command("hello")  # type: ignore[arg-type]

    def testCommandIsAbstract(self):
        with self.assertRaises(TypeError):
            Command()  # type: ignore[abstract]


if __name__ == "__main__":
    unittest.main()
