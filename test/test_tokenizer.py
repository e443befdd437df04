"""
Tokenizer behavioral tests (line → Invocation).

Scope
- Validate command name extraction and blank lines.
- Validate flag/value grouping, empty values and last-wins repetition.
- Validate leftover values and verbatim punctuation.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (tokenize, Invocation, FLAG_PREFIX).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from cliargs import FLAG_PREFIX, Invocation, tokenize


class TestTokenize(TestCase):
    """Behavioral tests for tokenize()."""

    def testSingleFlagWithValue(self):
        invocation = tokenize("hello -a flag_value")
        self.assertEqual(invocation.name, "hello")
        self.assertEqual(dict(invocation.flags), {"a": "flag_value"})

    def testFlagFollowedByFlagHasEmptyValue(self):
        invocation = tokenize("hello -a -b bval")
        self.assertEqual(dict(invocation.flags), {"a": "", "b": "bval"})

    def testTrailingFlagHasEmptyValue(self):
        self.assertEqual(dict(tokenize("hello -a").flags), {"a": ""})

    def testBlankLinesHaveNoName(self):
        for line in ("", "   ", "\t \t"):
            invocation = tokenize(line)
            self.assertEqual(invocation.name, "")
            self.assertEqual(dict(invocation.flags), {})
            self.assertEqual(invocation.leftover, ())

    def testNameOnly(self):
        invocation = tokenize("  hello  ")
        self.assertEqual(invocation, Invocation("hello", invocation.flags, ()))
        self.assertEqual(dict(invocation.flags), {})

    def testMultipleValueTokensAreJoinedBySingleSpaces(self):
        invocation = tokenize("say -t hello    big\tworld -n 2")
        self.assertEqual(dict(invocation.flags), {"t": "hello big world", "n": "2"})

    def testRepeatedFlagLastOccurrenceWins(self):
        self.assertEqual(dict(tokenize("x -a 1 -b 2 -a 3").flags), {"a": "3", "b": "2"})
        self.assertEqual(dict(tokenize("x -a 1 -a").flags), {"a": ""})

    def testValuesBeforeFirstFlagAreLeftover(self):
        invocation = tokenize("hello stray words -a x")
        self.assertEqual(invocation.leftover, ("stray", "words"))
        self.assertEqual(dict(invocation.flags), {"a": "x"})

    def testPunctuationPassesThroughVerbatim(self):
        invocation = tokenize("x -p a=b,c;d 'quoted' \"too\"")
        self.assertEqual(invocation.flags["p"], "a=b,c;d 'quoted' \"too\"")

    def testOnlyOnePrefixCharacterIsStripped(self):
        self.assertEqual(FLAG_PREFIX, "-")
        self.assertEqual(dict(tokenize("x --long v").flags), {"-long": "v"})

    def testCommandNameIsCaseSensitive(self):
        self.assertEqual(tokenize("Hello").name, "Hello")

    def testFlagsAreReadOnly(self):
        invocation = tokenize("hello -a x")
        with self.assertRaises(TypeError):
            invocation.flags["a"] = "y"  # type: ignore[index]

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            tokenize(["hello", "-a"])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
