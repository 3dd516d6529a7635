# python
"""
Fault tests.

Scope
- Validate Cause values and their exposure on ArgsTreeError.
- Validate ArgsTreeError attributes, identity of the carried objects and to_dict().
- Validate trigger(): raising outside shell mode, printing (and exiting) in shell mode.
- Validate rich rendering of a fault.

Conventions
- Test method names follow CamelCase per project convention.
- Shell output is captured through the module console.
"""

import unittest
from unittest import TestCase

from rich.console import Console

from argstree import faults
from argstree.faults import ArgsTreeError, Cause, trigger


class TestCause(TestCase):
    """Cause identifiers."""

    def testValues(self):
        self.assertEqual(ArgsTreeError.VALIDATE_ERROR, "validate")
        self.assertEqual(ArgsTreeError.INVALID_OPTIONS_ERROR, "invalid-options")
        self.assertEqual(ArgsTreeError.INVALID_RANGE_ERROR, "invalid-range")
        self.assertEqual(ArgsTreeError.INVALID_SPEC_ERROR, "invalid-spec")
        self.assertEqual(ArgsTreeError.UNRECOGNIZED_ALIAS_ERROR, "unrecognized-alias")
        self.assertEqual(ArgsTreeError.UNRECOGNIZED_ARGUMENT_ERROR, "unrecognized-argument")

    def testLabelAndHint(self):
        self.assertEqual(Cause.UNRECOGNIZED_ALIAS.label, "unrecognized alias")
        for cause in Cause:
            self.assertIsInstance(cause.hint, str)

    def testFromString(self):
        error = ArgsTreeError("foo", cause="invalid-range")
        self.assertIs(error.cause, Cause.INVALID_RANGE)
        with self.assertRaises(ValueError):
            ArgsTreeError("foo", cause="unknown")


class TestArgsTreeError(TestCase):
    """ArgsTreeError attributes and serialization."""

    def testMembers(self):
        args = []
        options = {}
        error = ArgsTreeError("foo", cause=Cause.INVALID_OPTIONS, raw="arg", arguments=args, options=options)
        self.assertIsInstance(error, Exception)
        self.assertEqual(error.cause, ArgsTreeError.INVALID_OPTIONS_ERROR)
        self.assertEqual(error.message, "foo")
        self.assertEqual(str(error), "foo")
        self.assertEqual(error.raw, "arg")
        self.assertIsNone(error.alias)
        self.assertIs(error.arguments, args)
        self.assertIs(error.options, options)

    def testToDict(self):
        args = ["bar", "baz"]
        error = ArgsTreeError("foo", cause=Cause.INVALID_OPTIONS, raw="arg", alias="-a", arguments=args, options={"max": 2})
        snapshot = error.to_dict()
        self.assertEqual(snapshot, {
            "name": "ArgsTreeError",
            "cause": "invalid-options",
            "message": "foo",
            "raw": "arg",
            "alias": "-a",
            "args": ["bar", "baz"],
            "options": {"max": 2},
        })
        self.assertIsNot(snapshot["args"], args)

    def testRepr(self):
        error = ArgsTreeError("foo", cause=Cause.VALIDATE)
        self.assertEqual(repr(error), "ArgsTreeError('foo', cause='validate')")


class TestTrigger(TestCase):
    """trigger() and rendering."""

    def setUp(self):
        self.console = faults.console
        faults.console = Console(record=True, width=120, color_system=None)
        self.error = ArgsTreeError(
            "Option '--foo' expected 1 argument, but got 0.",
            cause=Cause.INVALID_RANGE,
            raw="--foo",
            alias="-f",
        )

    def tearDown(self):
        faults.console = self.console

    def testRaisesOutsideShell(self):
        with self.assertRaises(ArgsTreeError) as context:
            trigger(self.error)
        self.assertIs(context.exception, self.error)

    def testShellExits(self):
        with self.assertRaises(SystemExit) as context:
            trigger(self.error, shell=True)
        self.assertEqual(context.exception.code, 1)
        output = faults.console.export_text()
        self.assertIn("invalid-range", output)
        self.assertIn("expected 1 argument", output)
        self.assertIn("raw: --foo", output)

    def testShellDeferred(self):
        trigger(self.error, shell=True, deferred=True, fancy=True, colorful=False)
        output = faults.console.export_text()
        self.assertIn("Invalid Range", output)
        self.assertIn("alias: -f", output)

    def testRejectsNonTriggerable(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("foo"))


if __name__ == "__main__":
    unittest.main()
