# python
"""
Command line tests.

Scope
- Validate `python -m argstree` argument handling (flags, --spec, the "--" section).
- Validate plain and rich output, and exit statuses on faults.

Conventions
- Test method names follow CamelCase per project convention.
- Output is captured by redirecting sys.stdout/sys.stderr.
"""

import contextlib
import io
import json
import os
import tempfile
import unittest
from unittest import TestCase

from argstree.__main__ import main


class TestMain(TestCase):
    """Behavioral tests for main()."""

    def setUp(self):
        descriptor, self.path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(descriptor, "w", encoding="utf-8") as stream:
            json.dump({"id": "git", "alias": {"-v": "--verbose"}, "args": {"--verbose": {"max_read": 0}, "commit": {"args": {}}}}, stream)

    def tearDown(self):
        os.remove(self.path)

    def run_main(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            status = main(list(argv))
        return status, stdout.getvalue(), stderr.getvalue()

    def testPlainOutput(self):
        status, stdout, _ = self.run_main("--spec", self.path, "-p", "--", "-v", "commit", "x")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "\n".join([
            "git (depth: 0)",
            "├── --verbose (depth: 1, alias: -v)",
            "└─┬ commit (depth: 1)",
            "  └─┬ :args (total: 1)",
            "    └── x",
        ]) + "\n")

    def testFlags(self):
        status, stdout, _ = self.run_main(f"--spec={self.path}", "-pad", "--no-args", "--", "commit", "x")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "\n".join([
            "git (depth: 0)",
            "├─┬ commit (depth: 1)",
            "│ └─┬ :ancestors (total: 1)",
            "│   └── git (depth: 0)",
            "└─┬ :descendants (total: 1)",
            "  └── commit (depth: 1)",
        ]) + "\n")

    def testWithoutSpec(self):
        status, stdout, _ = self.run_main("--plain", "--", "a", "--b")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "None (depth: 0)\n└─┬ :args (total: 2)\n  ├── a\n  └── --b\n")

    def testRichOutput(self):
        status, stdout, _ = self.run_main("-s", self.path, "--", "commit")
        self.assertEqual(status, 0)
        self.assertIn("git (depth: 0)", stdout)
        self.assertIn("commit (depth: 1)", stdout)

    def testHelp(self):
        status, stdout, _ = self.run_main("-h")
        self.assertEqual(status, 0)
        self.assertIn("usage: argstree", stdout)

    def testUnknownFlag(self):
        status, stdout, stderr = self.run_main("--unknown")
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "")
        self.assertIn("Unrecognized option: --unknown", stderr)

    def testMissingSpecValue(self):
        status, _, stderr = self.run_main("--spec")
        self.assertEqual(status, 1)
        self.assertIn("Option '--spec' expected 1 argument, but got 0.", stderr)

    def testUnreadableSpec(self):
        status, _, stderr = self.run_main("--spec", self.path + ".missing")
        self.assertEqual(status, 1)
        self.assertIn("cannot read", stderr)

    def testParseFault(self):
        with open(self.path, "w", encoding="utf-8") as stream:
            json.dump({"strict": True}, stream)
        status, _, stderr = self.run_main("--spec", self.path, "--", "--nope")
        self.assertEqual(status, 1)
        self.assertIn("unrecognized-argument", stderr)


if __name__ == "__main__":
    unittest.main()
