import unittest
from codebase_guidelines.cli.parser import parse_copy_args
from codebase_guidelines.errors import ArgumentError
from codebase_guidelines.schemas.commands import CopyCommand, HelpRequest
from codebase_guidelines.targets import Target


class TestParseCopyArgs(unittest.TestCase):
    """
    Unit tests for parse_copy_args
    """

    def test_single_target(self):
        """ Test parsing a single valid target """
        result = parse_copy_args(["backend"])
        self.assertIsInstance(result, CopyCommand)
        self.assertEqual(result.targets, (Target.BACKEND,))
        self.assertFalse(result.force)

    def test_deduplicates_preserving_order(self):
        """ Test that duplicate targets collapse to their first occurrence """
        result = parse_copy_args(["frontend", "frontend", "backend"])
        self.assertEqual(result.targets, (Target.FRONTEND, Target.BACKEND))

    def test_force_anywhere_and_idempotent(self):
        """ Test that --force may appear anywhere, any number of times """
        cases = [
            ["--force", "backend"],
            ["backend", "--force"],
            ["backend", "--force", "frontend", "--force", "--force"],
        ]
        for tokens in cases:
            with self.subTest(tokens=tokens):
                result = parse_copy_args(tokens)
                self.assertTrue(result.force)
                self.assertNotIn("--force", [t.value for t in result.targets])

    def test_no_targets(self):
        """ Test that token sequences without positional arguments are rejected """
        for tokens in ([], ["--force"], ["--force", "--force"]):
            with self.subTest(tokens=tokens):
                with self.assertRaises(ArgumentError) as cm:
                    parse_copy_args(tokens)
                self.assertEqual(
                    cm.exception.format_message(),
                    "You must provide at least one target directory."
                )

    def test_unknown_target(self):
        """ Test that an unknown target is named along with the valid targets """
        with self.assertRaises(ArgumentError) as cm:
            parse_copy_args(["backend", "bogus-target", "--force"])
        self.assertEqual(
            cm.exception.format_message(),
            "Unknown target: bogus-target. Valid targets: backend, frontend, browser-extension"
        )

    def test_first_unknown_target_reported(self):
        """ Test that the first unknown target in order is the one reported """
        with self.assertRaises(ArgumentError) as cm:
            parse_copy_args(["zzz", "aaa"])
        self.assertIn("Unknown target: zzz.", cm.exception.format_message())

    def test_unknown_option(self):
        """ Test that unknown options are rejected even with valid targets """
        for token in ("--bogus", "-x", "-", "--", "--force=yes", "-force"):
            with self.subTest(token=token):
                with self.assertRaises(ArgumentError) as cm:
                    parse_copy_args(["frontend", token, "backend"])
                self.assertEqual(cm.exception.format_message(), f"Unknown option: {token}")

    def test_unknown_option_before_unknown_target(self):
        """ Test that an unknown option is detected during the scan, before target validation """
        with self.assertRaises(ArgumentError) as cm:
            parse_copy_args(["bogus-target", "--bogus"])
        self.assertEqual(cm.exception.format_message(), "Unknown option: --bogus")

    def test_help(self):
        """ Test that -h and --help return a HelpRequest """
        for token in ("-h", "--help"):
            with self.subTest(token=token):
                self.assertIsInstance(parse_copy_args([token]), HelpRequest)

    def test_help_short_circuits(self):
        """ Test that help ignores any later invalid token """
        result = parse_copy_args(["backend", "-h", "--bogus", "bogus-target"])
        self.assertIsInstance(result, HelpRequest)

    def test_error_before_help(self):
        """ Test that an invalid option before help is still reported """
        with self.assertRaises(ArgumentError):
            parse_copy_args(["--bogus", "--help"])
