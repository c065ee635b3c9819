import unittest
import click
from codebase_guidelines.errors import GuidelinesError, ArgumentError, FileSystemError


class TestErrors(unittest.TestCase):
    """
    Unit tests for codebase-guidelines errors
    """

    def test_taxonomy(self):
        """ Test that errors derive from GuidelinesError and click.ClickException """
        for error_cls in (ArgumentError, FileSystemError):
            with self.subTest(error_cls=error_cls):
                self.assertTrue(issubclass(error_cls, GuidelinesError))
                self.assertTrue(issubclass(error_cls, click.ClickException))

    def test_exit_code(self):
        """ Test that errors exit with status 1 """
        self.assertEqual(ArgumentError("bad").exit_code, 1)
        self.assertEqual(FileSystemError("bad").exit_code, 1)

    def test_message(self):
        """ Test that the message is kept unchanged """
        err = ArgumentError("Unknown option: --bogus")
        self.assertEqual(err.format_message(), "Unknown option: --bogus")
        self.assertEqual(str(err), "Unknown option: --bogus")
