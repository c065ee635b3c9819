"""
Errors raised by codebase-guidelines.

All errors derive from :class:`click.ClickException`, so that the command line
interface reports them as ``Error: <message>`` on standard error and exits
with status 1.
"""

import click


class GuidelinesError(click.ClickException):
    """ Base class for all codebase-guidelines errors. """

    exit_code = 1


class ArgumentError(GuidelinesError):
    """ Malformed or invalid command line invocation. """


class FileSystemError(GuidelinesError):
    """ Destination conflict or underlying I/O failure while copying. """
