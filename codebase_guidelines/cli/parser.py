"""
Argument parser of the ``copy`` command.

Tokens are scanned left to right:

1. ``--force`` sets the force flag, wherever it appears.
2. ``-h`` or ``--help`` returns a :class:`.HelpRequest` at once, ignoring the remaining tokens.
3. Any other token starting with ``-`` is an unknown option.
4. Any other token is a target name.

Target names are then deduplicated (first occurrence wins) and checked
against :class:`.Target`.
"""

from typing import List, Sequence
from codebase_guidelines.errors import ArgumentError
from codebase_guidelines.schemas.commands import CopyCommand, HelpRequest, ParseResult
from codebase_guidelines.targets import Target


FORCE_OPTION = "--force"
HELP_OPTIONS = ("-h", "--help")


def parse_copy_args(tokens: Sequence[str]) -> ParseResult:
    """
    Parse the arguments of the ``copy`` command.

    Args:
        tokens (Sequence[str]): Raw command line tokens following ``copy``.

    Returns:
        ParseResult: A HelpRequest, or the validated CopyCommand.

    Raises:
        ArgumentError: On an unknown option, a missing target or an unknown target.
    """
    raw_targets: List[str] = []
    force = False

    for token in tokens:
        if token == FORCE_OPTION:
            force = True
            continue

        if token in HELP_OPTIONS:
            return HelpRequest()

        if token.startswith("-"):
            raise ArgumentError(f"Unknown option: {token}")

        raw_targets.append(token)

    if not raw_targets:
        raise ArgumentError("You must provide at least one target directory.")

    valid_targets = Target.values()
    unique_targets = list(dict.fromkeys(raw_targets))
    for name in unique_targets:
        if name not in valid_targets:
            raise ArgumentError(f"Unknown target: {name}. Valid targets: {', '.join(valid_targets)}")

    return CopyCommand(targets=[Target(name) for name in unique_targets], force=force)
