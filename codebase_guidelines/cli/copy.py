""" codebase-guidelines copy command. """

import click
from pathlib import Path
from typing import List
import codebase_guidelines.config as config
from codebase_guidelines.cli.parser import parse_copy_args
from codebase_guidelines.cli.usage import usage_text
from codebase_guidelines.copier import copy_directory
from codebase_guidelines.schemas.commands import CopyResult, HelpRequest


def report(copied: List[CopyResult], output_root: Path) -> None:
    """ Print the summary line followed by one line per copied directory. """
    noun = "directory" if len(copied) == 1 else "directories"
    click.echo(f"Copied {len(copied)} {noun} to {output_root}")
    for entry in copied:
        click.echo(f"- {entry.destination.name} -> {entry.destination}")


class RawArgsCommand(click.Command):
    """
    Command handing its arguments to the callback as raw ``tokens``.

    click's option parser is bypassed, so every token (including a bare ``--``)
    reaches the callback unchanged and in order.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.params["tokens"] = tuple(args)
        ctx.args = []
        return ctx.args


@click.command(name='copy', cls=RawArgsCommand, add_help_option=False)
def copy_guidelines(tokens):
    """
    Copy the guideline directories of TARGETS into the output root.

    The output root is created under the current working directory if it does not exist.
    """
    parsed = parse_copy_args(tokens)
    if isinstance(parsed, HelpRequest):
        click.echo(usage_text())
        return

    output_root = Path.cwd() / config.OUTPUT_DIRECTORY_NAME
    copied = [
        copy_directory(target, config.PACKAGE_ROOT, output_root, force=parsed.force)
        for target in parsed.targets
    ]
    report(copied, output_root)
