"""
codebase-guidelines Command Line Interface.

Usage: codebase-guidelines copy <target...> [--force]
Help: codebase-guidelines --help


Becomes available after installing codebase-guidelines (after cloning the repository locally) like

> pip install .

or (during development)

> pip install -e .
"""

import click
from codebase_guidelines.cli.copy import copy_guidelines
from codebase_guidelines.cli.usage import usage_text
from codebase_guidelines.errors import ArgumentError


class GuidelinesGroup(click.Group):
    """ Command group reporting unknown commands as argument errors. """

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None:
            raise ArgumentError(f"Unknown command: {cmd_name}")
        return super().resolve_command(ctx, args)

    def parse_args(self, ctx, args):
        # click drops a leading "--" as end-of-options
        if args and args[0] == "--":
            raise ArgumentError("Unknown command: --")
        return super().parse_args(ctx, args)


def show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """ Print the usage text and stop processing. """
    if not value or ctx.resilient_parsing:
        return
    click.echo(usage_text())
    ctx.exit()


@click.group(
    cls=GuidelinesGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
@click.option('-h', '--help', is_flag=True, expose_value=False, is_eager=True,
              callback=show_help, help='Show this help')
@click.pass_context
def cli(ctx: click.Context) -> None:
    """ Copy codebase architecture guidelines into the current directory. """
    if ctx.invoked_subcommand is None:
        click.echo(usage_text())


cli.add_command(copy_guidelines)


def main():
    """ Command line interface of codebase-guidelines. """
    cli()


if __name__ == '__main__':
    main()
