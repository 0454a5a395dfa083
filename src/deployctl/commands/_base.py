"""Click command and group classes that take an ``examples=`` text.

The text is shown by an eager ``--examples`` flag rather than folded into
``--help``, so help output stays short.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Turn an ``examples=`` keyword into an ``--examples`` flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))


def _examples_option(text: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Usage examples for {ctx.command_path}:")
            click.echo(text.rstrip())
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class DeployCommand(ExamplesMixin, click.Command):
    """A command that may carry usage examples."""


class DeployGroup(ExamplesMixin, click.Group):
    """A group whose subcommands default to :class:`DeployCommand`."""

    command_class = DeployCommand
