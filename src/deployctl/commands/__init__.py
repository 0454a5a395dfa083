"""Subcommand modules for deployctl.

register_commands() uses deferred imports to keep ``deployctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from deployctl.commands.app import app_group
    from deployctl.commands.project import project

    cli.add_command(app_group)
    cli.add_command(project)
