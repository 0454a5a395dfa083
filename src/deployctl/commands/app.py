"""Command group: applications."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deployctl.commands._base import DeployGroup

if TYPE_CHECKING:
    from deployctl.commands._context import AppContext


@click.group(
    "app",
    cls=DeployGroup,
    examples="""\
  deployctl app name ../../python-flask-docker
  deployctl --json app name ./services/api/""",
)
def app_group() -> None:
    """Inspect applications."""


@app_group.command(
    examples="""\
  deployctl -q app name "$PWD"
  deployctl app name ~/src/python-flask-docker""",
)
@click.argument("path", type=click.Path(path_type=str))
@click.pass_obj
def name(app: AppContext, path: str) -> None:
    """Print the application name derived from PATH.

    The name is the final component of PATH. PATH is never opened.
    """
    from deployctl.services.application import application_from_path

    app.emit(application_from_path(path))
