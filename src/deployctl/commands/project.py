"""Command group: projects and their environments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deployctl.commands._base import DeployGroup

if TYPE_CHECKING:
    from deployctl.commands._context import AppContext


def _env_name(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> tuple[str, ...]:
    """Reject empty environment names."""
    for value in values:
        if not value.strip():
            raise click.BadParameter("environment name cannot be empty")
    return values


@click.group(
    cls=DeployGroup,
    examples="""\
  deployctl project show
  deployctl project show myproject --env staging --env prod
  deployctl project add-env qa""",
)
def project() -> None:
    """Inspect a project and its environments."""


@project.command(
    examples="""\
  deployctl project show
  deployctl --json project show myproject --env prod""",
)
@click.argument("name", required=False)
@click.option(
    "--env",
    "envs",
    multiple=True,
    callback=_env_name,
    help="Add an environment (repeatable, kept in order).",
)
@click.pass_obj
def show(app: AppContext, name: str | None, envs: tuple[str, ...]) -> None:
    """Show the configured project, optionally renamed to NAME."""
    service = app.project_service(name)
    warnings = service.add_envs(envs).warnings if envs else []
    app.emit(service.show().model_copy(update={"warnings": warnings}))


@project.command(
    "add-env",
    examples="""\
  deployctl project add-env staging prod
  deployctl --json project add-env qa""",
)
@click.argument("envs", nargs=-1, required=True, callback=_env_name)
@click.pass_obj
def add_env(app: AppContext, envs: tuple[str, ...]) -> None:
    """Append ENVS to the configured project, in order."""
    app.emit(app.project_service().add_envs(envs))
