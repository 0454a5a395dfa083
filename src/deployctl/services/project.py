"""ProjectService — build a project and add environments to it.

The service owns one :class:`~deployctl.domain.models.Project`. Appends
go through a lock so the project keeps a single writer even if the
service is shared between threads.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import structlog

from deployctl.domain.models import Environment, Project
from deployctl.domain.paths import PathNameError, name_from_path
from deployctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from deployctl.config.models import ProjectConfig

logger = structlog.get_logger(__name__)

DEFAULT_PROJECT_NAME = "project"


def project_payload(project: Project) -> dict[str, Any]:
    """Summarize *project* for a ServiceResult."""
    return {
        "name": project.name,
        "envs": [env.name for env in project.envs],
        "count": project.count_envs(),
        "has_env": project.has_env(),
    }


class ProjectService:
    """Operations on a single project.

    Usage::

        service = ProjectService.from_config(settings.project, root=settings.project_root)
        result = service.add_envs(["staging", "prod"])
    """

    def __init__(self, project: Project) -> None:
        self._project = project
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: ProjectConfig,
        *,
        root: Path,
        name: str | None = None,
    ) -> ProjectService:
        """Build a project from its config section.

        *name* overrides the configured project name. Without either, the
        project is named after *root*. Configured environments are added
        in the order they are listed.
        """
        project = Project(name or config.name or _dir_name(root))
        for env_name in config.envs:
            project.push_env(Environment(env_name))
        logger.debug("project loaded", project=project.name, envs=project.count_envs())
        return cls(project)

    @property
    def project(self) -> Project:
        return self._project

    def push_env(self, env: Environment) -> None:
        """Append *env* under the write lock."""
        with self._lock:
            self._project.push_env(env)

    def add_envs(self, names: Iterable[str]) -> ServiceResult:
        """Append one environment per name, in order."""
        names = list(names)
        if not names:
            return ServiceResult(
                ok=False,
                op="add_env",
                error=ServiceError(
                    code="NO_ENVIRONMENTS",
                    message="At least one environment name is required",
                ),
            )

        warnings: list[str] = []
        existing = {env.name for env in self._project.envs}
        for env_name in names:
            if env_name in existing:
                warnings.append(f"Environment '{env_name}' is already in the project")
            self.push_env(Environment(env_name))
            existing.add(env_name)
            logger.debug("environment added", project=self._project.name, env=env_name)

        return ServiceResult(
            ok=True,
            op="add_env",
            data=project_payload(self._project),
            warnings=warnings,
        )

    def show(self) -> ServiceResult:
        """Describe the project and its environments."""
        return ServiceResult(ok=True, op="project_show", data=project_payload(self._project))


def _dir_name(root: Path) -> str:
    try:
        return name_from_path(root)
    except PathNameError:
        return DEFAULT_PROJECT_NAME
