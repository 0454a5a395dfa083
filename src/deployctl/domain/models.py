"""Domain models — Project, Environment, and Application.

Environments are the deployment targets of one project; applications are
named software units. Environments and applications are immutable value objects;
a Project is mutated only by appending environments.

INVARIANT: A Project exclusively owns its environments. No model holds a
back-reference to its owner.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, PrivateAttr

from deployctl.domain.paths import PathInput, name_from_path


class Environment(BaseModel):
    """A named deployment target, e.g. ``prod`` or ``staging``."""

    model_config = {"frozen": True}

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(name=name)


class Application(BaseModel):
    """A named software unit, usually named after its directory."""

    model_config = {"frozen": True}

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(name=name)

    @classmethod
    def from_path(cls, path: PathInput) -> Self:
        """Name the application after the final component of *path*.

        Raises:
            EmptyOrRootPathError: *path* has no final component.
            NonTextSegmentError: the final component is not valid UTF-8.
        """
        return cls(name_from_path(path))


class Project(BaseModel):
    """A named grouping of deployment environments.

    Environments are kept in insertion order. There is no deduplication
    and no removal. The name is fixed at construction; copies get their
    own environment list.
    """

    model_config = {"frozen": True}

    name: str
    _envs: list[Environment] = PrivateAttr(default_factory=list)

    def __init__(self, name: str) -> None:
        super().__init__(name=name)

    @property
    def envs(self) -> tuple[Environment, ...]:
        """Read-only view of the environments, in insertion order."""
        return tuple(self._envs)

    def has_env(self) -> bool:
        """Whether at least one environment has been added."""
        return bool(self._envs)

    def push_env(self, env: Environment) -> None:
        """Append *env* to the project."""
        self._envs.append(env)

    def count_envs(self) -> int:
        """Number of environments, 0 for a fresh project."""
        return len(self._envs)

    def __copy__(self) -> Self:
        copied = super().__copy__()
        copied._envs = list(self._envs)
        return copied
