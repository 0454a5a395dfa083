"""Pydantic models for the sections of deployctl.toml.

The file is sparse: each section carries its own defaults and the TOML
only holds overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    name: str | None = None
    envs: list[str] = Field(default_factory=list)
