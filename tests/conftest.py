"""Shared pytest fixtures for deployctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    deploy = logging.getLogger("deployctl")
    deploy_level = deploy.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    deploy.setLevel(deploy_level)
    structlog.reset_defaults()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD, free of DEPLOYCTL_* env vars.

    Use via ``@pytest.mark.usefixtures("project_root")`` on command test
    classes, or request it directly to write a ``deployctl.toml``.
    """
    root = tmp_path / "shop"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.delenv("DEPLOYCTL_CONFIG", raising=False)
    monkeypatch.delenv("DEPLOYCTL_PROJECT__NAME", raising=False)
    monkeypatch.delenv("DEPLOYCTL_PROJECT__ENVS", raising=False)
    return root


def write_config(root: Path, text: str) -> Path:
    """Write a deployctl.toml into *root* and return its path."""
    path = root / "deployctl.toml"
    path.write_text(text, encoding="utf-8")
    return path
