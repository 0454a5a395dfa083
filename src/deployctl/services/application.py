"""Application naming from filesystem paths.

Wraps :func:`deployctl.domain.paths.name_from_path` so that malformed
paths, which typically come from command-line arguments or directory
listings, come back as a failed ServiceResult instead of an exception.
"""

from __future__ import annotations

import os

import structlog

from deployctl.domain.models import Application
from deployctl.domain.paths import PathInput, PathNameError
from deployctl.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)


def display_path(path: PathInput) -> str:
    """Render *path* as printable text, escaping undecodable bytes."""
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        return raw.decode("utf-8", "backslashreplace")
    return raw.encode("utf-8", "backslashreplace").decode("utf-8")


def path_error(op: str, exc: PathNameError) -> ServiceResult:
    """Convert a path error into a failed ServiceResult."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.code,
            message=str(exc),
            detail={"path": display_path(exc.path)},
        ),
    )


def application_from_path(path: PathInput) -> ServiceResult:
    """Name an application after the final component of *path*."""
    op = "app_name"
    try:
        app = Application.from_path(path)
    except PathNameError as exc:
        logger.warning("path cannot name an application", path=repr(path), code=exc.code)
        return path_error(op, exc)

    logger.debug("application named from path", name=app.name)
    return ServiceResult(
        ok=True,
        op=op,
        data={"name": app.name, "path": display_path(path)},
    )
