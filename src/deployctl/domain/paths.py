"""Application names from filesystem paths.

Pure path-string manipulation: no file I/O ever happens here. The final
component of the path becomes the name, following the platform's path
semantics (trailing separators and ``.`` components are ignored).

Two failure modes, both recoverable:
- The path has no final component (``""``, ``"/"``, ``"a/.."``).
- The final component is not valid UTF-8 text.
"""

from __future__ import annotations

import os
from pathlib import PurePath

type PathInput = str | bytes | os.PathLike[str] | os.PathLike[bytes]


class PathNameError(ValueError):
    """A path that cannot name an application."""

    code = "INVALID_PATH"

    def __init__(self, path: PathInput, message: str) -> None:
        super().__init__(message)
        self.path = path


class EmptyOrRootPathError(PathNameError):
    """The path has no final component."""

    code = "EMPTY_OR_ROOT_PATH"

    def __init__(self, path: PathInput) -> None:
        super().__init__(path, f"Path has no final component: {path!r}")


class NonTextSegmentError(PathNameError):
    """The final path component is not representable as text."""

    code = "NON_TEXT_SEGMENT"

    def __init__(self, path: PathInput) -> None:
        super().__init__(path, f"Final path component is not valid UTF-8: {path!r}")


def name_from_path(path: PathInput) -> str:
    """Return the final component of *path* as text.

    Examples:
        >>> name_from_path("../../python-flask-docker")
        'python-flask-docker'
        >>> name_from_path("apps/web/")
        'web'

    Raises:
        EmptyOrRootPathError: *path* is empty, a root, or ends in ``..``.
        NonTextSegmentError: the final component is not valid UTF-8.
    """
    try:
        raw = os.fsdecode(path)
    except UnicodeDecodeError as exc:
        raise NonTextSegmentError(path) from exc

    name = PurePath(raw).name
    if not name or name == "..":
        raise EmptyOrRootPathError(path)

    # surrogateescape smuggles undecodable bytes through as lone surrogates
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise NonTextSegmentError(path) from exc
    return name
