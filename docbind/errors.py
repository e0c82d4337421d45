"""Exception hierarchy for docbind runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class DocbindError(RuntimeError):
    """Base class for every failure that aborts a docbind run."""


class ConfigError(DocbindError):
    """Raised when the configuration file cannot be parsed."""


class GlobError(DocbindError):
    """Raised when a discovery pattern is syntactically invalid."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class InvalidArgumentError(DocbindError):
    """Raised when the embed directive is called with malformed arguments."""


class ResolutionError(DocbindError):
    """Raised when a bare file name cannot be resolved to a single path."""

    def __init__(self, message: str, *, root: Path, name: str) -> None:
        super().__init__(message)
        self.root = root
        self.name = name


class PathNotFoundError(ResolutionError):
    """No entry with the requested name exists below the search root."""

    def __init__(self, *, root: Path, name: str) -> None:
        super().__init__(
            f"Found zero files named {name!r} below {str(root)!r}",
            root=root,
            name=name,
        )


class AmbiguousPathError(ResolutionError):
    """More than one entry with the requested name exists below the search root."""

    def __init__(self, *, root: Path, name: str, matches: Sequence[Path]) -> None:
        listing = ", ".join(str(match) for match in matches)
        super().__init__(
            f"Found {len(matches)} files named {name!r} below {str(root)!r}: {listing}",
            root=root,
            name=name,
        )
        self.matches = list(matches)


class DocumentIOError(DocbindError):
    """Raised when a source or embedded file cannot be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Unable to read {str(path)!r}: {cause}")
        self.path = path


class RenderError(DocbindError):
    """Raised when a document fails to parse or render as a template."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Failed to render {name!r}: {cause}")
        self.name = name
        self.cause = cause


class SinkError(DocbindError):
    """Raised when the external document renderer cannot be run or exits non-zero."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


__all__ = [
    "AmbiguousPathError",
    "ConfigError",
    "DocbindError",
    "DocumentIOError",
    "GlobError",
    "InvalidArgumentError",
    "PathNotFoundError",
    "RenderError",
    "ResolutionError",
    "SinkError",
]
