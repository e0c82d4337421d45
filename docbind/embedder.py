"""Template function that inlines another file's contents by name."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .errors import DocumentIOError, InvalidArgumentError
from .resolver import PathResolver


class FileEmbedder:
    """Callable exposed to templates as ``embed_file(path="name.ext")``.

    The embedder is bound to one :class:`PathResolver` for the whole run and
    returns the resolved file's text verbatim.
    """

    FUNCTION_NAME = "embed_file"

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    @property
    def root(self) -> Path:
        return self._resolver.root

    def __call__(self, *args: Any, **kwargs: Any) -> str:
        if args:
            raise InvalidArgumentError(
                f"{self.FUNCTION_NAME} only accepts the named argument 'path'"
            )
        return self.embed(kwargs)

    def embed(self, arguments: Mapping[str, Any]) -> str:
        """Validate directive arguments and return the embedded file's text."""
        if "path" not in arguments:
            raise InvalidArgumentError(f"{self.FUNCTION_NAME} requires a 'path' argument")
        unexpected = sorted(key for key in arguments if key != "path")
        if unexpected:
            raise InvalidArgumentError(
                f"{self.FUNCTION_NAME} got unexpected arguments: {', '.join(unexpected)}"
            )
        value = arguments["path"]
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"{self.FUNCTION_NAME} 'path' must be a string, got {type(value).__name__}"
            )
        return self.resolve(value)

    def resolve(self, name: str) -> str:
        file_path = self._resolver.find_unique(name)
        try:
            # newline="" keeps CRLF line endings byte-identical
            with file_path.open("r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentIOError(file_path, exc) from exc


__all__ = ["FileEmbedder"]
