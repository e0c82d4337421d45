"""Render discovered documents as Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from jinja2 import BaseLoader, Environment, StrictUndefined, Template, TemplateNotFound

from .embedder import FileEmbedder
from .errors import DocumentIOError, RenderError
from .logging import get_logger
from .models import SourceFile

_LOGGER = get_logger("renderer")


class DocumentLoader(BaseLoader):
    """Serves registered documents to Jinja under their own path as template name."""

    def __init__(self) -> None:
        self._documents: Dict[str, Path] = {}

    def register(self, source: SourceFile) -> None:
        self._documents[source.name] = source.path

    def get_source(
        self, environment: Environment, template: str
    ) -> Tuple[str, str | None, Callable[[], bool] | None]:
        path = self._documents.get(template)
        if path is None:
            raise TemplateNotFound(template)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentIOError(path, exc) from exc
        return source, str(path), None

    def newline_sequence(self, template: str) -> str:
        """Return the line ending a registered document is written with."""
        path = self._documents.get(template)
        if path is None:
            raise TemplateNotFound(template)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DocumentIOError(path, exc) from exc
        return "\r\n" if b"\r\n" in raw else "\n"

    def list_templates(self) -> List[str]:
        return sorted(self._documents)


class Renderer:
    """Renders each document with an empty context and ``embed_file`` available."""

    def __init__(
        self,
        embedder: FileEmbedder,
        *,
        trim_blocks: bool = False,
        lstrip_blocks: bool = False,
    ) -> None:
        self._loader = DocumentLoader()
        self._env = Environment(
            loader=self._loader,
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            trim_blocks=trim_blocks,
            lstrip_blocks=lstrip_blocks,
        )
        self._env.globals[FileEmbedder.FUNCTION_NAME] = embedder
        # Jinja rewrites every source newline to newline_sequence
        self._crlf_env = self._env.overlay(newline_sequence="\r\n")

    @property
    def environment(self) -> Environment:
        return self._env

    def render_all(self, files: Sequence[SourceFile]) -> Iterator[str]:
        """Yield one rendered fragment per file, in order.

        Every file is registered and parsed before the first fragment is
        produced, so documents may include or extend each other by path and a
        syntax error anywhere aborts the run before any output.
        """
        sources = list(files)
        for source in sources:
            self._loader.register(source)
        for source in sources:
            self._load(source)
        for source in sources:
            yield self.render(source)

    def render(self, source: SourceFile) -> str:
        template = self._load(source)
        try:
            rendered = template.render()
        except Exception as exc:
            raise RenderError(source.name, exc) from exc
        _LOGGER.debug("Rendered %s (%d chars)", source.name, len(rendered))
        return rendered

    def _load(self, source: SourceFile) -> Template:
        self._loader.register(source)
        try:
            if self._loader.newline_sequence(source.name) == "\r\n":
                return self._crlf_env.get_template(source.name)
            return self._env.get_template(source.name)
        except Exception as exc:
            raise RenderError(source.name, exc) from exc


__all__ = ["DocumentLoader", "Renderer"]
