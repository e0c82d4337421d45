"""Pipeline orchestration: discover, render, assemble, deliver."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .assembler import Assembler
from .config import BindConfig
from .discovery import DocumentSet
from .embedder import FileEmbedder
from .logging import get_logger
from .models import SourceFile
from .renderer import Renderer
from .resolver import PathResolver
from .sink import DocumentSink

_LOGGER = get_logger("pipeline")


@dataclass
class BindResult:
    """Outcome of assembling one document collection."""

    document: str
    files: List[SourceFile]
    root_dir: Path


class Binder:
    """Coordinates one run over a static set of documents."""

    def __init__(
        self,
        config: BindConfig | None = None,
        *,
        root_dir: Path | None = None,
        document_set: DocumentSet | None = None,
        assembler: Assembler | None = None,
    ) -> None:
        self.config = config or BindConfig(root=Path.cwd())
        self.root_dir = Path(root_dir or self.config.root_dir or Path.cwd())
        self._document_set = document_set or DocumentSet()
        self._assembler = assembler or Assembler()

    def bind(self, target: str) -> BindResult:
        """Assemble every document matched by ``target`` into one string."""
        pattern = self._document_set.expand_target(target)
        files = self._document_set.discover(pattern)
        renderer = self.build_renderer()
        document = self._assembler.assemble(renderer.render_all(files))
        _LOGGER.info("Assembled %d document(s) from %s", len(files), pattern)
        return BindResult(document=document, files=files, root_dir=self.root_dir)

    def run(self, target: str, sink: DocumentSink) -> BindResult:
        result = self.bind(target)
        sink.write(result.document)
        return result

    def build_renderer(self) -> Renderer:
        embedder = FileEmbedder(PathResolver(self.root_dir))
        return Renderer(
            embedder,
            trim_blocks=self.config.templates.trim_blocks,
            lstrip_blocks=self.config.templates.lstrip_blocks,
        )


__all__ = ["BindResult", "Binder"]
