"""Bind a collection of templated markdown documents into one document."""

from .assembler import Assembler
from .discovery import DocumentSet
from .embedder import FileEmbedder
from .models import SourceFile
from .pipeline import BindResult, Binder
from .renderer import Renderer
from .resolver import PathResolver

__all__ = [
    "Assembler",
    "BindResult",
    "Binder",
    "DocumentSet",
    "FileEmbedder",
    "PathResolver",
    "Renderer",
    "SourceFile",
]
