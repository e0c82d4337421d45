"""Core data models shared across docbind components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class SourceFile:
    """A discovered document, identified by the path string the glob produced."""

    path: Path
    name: str = field(init=False)
    depth: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", str(self.path))
        object.__setattr__(self, "depth", len(self.path.parts))

    @classmethod
    def from_match(cls, match: str) -> "SourceFile":
        return cls(Path(match))

    def sort_key(self) -> Tuple[int, Tuple[str, ...]]:
        """Shallower files first, then component-wise path order."""
        return (self.depth, self.path.parts)
