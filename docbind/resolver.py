"""Resolve bare file names to a unique path below a search root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Set, Tuple

from .errors import AmbiguousPathError, InvalidArgumentError, PathNotFoundError
from .logging import get_logger

_LOGGER = get_logger("resolver")


class PathResolver:
    """Looks up entries by exact file name anywhere below ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def find_unique(self, name: str) -> Path:
        """Return the single entry named ``name`` below the root.

        Raises :class:`PathNotFoundError` when nothing matches and
        :class:`AmbiguousPathError` when more than one entry does. The tree is
        walked on every call.
        """
        if not name or "/" in name or (os.sep != "/" and os.sep in name):
            raise InvalidArgumentError(
                f"Expected a bare file name to look up below {str(self.root)!r}, got {name!r}"
            )

        matches = self.find_all(name)
        if not matches:
            raise PathNotFoundError(root=self.root, name=name)
        if len(matches) > 1:
            raise AmbiguousPathError(root=self.root, name=name, matches=matches)
        _LOGGER.debug("Resolved %s to %s", name, matches[0])
        return matches[0]

    def find_all(self, name: str) -> List[Path]:
        matches: List[Path] = []
        visited: Set[Tuple[int, int]] = set()
        for dirpath, dirnames, filenames in os.walk(self.root, followlinks=True):
            stat = os.stat(dirpath)
            if (stat.st_dev, stat.st_ino) in visited:
                # reached again through a symlink; stop before it cycles
                dirnames[:] = []
                continue
            visited.add((stat.st_dev, stat.st_ino))
            for entry in (*dirnames, *filenames):
                if entry == name:
                    matches.append(Path(dirpath) / entry)
        return sorted(matches)


__all__ = ["PathResolver"]
