"""Discovery and ordering of the documents that make up a bound output."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Dict, List

from .errors import GlobError
from .logging import get_logger
from .models import SourceFile

_LOGGER = get_logger("discovery")

_SEPARATORS = {"/", os.sep}
_MARKDOWN_GLOB = os.path.join("**", "*.md")


class DocumentSet:
    """Expands a glob pattern into an ordered list of source files."""

    def discover(self, pattern: str) -> List[SourceFile]:
        """Return every file matching ``pattern``, shallowest first.

        Files at the same depth are ordered by path, compared component by
        component, so the result does not depend on filesystem enumeration
        order. An empty match set is returned as an empty list.
        """
        validate_pattern(pattern)

        files: Dict[str, SourceFile] = {}
        for match in glob.glob(pattern, recursive=True, include_hidden=True):
            if not os.path.isfile(match):
                _LOGGER.debug("Skipping non-file match %s", match)
                continue
            source = SourceFile.from_match(match)
            files.setdefault(source.name, source)

        ordered = sorted(files.values(), key=SourceFile.sort_key)
        if ordered:
            _LOGGER.debug("Discovered %d file(s) for %s", len(ordered), pattern)
        else:
            _LOGGER.warning("No files matched %s; the document will be empty", pattern)
        return ordered

    @staticmethod
    def expand_target(target: str) -> str:
        """Turn a directory into a pattern for all markdown files beneath it."""
        candidate = Path(target)
        if candidate.is_dir():
            return os.path.join(glob.escape(str(candidate)), _MARKDOWN_GLOB)
        return target


def validate_pattern(pattern: str) -> None:
    """Reject patterns the glob expansion would silently misinterpret."""
    if not pattern:
        raise GlobError(pattern, "pattern is empty")

    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            end = index
            while end < length and pattern[end] == "*":
                end += 1
            run = end - index
            if run > 2:
                raise GlobError(pattern, "wildcards are either regular `*` or recursive `**`")
            if run == 2:
                starts_component = index == 0 or pattern[index - 1] in _SEPARATORS
                ends_component = end == length or pattern[end] in _SEPARATORS
                if not (starts_component and ends_component):
                    raise GlobError(
                        pattern, "recursive wildcards must form a single path component"
                    )
            index = end
            continue
        if char == "[":
            start = index + 1
            if start < length and pattern[start] == "!":
                start += 1
            # a leading `]` is a literal member of the class
            if start < length and pattern[start] == "]":
                start += 1
            close = pattern.find("]", start)
            if close == -1:
                raise GlobError(pattern, "unterminated character class")
            index = close + 1
            continue
        index += 1


__all__ = ["DocumentSet", "validate_pattern"]
