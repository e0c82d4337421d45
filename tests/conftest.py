from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.tree_builder import TreeBuilder


@pytest.fixture
def tree_builder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TreeBuilder:
    """Provide a document tree rooted under tmp_path, with the cwd set to it."""
    builder = TreeBuilder(tmp_path)
    monkeypatch.chdir(builder.path())
    return builder


@pytest.fixture(autouse=True)
def _reset_docbind_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("docbind")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
