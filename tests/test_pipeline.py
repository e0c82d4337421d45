"""End-to-end tests for docbind.pipeline."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from docbind.assembler import Assembler
from docbind.config import BindConfig, TemplateConfig
from docbind.errors import RenderError
from docbind.pipeline import Binder
from docbind.sink import StdoutSink


def _write_book(tree_builder) -> None:
    tree_builder.write(
        {
            "intro.md": """
                # Introduction

                {{ embed_file(path="snippet.txt") }}
            """,
            "chapters/ch1.md": "# Chapter 1\n\nIt begins.\n",
            "assets/code/snippet.txt": "def hello():\n    return 'hi'\n",
        }
    )


def test_bind_places_shallow_files_first_with_embeds_inlined(tree_builder) -> None:
    _write_book(tree_builder)

    result = Binder().bind("**/*.md")

    intro = "# Introduction\n\ndef hello():\n    return 'hi'\n\n"
    chapter = "# Chapter 1\n\nIt begins.\n"
    assert result.document == intro + Assembler.SEPARATOR + chapter
    assert [file.depth for file in result.files] == [1, 2]


def test_bind_is_idempotent_for_unchanged_tree(tree_builder) -> None:
    _write_book(tree_builder)

    first = Binder().bind("**/*.md").document
    second = Binder().bind("**/*.md").document

    assert first == second


def test_bind_accepts_a_directory(tree_builder) -> None:
    _write_book(tree_builder)

    result = Binder().bind(".")

    assert [Path(file.name).as_posix() for file in result.files] == ["intro.md", "chapters/ch1.md"]


def test_bind_with_no_matches_yields_empty_document(tree_builder) -> None:
    stream = io.StringIO()

    result = Binder().run("**/*.md", StdoutSink(stream))

    assert result.document == ""
    assert result.files == []
    assert stream.getvalue() == "\n"


def test_root_dir_scopes_embed_lookups(tree_builder) -> None:
    tree_builder.write(
        {
            "doc.md": '{{ embed_file(path="shared.txt") }}',
            "v1/shared.txt": "old",
            "v2/shared.txt": "new",
        }
    )

    assert Binder(root_dir=tree_builder.path("v2")).bind("*.md").document == "new"
    with pytest.raises(RenderError):
        Binder().bind("*.md")


def test_config_root_dir_is_used_when_no_override(tree_builder) -> None:
    tree_builder.write({"doc.md": '{{ embed_file(path="a.txt") }}', "inc/a.txt": "A"})
    config = BindConfig(root=tree_builder.path(), root_dir=tree_builder.path("inc"))

    binder = Binder(config)

    assert binder.root_dir == tree_builder.path("inc")
    assert binder.bind("*.md").document == "A"


def test_template_config_flows_into_renderer(tree_builder) -> None:
    tree_builder.write({"doc.md": "{% if true %}\nbody\n{% endif %}\n"})
    config = BindConfig(root=tree_builder.path(), templates=TemplateConfig(trim_blocks=True))

    assert Binder(config).bind("*.md").document == "body\n"


def test_render_failure_aborts_whole_run(tree_builder) -> None:
    tree_builder.write({"a.md": "fine", "b/broken.md": '{{ embed_file(path="nope.txt") }}'})
    stream = io.StringIO()

    with pytest.raises(RenderError) as excinfo:
        Binder().run("**/*.md", StdoutSink(stream))

    assert Path(excinfo.value.name).as_posix() == "b/broken.md"
    assert stream.getvalue() == ""


def test_embeds_resolve_inside_symlinked_directories(tree_builder, tmp_path) -> None:
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "snip.txt").write_text("S", encoding="utf-8")
    os.symlink(shared, tree_builder.path("linked"), target_is_directory=True)
    tree_builder.write({"a.md": '{{ embed_file(path="snip.txt") }}'})

    assert Binder().bind("*.md").document == "S"
