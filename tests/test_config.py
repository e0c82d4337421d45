"""Tests for docbind.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbind.config import BindConfig, PdfConfig, TemplateConfig, load_config
from docbind.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, BindConfig)
    assert config.root == tmp_path.resolve()
    assert config.root_dir is None
    assert config.pdf == PdfConfig()
    assert config.pdf.output == Path("output.pdf")
    assert config.templates == TemplateConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".docbind.yml"
    config_file.write_text(
        """
root_dir: "docs"
pdf:
  executable: "/usr/local/bin/pandoc"
  input_format: "gfm"
  output: "build/book.pdf"
  flags:
    - "--toc"
    - "--number-sections"
templates:
  trim_blocks: true
  lstrip_blocks: "yes"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.root_dir == root / "docs"
    assert config.pdf.executable == "/usr/local/bin/pandoc"
    assert config.pdf.input_format == "gfm"
    assert config.pdf.output == root / "build" / "book.pdf"
    assert config.pdf.flags == ["--toc", "--number-sections"]
    assert config.templates.trim_blocks is True
    assert config.templates.lstrip_blocks is True


def test_load_config_accepts_single_flag_string(tmp_path: Path) -> None:
    (tmp_path / ".docbind.yml").write_text("pdf:\n  flags: --toc\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.pdf.flags == ["--toc"]
    assert config.pdf.executable == "pandoc"


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".docbind.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).root_dir is None


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".docbind.yml").write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_reports_yaml_syntax_errors(tmp_path: Path) -> None:
    (tmp_path / ".docbind.yml").write_text("pdf: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
