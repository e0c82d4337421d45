"""Configuration loading for docbind (.docbind.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".docbind.yml"


@dataclass
class PdfConfig:
    """Settings for the pandoc PDF sink."""

    executable: str = "pandoc"
    input_format: str = "markdown"
    output: Path = Path("output.pdf")
    flags: List[str] = field(default_factory=list)


@dataclass
class TemplateConfig:
    """Jinja whitespace handling for rendered documents."""

    trim_blocks: bool = False
    lstrip_blocks: bool = False


@dataclass
class BindConfig:
    """Represents the settings defined in .docbind.yml."""

    root: Path
    root_dir: Optional[Path] = None
    pdf: PdfConfig = field(default_factory=PdfConfig)
    templates: TemplateConfig = field(default_factory=TemplateConfig)


def load_config(config_path: Path) -> BindConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BindConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    root_dir_str = _as_str(data.get("root_dir"))
    root_dir = root / root_dir_str if root_dir_str else None

    pdf = PdfConfig()
    pdf_data = _as_dict(data.get("pdf"))
    if pdf_data:
        pdf.executable = _as_str(pdf_data.get("executable")) or pdf.executable
        pdf.input_format = _as_str(pdf_data.get("input_format")) or pdf.input_format
        output_str = _as_str(pdf_data.get("output"))
        if output_str:
            pdf.output = root / output_str
        pdf.flags = _as_str_list(pdf_data.get("flags"))

    templates = TemplateConfig()
    template_data = _as_dict(data.get("templates"))
    if template_data:
        templates.trim_blocks = _as_bool(template_data.get("trim_blocks")) or False
        templates.lstrip_blocks = _as_bool(template_data.get("lstrip_blocks")) or False

    return BindConfig(root=root, root_dir=root_dir, pdf=pdf, templates=templates)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
