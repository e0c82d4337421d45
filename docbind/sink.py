"""Destinations for an assembled document: stdout or an external renderer."""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, TextIO

from .config import PdfConfig
from .errors import SinkError
from .logging import get_logger

_LOGGER = get_logger("sink")

SinkRunner = Callable[[Sequence[str], str], "subprocess.CompletedProcess[str]"]


class DocumentSink(Protocol):
    """Consumes the assembled document."""

    def write(self, document: str) -> None:
        ...


class StdoutSink:
    """Prints the document followed by a newline."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write(self, document: str) -> None:
        print(document, file=self._stream or sys.stdout)


class PandocSink:
    """Feeds the document to pandoc on stdin and waits for it to finish."""

    def __init__(
        self,
        config: PdfConfig | None = None,
        *,
        output: Path | None = None,
        extra_flags: Iterable[str] = (),
        runner: SinkRunner | None = None,
    ) -> None:
        self._config = config or PdfConfig()
        self.output = output or self._config.output
        self.flags: List[str] = [*self._config.flags, *extra_flags]
        self._runner = runner or self._default_runner

    def command(self) -> List[str]:
        return [
            self._config.executable,
            "-f",
            self._config.input_format,
            "-o",
            str(self.output),
            *self.flags,
        ]

    def write(self, document: str) -> None:
        args = self.command()
        _LOGGER.info("Running %s", shlex.join(args))
        completed = self._runner(args, document)
        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            raise SinkError(
                f"{args[0]} failed with exit code {completed.returncode}: {stderr}",
                returncode=completed.returncode,
                stderr=stderr,
            )
        _LOGGER.debug("Wrote %s", self.output)

    @staticmethod
    def _default_runner(args: Sequence[str], document: str) -> "subprocess.CompletedProcess[str]":
        try:
            return subprocess.run(
                list(args),
                input=document,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as exc:
            raise SinkError(
                f"Unable to locate '{args[0]}'. Install pandoc or set pdf.executable in .docbind.yml."
            ) from exc
        except OSError as exc:
            raise SinkError(f"Unable to run '{args[0]}': {exc}") from exc


__all__ = ["DocumentSink", "PandocSink", "StdoutSink"]
