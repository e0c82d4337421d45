"""Concatenation of rendered fragments into the final document."""

from __future__ import annotations

from typing import Iterable


class Assembler:
    """Joins fragments in order with a fixed scene-break separator."""

    SEPARATOR = "\n\n * * * \n\n"

    def assemble(self, fragments: Iterable[str]) -> str:
        return self.SEPARATOR.join(fragments)


__all__ = ["Assembler"]
