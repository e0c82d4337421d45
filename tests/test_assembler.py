"""Tests for docbind.assembler."""

from __future__ import annotations

from docbind.assembler import Assembler


def test_assemble_empty_sequence_is_empty_document() -> None:
    assert Assembler().assemble([]) == ""


def test_assemble_joins_with_separator() -> None:
    assert Assembler().assemble(["a", "b", "c"]) == "a\n\n * * * \n\nb\n\n * * * \n\nc"


def test_assemble_single_fragment_has_no_separator() -> None:
    assert Assembler().assemble(["only\n"]) == "only\n"


def test_assemble_consumes_generators_in_order() -> None:
    fragments = (text for text in ["first", "second"])

    assert Assembler().assemble(fragments) == "first" + Assembler.SEPARATOR + "second"
