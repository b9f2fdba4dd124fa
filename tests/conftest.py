"""Shared test fixtures for biopolymer tests."""

from pathlib import Path

import pytest

from biopolymer.alphabets import DNA
from biopolymer.core.double_strand import DnaDoubleStrand


@pytest.fixture
def dna_common():
    """Common DNA alphabet (ATGCatgc)."""
    return DNA.common()


@pytest.fixture
def dna_with_n():
    """DNA alphabet including N."""
    return DNA.with_n()


@pytest.fixture
def offset_double_strand():
    """``tttaaagggccc`` with its bottom strand shifted right by 3."""
    return DnaDoubleStrand.new("tttaaagggccc", complement_offset=3, alphabet=DNA.common())


@pytest.fixture
def fasta_file(tmp_path):
    """Write ``(label, symbols)`` records to a FASTA file and return its path."""

    def _write(records, name="input.fasta") -> Path:
        path = tmp_path / name
        path.write_text("".join(f">{label}\n{symbols}\n" for label, symbols in records))
        return path

    return _write
