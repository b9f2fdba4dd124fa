"""Biopolymer public interface.

Sequence kinds live under ``biopolymer.core``, alphabets under
``biopolymer.alphabets`` and the conversion registry under
``biopolymer.conversions``. The most common names are re-exported here.
"""

from __future__ import annotations

from .alphabets import AMINO_ACID, DNA, RNA, Alphabet, AlphabetFamily, MoleculeKind, get_alphabet, parse_alphabet
from .conversions import Converter
from .core import (
    GAP,
    AminoAcidSequence,
    DnaDoubleStrand,
    DnaStrand,
    DoubleStrand,
    KmerPartition,
    RnaDoubleStrand,
    RnaStrand,
    Sequence,
    construct_complement,
)
from .errors import PolymerError
from .polymer import convert, is_valid, validate

__all__ = [
    "AMINO_ACID",
    "DNA",
    "GAP",
    "RNA",
    "Alphabet",
    "AlphabetFamily",
    "AminoAcidSequence",
    "Converter",
    "DnaDoubleStrand",
    "DnaStrand",
    "DoubleStrand",
    "KmerPartition",
    "MoleculeKind",
    "PolymerError",
    "RnaDoubleStrand",
    "RnaStrand",
    "Sequence",
    "construct_complement",
    "convert",
    "get_alphabet",
    "is_valid",
    "parse_alphabet",
    "validate",
]

__version__ = "0.1.0"
