"""Full chemical names for single monomers.

>>> nucleic_acid_name("a")
'adenine'
>>> amino_acid_name("X")
'any amino acid'

Lookups are case-insensitive and return ``None`` for unknown symbols.
Ambiguity codes have no nucleotide name yet.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final

_DNA_NAMES: Final = {
    "a": "adenine",
    "c": "cytosine",
    "g": "guanine",
    "t": "thymine",
}

_RNA_NAMES: Final = {
    "a": "adenine",
    "c": "cytosine",
    "g": "guanine",
    "u": "uracil",
}

NUCLEIC_ACID_NAMES: Final[Mapping[str, str]] = MappingProxyType({**_DNA_NAMES, **_RNA_NAMES})

AMINO_ACID_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "a": "alanine",
        "r": "arginine",
        "n": "asparagine",
        "d": "aspartic acid",
        "c": "cysteine",
        "q": "glutamine",
        "e": "glutamic acid",
        "g": "glycine",
        "h": "histidine",
        "i": "isoleucine",
        "l": "leucine",
        "k": "lysine",
        "m": "methionine",
        "f": "phenylalanine",
        "p": "proline",
        "o": "pyrrolysine",
        "s": "serine",
        "u": "selenocysteine",
        "t": "threonine",
        "w": "tryptophan",
        "y": "tyrosine",
        "v": "valine",
        "b": "aspartic acid or asparagine",
        "z": "glutamic acid or glutamine",
        "j": "leucine or isoleucine",
        "x": "any amino acid",
    }
)


def _single(monomer: str | Iterable[str]) -> str:
    symbols = monomer if isinstance(monomer, str) else "".join(monomer)
    if len(symbols) != 1:
        raise ValueError(f"{monomer!r} is not a monomer")
    return symbols.lower()


def _lookup(monomer: str | Iterable[str], table: Mapping[str, str]) -> str | None:
    return table.get(_single(monomer))


def nucleic_acid_name(monomer: str | Iterable[str]) -> str | None:
    """Name a DNA or RNA nucleotide.

    ``monomer`` may be a one-character string or a one-element chunk, such
    as a 1-mer from :meth:`~biopolymer.core.sequence.Sequence.kmers`.

    Raises
    ------
    ValueError
        If more than one symbol is given.
    """
    return _lookup(monomer, NUCLEIC_ACID_NAMES)


def dna_name(monomer: str | Iterable[str]) -> str | None:
    return _lookup(monomer, _DNA_NAMES)


def rna_name(monomer: str | Iterable[str]) -> str | None:
    return _lookup(monomer, _RNA_NAMES)


def amino_acid_name(monomer: str | Iterable[str]) -> str | None:
    """Name an amino acid, including the IUPAC ambiguity codes ``B``, ``Z``, ``J`` and ``X``."""
    return _lookup(monomer, AMINO_ACID_NAMES)


__all__ = [
    "AMINO_ACID_NAMES",
    "NUCLEIC_ACID_NAMES",
    "amino_acid_name",
    "dna_name",
    "nucleic_acid_name",
    "rna_name",
]
