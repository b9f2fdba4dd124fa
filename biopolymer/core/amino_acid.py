"""Amino-acid sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from biopolymer.alphabets import AMINO_ACID
from biopolymer.core.sequence import Sequence

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.conversions.base import Converter


@dataclass(frozen=True, slots=True)
class AminoAcidSequence(Sequence):
    """A polypeptide as a plain sequence of residue codes.

    No default conversions are defined from amino acids, since choosing
    codons is application-specific. Pass a custom converter to
    :func:`biopolymer.polymer.convert` instead.
    """

    family = AMINO_ACID

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.nucleic import AminoAcidConverter

        return AminoAcidConverter
