"""Single DNA and RNA strands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from biopolymer.alphabets import DNA, RNA
from biopolymer.core.sequence import Sequence
from biopolymer import validation

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.alphabets import Alphabet
    from biopolymer.conversions.base import Converter

StrandT = TypeVar("StrandT", bound="NucleicStrand")


@dataclass(frozen=True, slots=True)
class NucleicStrand(Sequence):
    """A single nucleic-acid strand that can be complemented.

    The complement alphabet is resolved in this order: the explicit
    argument, then the alphabet carried by the strand, then the family
    default (``common``).
    """

    def resolve_alphabet(self, alphabet: Alphabet | None = None) -> Alphabet:
        if alphabet is not None:
            return alphabet
        if self.alphabet is not None:
            return self.alphabet
        return self.family.default_alphabet()

    def complement(self: StrandT, alphabet: Alphabet | None = None) -> StrandT:
        """Return the complementary strand, read in the same direction.

        Raises
        ------
        AlphabetMismatchError
            Listing every symbol without a complement in the resolved alphabet.
        """
        resolved = self.resolve_alphabet(alphabet)
        paired = validation.complement(self.symbols, self.family, resolved)
        return type(self).new(paired, label=self.label, alphabet=resolved)

    def reverse_complement(self: StrandT, alphabet: Alphabet | None = None) -> StrandT:
        """Return the complementary strand read 5' to 3'."""
        resolved = self.resolve_alphabet(alphabet)
        paired = validation.reverse_complement(self.symbols, self.family, resolved)
        return type(self).new(paired, label=self.label, alphabet=resolved)


@dataclass(frozen=True, slots=True)
class DnaStrand(NucleicStrand):
    """A single DNA strand.

    >>> DnaStrand.new("attgacgt").complement().symbols
    'taactgca'
    """

    family = DNA

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.nucleic import DnaConverter

        return DnaConverter


@dataclass(frozen=True, slots=True)
class RnaStrand(NucleicStrand):
    """A single RNA strand."""

    family = RNA

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.nucleic import RnaConverter

        return RnaConverter
