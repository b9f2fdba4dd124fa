"""Exception hierarchy for biopolymer.

Every failure that depends on the data (bad symbols, lengths that do not
divide, missing conversions) is raised as a subclass of :class:`PolymerError`
carrying the complete payload, so callers can report every defect from a
single call.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.alphabets import Alphabet
    from biopolymer.validation import Mismatch


class PolymerError(Exception):
    """Base class for all biopolymer errors."""


class SeqLenMismatchError(PolymerError, ValueError):
    """The k-mer size does not evenly divide the sequence span."""

    def __init__(self, length: int, k: int) -> None:
        self.length = length
        self.k = k
        super().__init__(f"span of {length} is not divisible into {k}-mers")


class AlphabetMismatchError(PolymerError, ValueError):
    """One or more positions hold symbols outside the alphabet."""

    def __init__(self, mismatches: Iterable[Mismatch]) -> None:
        self.mismatches = tuple(mismatches)
        super().__init__(self._describe())

    def _describe(self) -> str:
        shown = ", ".join(f"{m.symbol!r}@{m.position}" for m in self.mismatches[:10])
        more = "" if len(self.mismatches) <= 10 else f" (+{len(self.mismatches) - 10} more)"
        return f"{len(self.mismatches)} symbol(s) outside alphabet: {shown}{more}"


class StrandMismatchError(AlphabetMismatchError):
    """Alphabet mismatches on one strand of a double strand."""

    def __init__(self, strand: str, mismatches: Iterable[Mismatch]) -> None:
        self.strand = strand
        super().__init__(mismatches)

    def _describe(self) -> str:
        return f"{self.strand} strand: {AlphabetMismatchError._describe(self)}"


class StrandAlphabetConflictError(PolymerError, ValueError):
    """The top and bottom strands resolve to different alphabets."""

    def __init__(self, top_alphabet: Alphabet | None, bottom_alphabet: Alphabet | None) -> None:
        self.top_alphabet = top_alphabet
        self.bottom_alphabet = bottom_alphabet
        top = top_alphabet.label if top_alphabet is not None else None
        bottom = bottom_alphabet.label if bottom_alphabet is not None else None
        super().__init__(f"strand alphabets differ: top={top}, bottom={bottom}")


class ComplementarityError(PolymerError, ValueError):
    """Aligned top/bottom symbols that are not complements of each other."""

    def __init__(self, pairs: Iterable[tuple[int, str, str]]) -> None:
        self.pairs = tuple(pairs)
        shown = ", ".join(f"{top}/{bottom}@{pos}" for pos, top, bottom in self.pairs[:10])
        super().__init__(f"{len(self.pairs)} non-complementary pair(s): {shown}")


class UnknownSymbolError(PolymerError, KeyError):
    """A symbol has no entry in the alphabet's complement table."""

    def __init__(self, symbol: str, alphabet: Alphabet) -> None:
        self.symbol = symbol
        self.alphabet = alphabet
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"no complement for {self.symbol!r} in alphabet {self.alphabet.label}"


class NoAlphabetError(PolymerError, ValueError):
    """Validation was requested but no alphabet was given or carried."""

    def __init__(self, message: str = "no alphabet given and none carried by the sequence") -> None:
        super().__init__(message)


class UndefinedConversionError(PolymerError, LookupError):
    """No default conversion exists between two sequence types."""

    def __init__(self, source: object, target: type) -> None:
        self.source = source
        self.target = target
        source_name = getattr(source, "__name__", type(source).__name__)
        super().__init__(f"no conversion defined from {source_name} to {target.__name__}")


class NoConverterError(PolymerError, TypeError):
    """The value's type exposes no converter at all."""

    def __init__(self, source: type) -> None:
        self.source = source
        super().__init__(f"{source.__name__} does not define a converter")


class NotSupportedError(PolymerError, NotImplementedError):
    """Combined top and bottom offsets cannot be derived automatically."""

    def __init__(self, top_offset: int, bottom_offset: int, message: str | None = None) -> None:
        self.top_offset = top_offset
        self.bottom_offset = bottom_offset
        super().__init__(
            message
            or f"cannot derive a complement for offsets (top={top_offset}, bottom={bottom_offset}); "
            "supply both strands explicitly"
        )


__all__ = [
    "PolymerError",
    "SeqLenMismatchError",
    "AlphabetMismatchError",
    "StrandMismatchError",
    "StrandAlphabetConflictError",
    "ComplementarityError",
    "UnknownSymbolError",
    "NoAlphabetError",
    "UndefinedConversionError",
    "NoConverterError",
    "NotSupportedError",
]
