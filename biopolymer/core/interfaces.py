"""Protocol surfaces shared by every sequence kind.

``Polymeric`` is what makes something a polymer: it can be split into k-mers
and checked against an alphabet. ``Sequential`` is the construction and
conversion contract used by :func:`biopolymer.polymer.convert`. Single
strands, amino acids and double strands all satisfy both.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.alphabets import Alphabet
    from biopolymer.core.kmers import KmerPartition


@runtime_checkable
class Polymeric(Protocol):
    """K-mer decomposition and alphabet validity."""

    alphabet: Alphabet | None

    def kmers(self, k: int) -> KmerPartition:  # noqa: D401
        """Split into ``k``-sized chunks; raise ``SeqLenMismatchError`` if ``k`` does not divide."""

    def is_valid(self, alphabet: Alphabet) -> bool:  # noqa: D401
        """Return whether every symbol belongs to ``alphabet``."""

    def validate(self, alphabet: Alphabet | None = None) -> Polymeric:  # noqa: D401
        """Return a validated copy pinned to ``alphabet``."""


KmerConverter = Callable[["KmerPartition", type], Any]


class ConverterProtocol(Protocol):
    """Looks up the k-wise conversion function towards a target type."""

    @classmethod
    def to(cls, target: type) -> tuple[KmerConverter, int]:  # noqa: D401
        """Return ``(converter, k)``; raise ``UndefinedConversionError`` if there is none."""
        ...  # pragma: no cover


class Sequential(Protocol):
    """Construction, conversion and FASTA rendering of a sequence type."""

    @classmethod
    def new(cls, symbols: Any, **options: Any) -> Sequential:  # noqa: D401
        """Build a new instance from raw symbols and options."""
        ...  # pragma: no cover

    @classmethod
    def converter(cls) -> type[ConverterProtocol]:  # noqa: D401
        """Return the converter class for this type."""
        ...  # pragma: no cover

    def fasta_line(self) -> str:  # noqa: D401
        """Return ``">{label}\\n{symbols}\\n"``."""
        ...  # pragma: no cover
