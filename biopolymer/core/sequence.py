"""Generic single-strand sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, TypeVar

from biopolymer.core.kmers import KmerPartition, check_k, chunk
from biopolymer.errors import NoAlphabetError
from biopolymer.validation import differences, ensure_alphabet, validate_against

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.alphabets import Alphabet, AlphabetFamily
    from biopolymer.conversions.base import Converter

SequenceT = TypeVar("SequenceT", bound="Sequence")


def as_symbols(raw: str | Iterable[str] | Sequence) -> str:
    """Normalise raw input (text, an iterable of symbols, or a sequence) to a symbol string."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Sequence):
        return raw.symbols
    symbols = list(raw)
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise TypeError(f"symbols must be single characters, got {symbol!r}")
    return "".join(symbols)


@dataclass(frozen=True, slots=True)
class Sequence:
    """Immutable, ordered run of symbols with an optional label and alphabet.

    Construction never validates. A fresh instance has ``valid=False`` until
    :meth:`validate` returns a copy pinned to the alphabet it was checked
    against.

    Subclasses set ``family`` to the alphabet family of their molecule kind.
    The plain ``Sequence`` has none and is not convertible.
    """

    symbols: str = ""
    label: str | None = None
    alphabet: Alphabet | None = None
    valid: bool = False

    family: ClassVar[AlphabetFamily | None] = None

    @classmethod
    def new(
        cls: type[SequenceT],
        symbols: str | Iterable[str] = "",
        *,
        label: str | None = None,
        alphabet: Alphabet | None = None,
        length: int | None = None,
    ) -> SequenceT:
        """Build a sequence from raw symbols.

        ``length`` is accepted for symmetry with conversion metadata and must
        match the symbol count when given.
        """
        text = as_symbols(symbols)
        if length is not None and length != len(text):
            raise ValueError(f"length {length} disagrees with {len(text)} symbols")
        return cls(symbols=text, label=label, alphabet=alphabet)

    @property
    def length(self) -> int:
        return len(self.symbols)

    @property
    def metadata(self) -> dict[str, object]:
        """Everything but the symbols, as needed to rebuild a converted sequence."""
        return {"label": self.label, "alphabet": self.alphabet}

    def kmers(self, k: int) -> KmerPartition[str]:
        """Partition into consecutive ``k``-length chunks.

        Raises
        ------
        SeqLenMismatchError
            If ``length`` is not divisible by ``k``.
        """
        check_k(k)
        return KmerPartition(k=k, chunks=tuple(chunk(self.symbols, k)), metadata=self.metadata)

    def is_valid(self, alphabet: Alphabet) -> bool:
        ensure_alphabet(alphabet)
        return not differences(self.symbols, alphabet.symbols)

    def validate(self: SequenceT, alphabet: Alphabet | None = None) -> SequenceT:
        """Return a copy marked valid and pinned to ``alphabet``.

        The given alphabet takes precedence over the carried one.

        Raises
        ------
        NoAlphabetError
            If neither an alphabet is given nor one carried.
        AlphabetMismatchError
            Listing every position outside the alphabet.
        """
        resolved = alphabet if alphabet is not None else self.alphabet
        if resolved is None:
            raise NoAlphabetError()
        validate_against(self.symbols, ensure_alphabet(resolved))
        return replace(self, alphabet=resolved, valid=True)

    def window(self: SequenceT, start: int, amount: int) -> SequenceT:
        """Take ``amount`` symbols beginning at ``start``.

        A negative ``start`` counts from the end. A start before the
        beginning yields an empty window, and the window is cut short at the
        end of the sequence.
        """
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        if start < 0:
            start += self.length
            if start < 0:
                return replace(self, symbols="", valid=False)
        return replace(self, symbols=self.symbols[start : start + amount], valid=False)

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.base import Converter

        return Converter

    def fasta_line(self) -> str:
        return f">{self.label or ''}\n{self.symbols}\n"

    def to_dict(self) -> dict[str, object]:
        return {
            "type": type(self).__name__,
            "symbols": self.symbols,
            "label": self.label,
            "alphabet": self.alphabet.label if self.alphabet is not None else None,
            "valid": self.valid,
        }

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Sequence):
            item = item.symbols
        return isinstance(item, str) and item in self.symbols

    def __getitem__(self, index: int | slice):
        if isinstance(index, slice):
            return replace(self, symbols=self.symbols[index], valid=False)
        return self.symbols[index]

    def __str__(self) -> str:
        return self.symbols


def rebuild(cls: type[SequenceT], symbols: str, metadata: Mapping[str, object]) -> SequenceT:
    """Construct ``cls`` from converted symbols and leftover metadata."""
    return cls.new(symbols, label=metadata.get("label"), alphabet=metadata.get("alphabet"))  # type: ignore[arg-type]
