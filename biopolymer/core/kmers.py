"""K-mer partitions shared by single and double strands."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence as TypingSequence
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from biopolymer.errors import SeqLenMismatchError

#: Placeholder for overhang positions. It is never a symbol of any alphabet.
GAP = None

GappedSymbol = Optional[str]
GappedKmer = tuple[GappedSymbol, ...]

ChunkT = TypeVar("ChunkT")


@dataclass(frozen=True, slots=True)
class KmerPartition(Generic[ChunkT]):
    """The k-sized chunks of a sequence plus the metadata needed to rebuild one.

    Single strands produce ``str`` chunks. Double strands produce
    ``(top, bottom)`` pairs of gapped tuples.
    """

    k: int
    chunks: tuple[ChunkT, ...]
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __iter__(self) -> Iterator[ChunkT]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)


def check_k(k: int) -> int:
    if not isinstance(k, int) or isinstance(k, bool) or k <= 0:
        raise ValueError(f"k must be a positive integer, got {k!r}")
    return k


def chunk(items: TypingSequence[ChunkT], k: int, *, span: int | None = None) -> list:
    """Split ``items`` into consecutive runs of ``k``.

    ``span`` is the length that has to divide by ``k``. It defaults to
    ``len(items)``.
    """
    check_k(k)
    total = len(items) if span is None else span
    if total % k != 0:
        raise SeqLenMismatchError(total, k)
    return [items[i : i + k] for i in range(0, len(items), k)]


def pad_gaps(symbols: str, *, before: int = 0, span: int | None = None) -> list[GappedSymbol]:
    """Place ``symbols`` after ``before`` gaps, then right-fill with gaps up to ``span``."""
    padded: list[GappedSymbol] = [GAP] * before
    padded.extend(symbols)
    if span is not None and len(padded) < span:
        padded.extend([GAP] * (span - len(padded)))
    return padded


def render_gapped(symbols: TypingSequence[GappedSymbol], gap: str = "-") -> str:
    """Render a gapped run as text, replacing gaps with ``gap``."""
    return "".join(gap if symbol is GAP else symbol for symbol in symbols)
