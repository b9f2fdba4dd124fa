"""Double-stranded DNA and RNA with 5'/3' overhangs.

A double strand pairs a top and a bottom strand, written in the same
direction, with a signed ``complement_offset``:

* ``offset > 0`` shifts the bottom strand right. The bottom is gapped on
  its 5' side and the top on its 3' side, by ``offset`` positions.
* ``offset < 0`` is the mirror image. The top is gapped on its 5' side and
  the bottom on its 3' side.

Gap positions are represented by :data:`biopolymer.core.kmers.GAP`. They
only appear in k-mer decompositions and rendered alignments, never inside a
strand.

Example
-------
>>> ds = DnaDoubleStrand.new("tttaaagggccc", complement_offset=3, alphabet=DNA.common())
>>> ds.aligned()
('tttaaagggccc---', '---tttcccggg---')
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, TypeVar

from biopolymer import validation
from biopolymer.alphabets import DNA, Alphabet, AlphabetFamily
from biopolymer.core.kmers import (
    GAP,
    GappedKmer,
    GappedSymbol,
    KmerPartition,
    check_k,
    chunk,
    pad_gaps,
    render_gapped,
)
from biopolymer.core.sequence import as_symbols
from biopolymer.core.strands import DnaStrand, NucleicStrand, RnaStrand
from biopolymer.errors import (
    AlphabetMismatchError,
    ComplementarityError,
    NoAlphabetError,
    NotSupportedError,
    StrandAlphabetConflictError,
    StrandMismatchError,
    UnknownSymbolError,
)
from biopolymer.validation import Mismatch, ensure_alphabet

if TYPE_CHECKING:  # pragma: no cover
    from biopolymer.conversions.base import Converter

_LOGGER = logging.getLogger(__name__)

DoubleStrandT = TypeVar("DoubleStrandT", bound="DoubleStrand")

# Distinguishes "alphabet not passed" from an explicit ``alphabet=None``.
_DEFAULT_ALPHABET = object()


@dataclass(frozen=True, slots=True)
class DoubleStrand:
    """Two antiparallel strands and the offset between them."""

    top: NucleicStrand
    bottom: NucleicStrand
    complement_offset: int = 0
    label: str | None = None
    alphabet: Alphabet | None = None
    valid: bool = False

    strand_type: ClassVar[type[NucleicStrand]] = NucleicStrand

    @classmethod
    def new(
        cls: type[DoubleStrandT],
        top: str | Iterable[str],
        *,
        label: str | None = None,
        alphabet: Alphabet | None | object = _DEFAULT_ALPHABET,
        complement_offset: int = 0,
        bottom_strand: str | Iterable[str] | None = None,
    ) -> DoubleStrandT:
        """Build a double strand from a top strand.

        Options
        -------
        label
            Label of the double strand. The strands themselves carry none.
        alphabet
            Alphabet carried by both strands. Defaults to the kind's
            ``iupac`` alphabet, the most permissive choice for unknown input.
        complement_offset
            Signed stagger between the strands (see module docs).
        bottom_strand
            Explicit bottom symbols. Both strands are then kept verbatim and
            complementarity is only checked by :meth:`validate`.

        When ``bottom_strand`` is omitted, the bottom is the complement of
        ``top.window(complement_offset, top.length)``. A negative offset
        indexes from the end of the top strand.

        Raises
        ------
        AlphabetMismatchError
            If the bottom strand has to be derived and some top symbols
            have no complement. Positions refer to the top strand.
        """
        family = cls.strand_type.family
        if alphabet is _DEFAULT_ALPHABET:
            alphabet = family.iupac()
        elif alphabet is not None:
            ensure_alphabet(alphabet)

        top_strand = cls.strand_type.new(as_symbols(top), alphabet=alphabet)

        if bottom_strand is not None:
            bottom = cls.strand_type.new(as_symbols(bottom_strand), alphabet=alphabet)
            _LOGGER.debug("double strand from explicit strands (offset=%d)", complement_offset)
        else:
            window = top_strand.window(complement_offset, top_strand.length)
            try:
                bottom = window.complement(alphabet)
            except AlphabetMismatchError as exc:
                start = _window_start(complement_offset, top_strand.length)
                raise AlphabetMismatchError(
                    Mismatch(m.symbol, m.position + start, m.alphabet) for m in exc.mismatches
                ) from None
            bottom = replace(bottom, alphabet=alphabet)
            _LOGGER.debug("derived bottom strand of %d symbols (offset=%d)", bottom.length, complement_offset)

        return cls(
            top=top_strand,
            bottom=bottom,
            complement_offset=complement_offset,
            label=label,
            alphabet=alphabet,
        )

    @property
    def span(self) -> int:
        """Aligned width of the two strands, overhangs included."""
        return len(self._gapped()[0])

    def _gapped(self) -> tuple[list[GappedSymbol], list[GappedSymbol]]:
        offset = self.complement_offset
        shift = abs(offset)
        top_before = shift if offset < 0 else 0
        bottom_before = shift if offset > 0 else 0
        span = self.top.length + shift
        # Bottom symbols reaching past the top strand's span have no partner and are dropped.
        return (
            pad_gaps(self.top.symbols, before=top_before, span=span)[:span],
            pad_gaps(self.bottom.symbols, before=bottom_before, span=span)[:span],
        )

    def kmers(self, k: int) -> KmerPartition[tuple[GappedKmer, GappedKmer]]:
        """Pair the top and bottom ``k``-mers across the aligned span.

        Both strands are padded with gaps to ``top.length + |offset|``. A
        positive offset pads the top's 3' end and the bottom's 5' end, and a
        negative offset does the reverse. Chunks made only of gaps are kept.
        They mark overhangs with no partner. An explicit bottom strand that
        runs past that span is cut at the span.

        Raises
        ------
        SeqLenMismatchError
            If the aligned span is not divisible by ``k``.
        """
        check_k(k)
        top, bottom = self._gapped()
        span = len(top)
        top_chunks = [tuple(part) for part in chunk(top, k, span=span)]
        bottom_chunks = [tuple(part) for part in chunk(bottom, k, span=span)]
        return KmerPartition(
            k=k,
            chunks=tuple(zip(top_chunks, bottom_chunks)),
            metadata=self.metadata,
        )

    @property
    def metadata(self) -> dict[str, object]:
        return {
            "label": self.label,
            "complement_offset": self.complement_offset,
            "alphabet": self.alphabet,
        }

    def aligned(self, gap: str = "-") -> tuple[str, str]:
        """Render both strands over the aligned span, with ``gap`` for overhangs."""
        top, bottom = self._gapped()
        return render_gapped(top, gap), render_gapped(bottom, gap)

    def mismatched_pairs(self, alphabet: Alphabet) -> list[tuple[int, str, str]]:
        """Return ``(position, top, bottom)`` for every aligned pair that fails to complement.

        Positions index the aligned span. A pair with a gap on either side is
        an overhang and imposes no constraint.
        """
        ensure_alphabet(alphabet)
        failures: list[tuple[int, str, str]] = []
        for position, (top, bottom) in enumerate(zip(*self._gapped())):
            if top is GAP or bottom is GAP:
                continue
            try:
                expected = alphabet.complement(top)
            except UnknownSymbolError:
                expected = None
            if expected != bottom:
                failures.append((position, top, bottom))
        return failures

    def is_complementary(self, alphabet: Alphabet) -> bool:
        return not self.mismatched_pairs(alphabet)

    def is_valid(self, alphabet: Alphabet) -> bool:
        """Both strands belong to ``alphabet`` and every aligned pair complements."""
        return (
            self.top.is_valid(alphabet)
            and self.bottom.is_valid(alphabet)
            and self.is_complementary(alphabet)
        )

    def validate(self: DoubleStrandT, alphabet: Alphabet | None = None) -> DoubleStrandT:
        """Return a copy with both strands validated and ``valid=True``.

        With an explicit ``alphabet`` both strands are checked against it.
        Otherwise each strand uses its own alphabet and the two must agree.

        Raises
        ------
        StrandAlphabetConflictError
            If the strands resolve to different alphabets. Raised before
            any symbol is checked.
        NoAlphabetError
            If neither strand carries an alphabet and none is given.
        StrandMismatchError
            Listing every bad symbol on the first failing strand (top first).
        ComplementarityError
            Listing every aligned pair that does not complement.
        """
        if alphabet is not None:
            top_alpha = bottom_alpha = ensure_alphabet(alphabet)
        else:
            top_alpha, bottom_alpha = self.top.alphabet, self.bottom.alphabet

        if top_alpha != bottom_alpha:
            raise StrandAlphabetConflictError(top_alpha, bottom_alpha)
        if top_alpha is None:
            raise NoAlphabetError()

        try:
            top = self.top.validate(top_alpha)
        except AlphabetMismatchError as exc:
            raise StrandMismatchError("top", exc.mismatches) from None
        try:
            bottom = self.bottom.validate(bottom_alpha)
        except AlphabetMismatchError as exc:
            raise StrandMismatchError("bottom", exc.mismatches) from None

        failures = self.mismatched_pairs(top_alpha)
        if failures:
            raise ComplementarityError(failures)

        return replace(self, top=top, bottom=bottom, alphabet=top_alpha, valid=True)

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.base import Converter

        return Converter

    def fasta_line(self) -> str:
        return f">{self.label or ''}\n{self.top.symbols}\n"

    def to_dict(self) -> dict[str, object]:
        return {
            "type": type(self).__name__,
            "top": self.top.symbols,
            "bottom": self.bottom.symbols,
            "complement_offset": self.complement_offset,
            "label": self.label,
            "alphabet": self.alphabet.label if self.alphabet is not None else None,
            "valid": self.valid,
        }


@dataclass(frozen=True, slots=True)
class DnaDoubleStrand(DoubleStrand):
    """Double-stranded DNA."""

    strand_type = DnaStrand

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.nucleic import DnaDoubleStrandConverter

        return DnaDoubleStrandConverter


@dataclass(frozen=True, slots=True)
class RnaDoubleStrand(DoubleStrand):
    """Double-stranded RNA."""

    strand_type = RnaStrand

    @classmethod
    def converter(cls) -> type[Converter]:
        from biopolymer.conversions.nucleic import RnaDoubleStrandConverter

        return RnaDoubleStrandConverter


def _window_start(offset: int, length: int) -> int:
    if offset >= 0:
        return offset
    return max(length + offset, 0)


def construct_complement(
    symbols: str | Iterable[str],
    *,
    family: AlphabetFamily = DNA,
    alphabet: Alphabet | None = None,
    top_offset: int = 0,
    bottom_offset: int = 0,
    source: str = "top",
    gap: str = "-",
) -> str:
    """Derive the partner of one strand when the other strand is offset.

    ``source`` names the strand that is given (``"top"`` or ``"bottom"``),
    and the offset of the *other* strand says where it has no partner. The
    result has the same length as the input. Overhang positions are
    rendered with ``gap``.

    ========  ============  ===============  ==============
    source    offsets       input            result
    ========  ============  ===============  ==============
    top       (0, 2)        ``attgatc``      ``taact--``
    top       (0, -2)       ``attgatc``      ``--actag``
    bottom    (2, 0)        ``attgatc``      ``--actag``
    bottom    (-2, 0)       ``attgatc``      ``taact--``
    ========  ============  ===============  ==============

    Raises
    ------
    NotSupportedError
        If both offsets are nonzero, or the offset is on the source strand.
    AlphabetMismatchError
        If any symbol has no complement in the alphabet.
    """
    if source not in ("top", "bottom"):
        raise ValueError(f"source must be 'top' or 'bottom', got {source!r}")
    if top_offset and bottom_offset:
        raise NotSupportedError(top_offset, bottom_offset)

    own_offset, other_offset = (top_offset, bottom_offset) if source == "top" else (bottom_offset, top_offset)
    if own_offset:
        raise NotSupportedError(
            top_offset,
            bottom_offset,
            f"offset {own_offset} is on the given {source} strand; only the derived strand may be offset",
        )

    resolved = alphabet if alphabet is not None else family.default_alphabet()
    if len(gap) != 1 or gap in resolved.symbols:
        raise ValueError(f"gap must be a single character outside {resolved.label}, got {gap!r}")

    paired = validation.complement(as_symbols(symbols), family, resolved)
    length = len(paired)
    shift = min(abs(other_offset), length)
    if shift == 0:
        return paired

    leading = (source == "top") == (other_offset < 0)
    if leading:
        return gap * shift + paired[shift:]
    return paired[: length - shift] + gap * shift


__all__ = [
    "DoubleStrand",
    "DnaDoubleStrand",
    "RnaDoubleStrand",
    "construct_complement",
]
