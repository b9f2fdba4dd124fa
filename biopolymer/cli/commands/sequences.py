"""``validate``, ``complement`` and ``convert`` over FASTA files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, TextIO

from biopolymer import polymer
from biopolymer.alphabets import Alphabet
from biopolymer.core.amino_acid import AminoAcidSequence
from biopolymer.core.double_strand import construct_complement
from biopolymer.core.strands import DnaStrand, NucleicStrand, RnaStrand
from biopolymer.errors import AlphabetMismatchError
from biopolymer.io.fasta import read_fasta, write_fasta

_LOGGER = logging.getLogger(__name__)

SEQUENCE_TYPES: Final = {
    "dna": DnaStrand,
    "rna": RnaStrand,
    "amino_acid": AminoAcidSequence,
}

# ``convert --to`` target -> (source kind, target type)
_CONVERSIONS: Final = {
    "rna": ("dna", RnaStrand),
    "dna": ("rna", DnaStrand),
}


def _sequence_type(kind: str) -> type:
    try:
        return SEQUENCE_TYPES[kind]
    except KeyError:
        raise ValueError(f"Unknown sequence kind: {kind}. Available: {sorted(SEQUENCE_TYPES)}") from None


def _emit(records: list, outfile: str | Path | None, stream: TextIO | None) -> None:
    if outfile is not None:
        write_fasta(records, outfile)
    else:
        (stream or sys.stdout).write("".join(record.fasta_line() for record in records))


def _write_text(text: str, outfile: str | Path | None, stream: TextIO | None) -> None:
    if outfile is not None:
        Path(outfile).write_text(text)
    else:
        (stream or sys.stdout).write(text)


def run_validate(
    path: str | Path,
    *,
    kind: str,
    alphabet: Alphabet,
    stream: TextIO | None = None,
) -> int:
    """Validate every record; print one line per record and every mismatch.

    Returns 1 if any record is invalid.
    """
    out = stream or sys.stdout
    records = read_fasta(path, _sequence_type(kind))
    invalid = 0
    for record in records:
        name = record.label or "<unlabelled>"
        try:
            polymer.validate(record, alphabet)
        except AlphabetMismatchError as exc:
            invalid += 1
            out.write(f"{name}: invalid\n")
            for mismatch in exc.mismatches:
                out.write(f"  {mismatch.symbol!r} at {mismatch.position} not in {alphabet.label}\n")
        else:
            out.write(f"{name}: ok\n")
    _LOGGER.info("Validated %d records against %s, %d invalid", len(records), alphabet.label, invalid)
    return 1 if invalid else 0


def run_complement(
    path: str | Path,
    *,
    kind: str,
    alphabet: Alphabet,
    reverse: bool = False,
    offset: int = 0,
    gap: str = "-",
    outfile: str | Path | None = None,
    stream: TextIO | None = None,
) -> int:
    """Write the complement of every record.

    A nonzero ``offset`` staggers the derived strand against the input, as
    in :func:`~biopolymer.core.double_strand.construct_complement`, and
    overhang positions are written with ``gap``.
    """
    sequence_type = _sequence_type(kind)
    if not issubclass(sequence_type, NucleicStrand):
        raise ValueError(f"{kind} sequences have no complement")
    if offset and reverse:
        raise ValueError("--offset cannot be combined with --reverse")
    records = read_fasta(path, sequence_type, alphabet=alphabet)
    if offset:
        staggered = []
        for record in records:
            bottom = construct_complement(
                record.symbols,
                family=sequence_type.family,
                alphabet=alphabet,
                bottom_offset=offset,
                gap=gap,
            )
            staggered.append(f">{record.label or ''}\n{bottom}\n")
        _write_text("".join(staggered), outfile, stream)
        return 0
    paired = [record.reverse_complement() if reverse else record.complement() for record in records]
    _emit(paired, outfile, stream)
    return 0


def run_convert(
    path: str | Path,
    *,
    to: str,
    alphabet_name: str = "common",
    outfile: str | Path | None = None,
    stream: TextIO | None = None,
) -> int:
    """Read records of the other nucleic kind and convert them to ``to``."""
    try:
        source_kind, target = _CONVERSIONS[to]
    except KeyError:
        raise ValueError(f"Cannot convert to {to!r}. Available: {sorted(_CONVERSIONS)}") from None
    source_type = _sequence_type(source_kind)
    records = read_fasta(path, source_type, alphabet=source_type.family.get(alphabet_name))
    converted = [polymer.convert(record, target) for record in records]
    _emit(converted, outfile, stream)
    return 0
