"""FASTA rendering, writing and parsing.

Every sequence kind renders one record with :meth:`fasta_line`. The header is
the label (empty when unlabelled). For double strands only the top strand is
written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from biopolymer.alphabets import Alphabet
from biopolymer.core.interfaces import Sequential

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def fasta_line(sequence: Sequential) -> str:
    return sequence.fasta_line()


def write_fasta(sequences: Iterable[Sequential], path: str | Path) -> Path:
    """Write ``sequences`` to ``path`` as concatenated FASTA records.

    Returns the path written to.
    """
    path = Path(path)
    records = [fasta_line(sequence) for sequence in sequences]
    path.write_text("".join(records))
    _LOGGER.info("Wrote %d FASTA records to %s", len(records), path)
    return path


def read_fasta(
    path: str | Path,
    sequence_type: type[T],
    *,
    alphabet: Alphabet | None = None,
) -> list[T]:
    """Parse a FASTA file into instances of ``sequence_type``.

    Parameters
    ----------
    path : str | Path
        FASTA file to read.
    sequence_type : type
        Any type with a ``new(symbols, label=..., alphabet=...)`` constructor,
        e.g. :class:`~biopolymer.core.strands.DnaStrand`.
    alphabet : Alphabet | None
        Alphabet attached to every parsed sequence. Nothing is validated.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")

    from Bio import SeqIO

    sequences = [
        sequence_type.new(str(record.seq), label=record.id or None, alphabet=alphabet)  # type: ignore[attr-defined]
        for record in SeqIO.parse(path, "fasta")
    ]
    _LOGGER.info("Loaded %d sequences from %s", len(sequences), path)
    return sequences
