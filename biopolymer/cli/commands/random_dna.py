"""``biopolymer random-dna``: write random DNA sequences."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from biopolymer.alphabets import Alphabet
from biopolymer.io.fasta import write_fasta
from biopolymer.utils.random_sequences import random_dna, random_dna_strands

_LOGGER = logging.getLogger(__name__)


def run_random_dna(
    *,
    count: int,
    size: int,
    seed: int | None = None,
    outfile: str | Path | None = None,
    fasta: bool = False,
    case: str = "lower",
    alphabet: Alphabet | None = None,
    stream: TextIO | None = None,
) -> int:
    """Generate ``count`` sequences of ``size`` symbols.

    Plain output is one sequence per line. With ``fasta`` each sequence is a
    record labelled ``random_<n>``. Output goes to ``outfile`` when given,
    otherwise to ``stream`` (stdout).
    """
    if fasta:
        strands = random_dna_strands(size, count, seed=seed, alphabet=alphabet, case=case)  # type: ignore[arg-type]
        if outfile is not None:
            write_fasta(strands, outfile)
            return 0
        text = "".join(strand.fasta_line() for strand in strands)
    else:
        lines = random_dna(size, count, seed=seed, alphabet=alphabet, case=case)  # type: ignore[arg-type]
        text = "".join(f"{line}\n" for line in lines)
        if outfile is not None:
            Path(outfile).write_text(text)
            _LOGGER.info("Wrote %d sequences to %s", count, outfile)
            return 0

    (stream or sys.stdout).write(text)
    return 0
