"""CLI subcommand implementations."""

from .random_dna import run_random_dna
from .sequences import SEQUENCE_TYPES, run_complement, run_convert, run_validate

__all__ = [
    "SEQUENCE_TYPES",
    "run_complement",
    "run_convert",
    "run_random_dna",
    "run_validate",
]
