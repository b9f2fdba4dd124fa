"""Sequence file I/O."""

from .fasta import fasta_line, read_fasta, write_fasta

__all__ = ["fasta_line", "read_fasta", "write_fasta"]
