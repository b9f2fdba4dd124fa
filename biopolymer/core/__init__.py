"""Core sequence types.

Single strands share one implementation (:class:`Sequence`); DNA, RNA and
amino acids only differ by their alphabet family and converter.
"""

from .amino_acid import AminoAcidSequence
from .double_strand import DnaDoubleStrand, DoubleStrand, RnaDoubleStrand, construct_complement
from .interfaces import Polymeric, Sequential
from .kmers import GAP, KmerPartition
from .sequence import Sequence
from .strands import DnaStrand, NucleicStrand, RnaStrand

__all__ = [
    "GAP",
    "AminoAcidSequence",
    "DnaDoubleStrand",
    "DnaStrand",
    "DoubleStrand",
    "KmerPartition",
    "NucleicStrand",
    "Polymeric",
    "RnaDoubleStrand",
    "RnaStrand",
    "Sequence",
    "Sequential",
    "construct_complement",
]
