"""Default DNA <-> RNA conversions.

Conversions work symbol by symbol (k=1). Only ``T``/``U`` change, and case
is kept, so ``"taTTg"`` becomes ``"uaUUg"``. Ambiguity codes are shared by
the DNA and RNA alphabets and pass through unchanged. The carried alphabet
maps to the same tier of the target kind.
"""

from __future__ import annotations

from collections.abc import Mapping

from biopolymer.alphabets import DNA, RNA, AlphabetFamily
from biopolymer.conversions.base import Converter
from biopolymer.core.double_strand import DnaDoubleStrand, RnaDoubleStrand
from biopolymer.core.kmers import GAP, KmerPartition
from biopolymer.core.strands import DnaStrand, RnaStrand

_DNA_TO_RNA = str.maketrans("Tt", "Uu")
_RNA_TO_DNA = str.maketrans("Uu", "Tt")


def transcribe(symbols: str) -> str:
    """Re-encode DNA symbols as RNA, keeping case."""
    return symbols.translate(_DNA_TO_RNA)


def reverse_transcribe(symbols: str) -> str:
    """Re-encode RNA symbols as DNA, keeping case."""
    return symbols.translate(_RNA_TO_DNA)


def _target_alphabet(metadata: Mapping[str, object], family: AlphabetFamily):
    return family.counterpart(metadata.get("alphabet"))  # type: ignore[arg-type]


def _recode_pairs(partition: KmerPartition, table: dict[int, str]) -> tuple[str, str]:
    top: list[str] = []
    bottom: list[str] = []
    for top_chunk, bottom_chunk in partition:
        top.extend(symbol.translate(table) for symbol in top_chunk if symbol is not GAP)
        bottom.extend(symbol.translate(table) for symbol in bottom_chunk if symbol is not GAP)
    return "".join(top), "".join(bottom)


def to_rna_strand(partition: KmerPartition, target: type[RnaStrand]) -> RnaStrand:
    return target.new(
        transcribe("".join(partition)),
        label=partition.metadata.get("label"),
        alphabet=_target_alphabet(partition.metadata, RNA),
    )


def strand_to_rna_double_strand(partition: KmerPartition, target: type[RnaDoubleStrand]) -> RnaDoubleStrand:
    """Transcribe a single DNA strand and derive its RNA partner strand.

    Without a carried alphabet the target's default alphabet applies.
    """
    options: dict[str, object] = {"label": partition.metadata.get("label")}
    alphabet = _target_alphabet(partition.metadata, RNA)
    if alphabet is not None:
        options["alphabet"] = alphabet
    return target.new(transcribe("".join(partition)), **options)


def to_dna_strand(partition: KmerPartition, target: type[DnaStrand]) -> DnaStrand:
    return target.new(
        reverse_transcribe("".join(partition)),
        label=partition.metadata.get("label"),
        alphabet=_target_alphabet(partition.metadata, DNA),
    )


def _double_to_double(partition: KmerPartition, target, table: dict[int, str], family: AlphabetFamily):
    top, bottom = _recode_pairs(partition, table)
    return target.new(
        top,
        bottom_strand=bottom,
        complement_offset=partition.metadata.get("complement_offset", 0),
        label=partition.metadata.get("label"),
        alphabet=_target_alphabet(partition.metadata, family),
    )


def _double_to_top(partition: KmerPartition, target, table: dict[int, str], family: AlphabetFamily):
    top, _ = _recode_pairs(partition, table)
    return target.new(
        top,
        label=partition.metadata.get("label"),
        alphabet=_target_alphabet(partition.metadata, family),
    )


def to_rna_double_strand(partition: KmerPartition, target: type[RnaDoubleStrand]) -> RnaDoubleStrand:
    return _double_to_double(partition, target, _DNA_TO_RNA, RNA)


def to_dna_double_strand(partition: KmerPartition, target: type[DnaDoubleStrand]) -> DnaDoubleStrand:
    return _double_to_double(partition, target, _RNA_TO_DNA, DNA)


def top_to_rna_strand(partition: KmerPartition, target: type[RnaStrand]) -> RnaStrand:
    return _double_to_top(partition, target, _DNA_TO_RNA, RNA)


def top_to_dna_strand(partition: KmerPartition, target: type[DnaStrand]) -> DnaStrand:
    return _double_to_top(partition, target, _RNA_TO_DNA, DNA)


class DnaConverter(Converter):
    """Conversions from :class:`DnaStrand`."""


class RnaConverter(Converter):
    """Conversions from :class:`RnaStrand`."""


class DnaDoubleStrandConverter(Converter):
    """Conversions from :class:`DnaDoubleStrand`."""


class RnaDoubleStrandConverter(Converter):
    """Conversions from :class:`RnaDoubleStrand`."""


class AminoAcidConverter(Converter):
    """Amino acids have no default conversions."""


DnaConverter.register(RnaStrand, to_rna_strand, k=1)
DnaConverter.register(RnaDoubleStrand, strand_to_rna_double_strand, k=1)
RnaConverter.register(DnaStrand, to_dna_strand, k=1)
DnaDoubleStrandConverter.register(RnaDoubleStrand, to_rna_double_strand, k=1)
DnaDoubleStrandConverter.register(RnaStrand, top_to_rna_strand, k=1)
RnaDoubleStrandConverter.register(DnaDoubleStrand, to_dna_double_strand, k=1)
RnaDoubleStrandConverter.register(DnaStrand, top_to_dna_strand, k=1)
