import pytest

from biopolymer import polymer
from biopolymer.alphabets import DNA, RNA
from biopolymer.conversions import (
    AminoAcidConverter,
    Converter,
    DnaConverter,
    DnaDoubleStrandConverter,
    RnaConverter,
    reverse_transcribe,
    transcribe,
)
from biopolymer.core.amino_acid import AminoAcidSequence
from biopolymer.core.double_strand import DnaDoubleStrand, RnaDoubleStrand
from biopolymer.core.sequence import Sequence
from biopolymer.core.strands import DnaStrand, RnaStrand
from biopolymer.errors import (
    NoAlphabetError,
    NoConverterError,
    SeqLenMismatchError,
    UndefinedConversionError,
)

_CODONS = {"M": "atg", "A": "gct", "G": "ggt"}
_RESIDUES = {codon: residue for residue, codon in _CODONS.items()}


class BackTranslation(Converter):
    """Toy amino acid -> DNA converter using one codon per residue."""


class Translation(Converter):
    """Toy DNA -> amino acid converter reading codons."""


BackTranslation.register(
    DnaStrand,
    lambda kmers, target: target.new(
        "".join(_CODONS[residue] for residue in kmers), label=kmers.metadata["label"]
    ),
)
Translation.register(
    AminoAcidSequence,
    lambda kmers, target: target.new(
        "".join(_RESIDUES[codon] for codon in kmers), label=kmers.metadata["label"]
    ),
    k=3,
)


class TestDefaultConversions:
    """DNA <-> RNA re-encoding."""

    def test_dna_to_rna(self) -> None:
        rna = polymer.convert(DnaStrand.new("ttagccgt", label="a label"), RnaStrand)
        assert isinstance(rna, RnaStrand)
        assert rna.symbols == "uuagccgu"
        assert rna.label == "a label"

    def test_case_preserved(self) -> None:
        assert polymer.convert(DnaStrand.new("taTTg"), RnaStrand).symbols == "uaUUg"

    def test_rna_to_dna(self) -> None:
        assert polymer.convert(RnaStrand.new("uaUUg"), DnaStrand).symbols == "taTTg"

    def test_round_trip(self) -> None:
        dna = DnaStrand.new("atgcNRY", label="x", alphabet=DNA.iupac())
        back = polymer.convert(polymer.convert(dna, RnaStrand), DnaStrand)
        assert back == dna

    def test_alphabet_maps_to_same_tier(self) -> None:
        rna = polymer.convert(DnaStrand.new("atgn", alphabet=DNA.with_n()), RnaStrand)
        assert rna.alphabet == RNA.with_n()
        assert rna.validate().valid

    def test_transcription_helpers(self) -> None:
        assert transcribe("TtAa") == "UuAa"
        assert reverse_transcribe("UuAa") == "TtAa"


class TestDoubleStrandConversions:
    def test_dna_to_rna_double_strand(self, offset_double_strand) -> None:
        rna = polymer.convert(offset_double_strand, RnaDoubleStrand)
        assert isinstance(rna, RnaDoubleStrand)
        assert rna.top.symbols == "uuuaaagggccc"
        assert rna.bottom.symbols == "uuucccggg"
        assert rna.complement_offset == 3
        assert rna.alphabet == RNA.common()
        assert rna.validate().valid

    def test_rna_to_dna_double_strand(self) -> None:
        ds = RnaDoubleStrand.new("augc", label="r", complement_offset=1, alphabet=RNA.common())
        dna = polymer.convert(ds, DnaDoubleStrand)
        assert dna.top.symbols == "atgc"
        assert dna.bottom.symbols == "acg"
        assert dna.label == "r"

    def test_double_strand_to_single_strand(self, offset_double_strand) -> None:
        rna = polymer.convert(offset_double_strand, RnaStrand)
        assert isinstance(rna, RnaStrand)
        assert rna.symbols == "uuuaaagggccc"

    def test_dna_strand_to_rna_double_strand(self) -> None:
        rna = polymer.convert(DnaStrand.new("atgc", label="s", alphabet=DNA.common()), RnaDoubleStrand)
        assert isinstance(rna, RnaDoubleStrand)
        assert rna.top.symbols == "augc"
        assert rna.bottom.symbols == "uacg"
        assert rna.label == "s"
        assert rna.alphabet == RNA.common()
        assert rna.validate().valid

    def test_dna_strand_without_alphabet_uses_default(self) -> None:
        rna = polymer.convert(DnaStrand.new("atgc"), RnaDoubleStrand)
        assert rna.alphabet == RNA.iupac()
        assert rna.bottom.symbols == "uacg"


class TestUndefinedConversions:
    """Missing converters and missing conversions."""

    def test_amino_acid_has_no_defaults(self) -> None:
        with pytest.raises(UndefinedConversionError) as exc_info:
            polymer.convert(AminoAcidSequence.new("MAG"), DnaStrand)
        assert exc_info.value.source is AminoAcidSequence
        assert exc_info.value.target is DnaStrand

    def test_plain_sequence(self) -> None:
        with pytest.raises(UndefinedConversionError):
            polymer.convert(Sequence.new("abc"), DnaStrand)

    def test_dna_to_dna_double_strand_undefined(self) -> None:
        with pytest.raises(UndefinedConversionError, match="DnaStrand to DnaDoubleStrand"):
            polymer.convert(DnaStrand.new("atgc"), DnaDoubleStrand)

    def test_no_converter(self) -> None:
        with pytest.raises(NoConverterError) as exc_info:
            polymer.convert("atgc", RnaStrand)
        assert exc_info.value.source is str


class TestConversionOverride:
    """An explicit converter takes precedence over the type's own."""

    def test_amino_acid_back_translation(self) -> None:
        dna = polymer.convert(AminoAcidSequence.new("MAG", label="p"), DnaStrand, conversion=BackTranslation)
        assert dna.symbols == "atggctggt"
        assert dna.label == "p"

    def test_codon_kmers(self) -> None:
        protein = polymer.convert(DnaStrand.new("atggctggt"), AminoAcidSequence, conversion=Translation)
        assert protein.symbols == "MAG"

    def test_codon_kmers_must_divide(self) -> None:
        with pytest.raises(SeqLenMismatchError):
            polymer.convert(DnaStrand.new("atggctgg"), AminoAcidSequence, conversion=Translation)

    def test_override_without_target(self) -> None:
        with pytest.raises(UndefinedConversionError):
            polymer.convert(DnaStrand.new("atg"), RnaStrand, conversion=Translation)


class TestConverterRegistry:
    def test_registries_are_separate(self) -> None:
        assert DnaConverter.targets() == [RnaStrand, RnaDoubleStrand]
        assert RnaConverter.targets() == [DnaStrand]
        assert set(DnaDoubleStrandConverter.targets()) == {RnaDoubleStrand, RnaStrand}
        assert AminoAcidConverter.targets() == []
        assert Converter.targets() == []

    def test_lookup(self) -> None:
        _, k = DnaConverter.to(RnaStrand)
        assert k == 1
        with pytest.raises(UndefinedConversionError):
            DnaConverter.to(AminoAcidSequence)

    def test_register_rejects_bad_k(self) -> None:
        with pytest.raises(ValueError, match="k must be positive"):
            BackTranslation.register(RnaStrand, lambda kmers, target: None, k=0)


class TestPolymerValidation:
    """Top-level validity with given or carried alphabets."""

    def test_is_valid_without_alphabet(self) -> None:
        assert polymer.is_valid(DnaStrand.new("atgc")) is False

    def test_is_valid_uses_carried(self) -> None:
        assert polymer.is_valid(DnaStrand.new("atgc", alphabet=DNA.common()))
        assert not polymer.is_valid(DnaStrand.new("atgn", alphabet=DNA.common()))

    def test_given_alphabet_wins(self) -> None:
        seq = DnaStrand.new("atgn", alphabet=DNA.common())
        assert polymer.is_valid(seq, DNA.with_n())
        assert polymer.validate(seq, DNA.with_n()).alphabet == DNA.with_n()

    def test_validate_without_alphabet(self) -> None:
        with pytest.raises(NoAlphabetError):
            polymer.validate(AminoAcidSequence.new("MAG"))

    def test_double_strand(self, offset_double_strand) -> None:
        assert polymer.is_valid(offset_double_strand)
        assert polymer.validate(offset_double_strand).valid
