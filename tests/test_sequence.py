import pytest

from biopolymer.alphabets import AMINO_ACID, DNA, RNA
from biopolymer.core.amino_acid import AminoAcidSequence
from biopolymer.core.interfaces import Polymeric
from biopolymer.core.sequence import Sequence
from biopolymer.core.strands import DnaStrand, RnaStrand
from biopolymer.errors import AlphabetMismatchError, NoAlphabetError, SeqLenMismatchError


class TestConstruction:
    """Building sequences from raw symbols."""

    def test_from_text(self) -> None:
        seq = DnaStrand.new("ttagccgt", label="a label")
        assert seq.symbols == "ttagccgt"
        assert seq.length == 8
        assert seq.label == "a label"
        assert seq.alphabet is None
        assert seq.valid is False

    def test_from_symbol_list(self) -> None:
        assert DnaStrand.new(["a", "t", "g"]).symbols == "atg"

    def test_rejects_multi_char_items(self) -> None:
        with pytest.raises(TypeError, match="single characters"):
            DnaStrand.new(["at", "g"])

    def test_length_must_agree(self) -> None:
        assert DnaStrand.new("atg", length=3).length == 3
        with pytest.raises(ValueError, match="disagrees"):
            DnaStrand.new("atg", length=4)

    def test_is_polymeric(self) -> None:
        assert isinstance(DnaStrand.new("atgc"), Polymeric)
        assert isinstance(AminoAcidSequence.new("MAG"), Polymeric)


class TestKmers:
    """Single-strand k-mer partitions."""

    def test_partition_rejoins(self) -> None:
        seq = DnaStrand.new("ttagccgt", label="x")
        kmers = seq.kmers(2)
        assert kmers.chunks == ("tt", "ag", "cc", "gt")
        assert "".join(kmers) == seq.symbols
        assert kmers.metadata == {"label": "x", "alphabet": None}

    def test_k_equal_to_length(self) -> None:
        assert DnaStrand.new("atg").kmers(3).chunks == ("atg",)

    def test_indivisible_length(self) -> None:
        with pytest.raises(SeqLenMismatchError) as exc_info:
            DnaStrand.new("ttagccgt").kmers(3)
        assert exc_info.value.length == 8
        assert exc_info.value.k == 3

    @pytest.mark.parametrize("k", [0, -1])
    def test_non_positive_k(self, k) -> None:
        with pytest.raises(ValueError, match="positive integer"):
            DnaStrand.new("atgc").kmers(k)


class TestValidation:
    """Validity checks and validated copies."""

    def test_is_valid(self, dna_common) -> None:
        assert DnaStrand.new("ttagccgt").is_valid(dna_common)
        assert not DnaStrand.new("ttagccgn").is_valid(dna_common)

    def test_validate_without_alphabet(self) -> None:
        with pytest.raises(NoAlphabetError):
            DnaStrand.new("atgc").validate()

    def test_validate_returns_pinned_copy(self, dna_with_n) -> None:
        seq = DnaStrand.new("ttagccgn")
        validated = seq.validate(dna_with_n)
        assert validated.valid is True
        assert validated.alphabet == dna_with_n
        assert seq.valid is False

    def test_given_alphabet_beats_carried(self, dna_common, dna_with_n) -> None:
        seq = DnaStrand.new("aan", alphabet=dna_common)
        assert seq.validate(dna_with_n).alphabet == dna_with_n
        with pytest.raises(AlphabetMismatchError):
            seq.validate()

    def test_validate_reports_positions(self, dna_common) -> None:
        with pytest.raises(AlphabetMismatchError) as exc_info:
            DnaStrand.new("nnaattggccnn").validate(dna_common)
        assert [m.position for m in exc_info.value.mismatches] == [0, 1, 10, 11]


class TestWindowAndDunders:
    """Python data-model conveniences."""

    @pytest.mark.parametrize(
        ("start", "amount", "expected"),
        [
            (2, 3, "gcc"),
            (0, 0, ""),
            (6, 10, "gt"),
            (-2, 5, "gt"),
            (-8, 2, "tt"),
            (-10, 3, ""),
            (20, 3, ""),
        ],
    )
    def test_window(self, start, amount, expected) -> None:
        assert DnaStrand.new("ttgccagt").window(start, amount).symbols == expected

    def test_window_negative_amount(self) -> None:
        with pytest.raises(ValueError):
            DnaStrand.new("atgc").window(0, -1)

    def test_len_iter_contains(self) -> None:
        seq = DnaStrand.new("ttagccgt")
        assert len(seq) == 8
        assert list(seq)[:3] == ["t", "t", "a"]
        assert "gcc" in seq
        assert DnaStrand.new("agc") in seq
        assert "aaa" not in seq

    def test_indexing_and_slicing(self, dna_common) -> None:
        seq = DnaStrand.new("ttagccgt", label="x", alphabet=dna_common)
        assert seq[2] == "a"
        part = seq[1:4]
        assert isinstance(part, DnaStrand)
        assert part.symbols == "tag"
        assert part.label == "x"
        assert part.alphabet == dna_common
        assert str(part) == "tag"

    def test_slice_and_window_drop_validity(self, dna_common) -> None:
        seq = DnaStrand.new("ttagccgt", alphabet=dna_common).validate()
        assert seq.valid is True
        assert seq[1:4].valid is False
        assert seq.window(1, 3).valid is False
        assert seq[1:4] == seq.window(1, 3)


class TestComplements:
    """Nucleic strands complement under their alphabet."""

    def test_dna_complement(self) -> None:
        seq = DnaStrand.new("attgacgt", label="x")
        paired = seq.complement()
        assert paired.symbols == "taactgca"
        assert paired.label == "x"
        assert paired.alphabet == DNA.common()
        assert paired.valid is False

    def test_reverse_complement(self) -> None:
        assert DnaStrand.new("attgacgt").reverse_complement().symbols == "acgtcaat"

    def test_rna_complement(self) -> None:
        assert RnaStrand.new("AUGCaugc").complement().symbols == "UACGuacg"

    def test_carried_alphabet_used(self, dna_with_n) -> None:
        assert DnaStrand.new("atn", alphabet=dna_with_n).complement().symbols == "tan"

    def test_failure_lists_positions(self) -> None:
        with pytest.raises(AlphabetMismatchError) as exc_info:
            DnaStrand.new("atnr").complement()
        assert [m.position for m in exc_info.value.mismatches] == [2, 3]

    def test_amino_acids_have_no_complement(self) -> None:
        assert not hasattr(AminoAcidSequence, "complement")


class TestAminoAcidSequence:
    def test_validation_tiers(self) -> None:
        seq = AminoAcidSequence.new("MAGTATGCCXNPK")
        assert not seq.is_valid(AMINO_ACID.common())
        assert seq.is_valid(AMINO_ACID.iupac())

    def test_kmers(self) -> None:
        assert AminoAcidSequence.new("MAGTAT").kmers(3).chunks == ("MAG", "TAT")


class TestRendering:
    def test_fasta_line(self) -> None:
        assert DnaStrand.new("atgc", label="seq1").fasta_line() == ">seq1\natgc\n"
        assert RnaStrand.new("augc").fasta_line() == ">\naugc\n"

    def test_to_dict(self) -> None:
        data = DnaStrand.new("atgc", label="x").validate(DNA.common()).to_dict()
        assert data == {
            "type": "DnaStrand",
            "symbols": "atgc",
            "label": "x",
            "alphabet": "dna:common",
            "valid": True,
        }

    def test_plain_sequence_has_no_family(self) -> None:
        assert Sequence.family is None
        assert Sequence.new("abc").symbols == "abc"
        assert RnaStrand.family is RNA
