import pytest

from biopolymer.alphabets import (
    AMINO_ACID,
    DNA,
    RNA,
    Alphabet,
    MoleculeKind,
    all_alphabets,
    family_for,
    get_alphabet,
    parse_alphabet,
)
from biopolymer.errors import UnknownSymbolError


class TestComplementTables:
    """Every complement table is total over its alphabet and an involution."""

    @pytest.mark.parametrize(
        "alphabet",
        [alphabet for alphabet in all_alphabets() if alphabet.has_complement],
        ids=lambda alphabet: alphabet.label,
    )
    def test_involution(self, alphabet: Alphabet) -> None:
        for symbol in alphabet:
            assert alphabet.complement(alphabet.complement(symbol)) == symbol

    @pytest.mark.parametrize(
        "alphabet",
        [alphabet for alphabet in all_alphabets() if alphabet.has_complement],
        ids=lambda alphabet: alphabet.label,
    )
    def test_table_covers_symbols(self, alphabet: Alphabet) -> None:
        assert set(alphabet.complements) == set(alphabet.symbols)

    @pytest.mark.parametrize(
        ("family", "symbol", "expected"),
        [
            (DNA, "a", "t"),
            (DNA, "G", "C"),
            (RNA, "A", "U"),
            (RNA, "u", "a"),
        ],
    )
    def test_family_default(self, family, symbol, expected) -> None:
        assert family.complement(symbol) == expected

    @pytest.mark.parametrize(("symbol", "expected"), [("R", "Y"), ("k", "m"), ("W", "W"), ("v", "b"), ("N", "N")])
    def test_iupac_ambiguity_codes(self, symbol, expected) -> None:
        assert DNA.complement(symbol, DNA.iupac()) == expected

    def test_unknown_symbol(self) -> None:
        with pytest.raises(UnknownSymbolError) as exc_info:
            DNA.complement("n")
        assert exc_info.value.symbol == "n"
        assert exc_info.value.alphabet == DNA.common()
        assert isinstance(exc_info.value, KeyError)

    def test_multiple_symbols_rejected(self) -> None:
        with pytest.raises(ValueError, match="multiple symbols"):
            DNA.complement("at")

    def test_amino_acids_have_no_complement(self) -> None:
        assert not AMINO_ACID.common().has_complement
        with pytest.raises(TypeError, match="does not define complements"):
            AMINO_ACID.common().complement("A")


class TestAlphabetConstruction:
    """Alphabet values check their own tables."""

    def test_symbols_deduplicated(self) -> None:
        assert Alphabet("custom", MoleculeKind.DNA, "aabba").symbols == "ab"

    def test_incomplete_table_rejected(self) -> None:
        with pytest.raises(ValueError, match="must cover exactly"):
            Alphabet("custom", MoleculeKind.DNA, "AT", {"A": "T"})

    def test_non_involution_rejected(self) -> None:
        with pytest.raises(ValueError, match="not an involution"):
            Alphabet("custom", MoleculeKind.DNA, "AT", {"A": "T", "T": "T"})

    def test_membership_is_per_symbol(self) -> None:
        alphabet = DNA.common()
        assert "a" in alphabet
        assert "at" not in alphabet
        assert "n" not in alphabet


class TestRegistry:
    """Families, tiers and lookups."""

    @pytest.mark.parametrize("family", [DNA, RNA])
    def test_nucleic_tiers_are_nested(self, family) -> None:
        assert set(family.common()) < set(family.with_n()) < set(family.iupac())

    def test_with_ambiguity_is_with_n(self) -> None:
        assert DNA.with_ambiguity() == DNA.with_n()
        assert "N" in RNA.with_ambiguity()

    def test_amino_acid_tiers(self) -> None:
        assert AMINO_ACID.names() == ["common", "iupac"]
        assert set(AMINO_ACID.common()) < set(AMINO_ACID.iupac())
        assert "j" in AMINO_ACID.iupac()

    def test_rna_iupac_has_no_z(self) -> None:
        assert "Z" not in RNA.iupac()
        assert "z" not in RNA.iupac()

    def test_unknown_alphabet_name(self) -> None:
        with pytest.raises(KeyError, match="Unknown dna alphabet"):
            DNA.get("extended")

    def test_family_for_accepts_strings(self) -> None:
        assert family_for("RNA") is RNA
        assert family_for(MoleculeKind.AMINO_ACID) is AMINO_ACID
        with pytest.raises(KeyError, match="Unknown molecule kind"):
            family_for("lipid")

    def test_parse_alphabet(self) -> None:
        assert parse_alphabet("dna:iupac") == DNA.iupac()
        assert parse_alphabet("rna") == RNA.common()
        assert get_alphabet("rna", "with_n").label == "rna:with_n"

    def test_counterpart(self) -> None:
        assert RNA.counterpart(DNA.with_n()) == RNA.with_n()
        assert DNA.counterpart(DNA.iupac()) == DNA.iupac()
        assert DNA.counterpart(None) is None
        assert RNA.counterpart(Alphabet("custom", MoleculeKind.DNA, "at")) is None
