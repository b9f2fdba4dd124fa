"""Alphabet registry for DNA, RNA and amino-acid sequences.

Each molecule kind exposes a small family of nested alphabets. DNA and RNA
carry three of them (``common`` ⊂ ``with_n`` ⊂ ``iupac``), each paired with a
complement table. Amino acids carry ``common`` and ``iupac`` and have no
complement table.

Coding schemes follow the INSDC feature table conventions::

    R ::= A | G        Y ::= C | T/U      S ::= G | C
    W ::= A | T/U      K ::= G | T/U      M ::= A | C
    B ::= S | T/U (¬A) D ::= R | T/U (¬C) H ::= M | T/U (¬G)
    V ::= M | G (¬T/U) N ::= ANY

The tables are module constants built once at import and exposed through
read-only mappings.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final

from biopolymer.errors import UnknownSymbolError


class MoleculeKind(Enum):
    """Polymer families known to the registry."""

    DNA = "dna"
    RNA = "rna"
    AMINO_ACID = "amino_acid"


@dataclass(frozen=True, slots=True)
class Alphabet:
    """An ordered, deduplicated set of symbols with an optional complement table.

    Equality only looks at ``name``, ``kind`` and ``symbols``; the complement
    table is derived data for the standard alphabets.
    """

    name: str
    kind: MoleculeKind
    symbols: str
    complements: Mapping[str, str] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        deduped = "".join(dict.fromkeys(self.symbols))
        object.__setattr__(self, "symbols", deduped)
        if self.complements is None:
            return
        table = dict(self.complements)
        if set(table) != set(deduped):
            missing = sorted(set(deduped) - set(table))
            extra = sorted(set(table) - set(deduped))
            raise ValueError(
                f"complement table for {self.label} must cover exactly its symbols "
                f"(missing={missing}, extra={extra})"
            )
        for symbol, paired in table.items():
            if table.get(paired) != symbol:
                raise ValueError(
                    f"complement table for {self.label} is not an involution at {symbol!r}"
                )
        object.__setattr__(self, "complements", MappingProxyType(table))

    @property
    def label(self) -> str:
        return f"{self.kind.value}:{self.name}"

    @property
    def has_complement(self) -> bool:
        return self.complements is not None

    def complement(self, symbol: str) -> str:
        """Return the complement of ``symbol``.

        Raises
        ------
        UnknownSymbolError
            If the symbol has no entry in this alphabet's complement table.
        TypeError
            If the alphabet has no complement table at all.
        """
        if self.complements is None:
            raise TypeError(f"alphabet {self.label} does not define complements")
        try:
            return self.complements[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol, self) from None

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and len(symbol) == 1 and symbol in self.symbols

    def __iter__(self):
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.symbols


def _with_lowercase(pairs: Mapping[str, str]) -> dict[str, str]:
    table = dict(pairs)
    table.update({key.lower(): value.lower() for key, value in pairs.items()})
    return table


_AMBIGUITY_COMPLEMENTS: Final = {
    "R": "Y",
    "Y": "R",
    "W": "W",
    "S": "S",
    "K": "M",
    "M": "K",
    "D": "H",
    "H": "D",
    "V": "B",
    "B": "V",
}

_DNA_COMMON_COMPLEMENT: Final = _with_lowercase({"A": "T", "T": "A", "G": "C", "C": "G"})
_DNA_WITH_N_COMPLEMENT: Final = {**_DNA_COMMON_COMPLEMENT, **_with_lowercase({"N": "N"})}
_DNA_IUPAC_COMPLEMENT: Final = {**_DNA_WITH_N_COMPLEMENT, **_with_lowercase(_AMBIGUITY_COMPLEMENTS)}

_RNA_COMMON_COMPLEMENT: Final = _with_lowercase({"A": "U", "U": "A", "G": "C", "C": "G"})
_RNA_WITH_N_COMPLEMENT: Final = {**_RNA_COMMON_COMPLEMENT, **_with_lowercase({"N": "N"})}
_RNA_IUPAC_COMPLEMENT: Final = {**_RNA_WITH_N_COMPLEMENT, **_with_lowercase(_AMBIGUITY_COMPLEMENTS)}


@dataclass(frozen=True, slots=True)
class AlphabetFamily:
    """The standard alphabets of one molecule kind.

    ``default`` names the alphabet used when a caller supplies none.
    """

    kind: MoleculeKind
    alphabets: tuple[Alphabet, ...]
    default: str = "common"

    def get(self, name: str) -> Alphabet:
        for alphabet in self.alphabets:
            if alphabet.name == name:
                return alphabet
        raise KeyError(f"Unknown {self.kind.value} alphabet: {name}. Available: {self.names()}")

    def names(self) -> list[str]:
        return [alphabet.name for alphabet in self.alphabets]

    def common(self) -> Alphabet:
        return self.get("common")

    def with_n(self) -> Alphabet:
        return self.get("with_n")

    def with_ambiguity(self) -> Alphabet:
        """The middle tier: common symbols plus ``N``."""
        return self.with_n()

    def iupac(self) -> Alphabet:
        return self.get("iupac")

    def default_alphabet(self) -> Alphabet:
        return self.get(self.default)

    def complement(self, symbol: str, alphabet: Alphabet | None = None) -> str:
        """Complement a single symbol, using the family default when no alphabet is given."""
        if len(symbol) != 1:
            raise ValueError(f"Cannot complement multiple symbols at once: {symbol!r}")
        resolved = alphabet if alphabet is not None else self.default_alphabet()
        return resolved.complement(symbol)

    def counterpart(self, alphabet: Alphabet | None) -> Alphabet | None:
        """Return this family's alphabet of the same tier as ``alphabet``.

        Used when converting between kinds, e.g. DNA ``common`` maps to RNA
        ``common``. Unknown or custom alphabets map to ``None``.
        """
        if alphabet is None:
            return None
        if alphabet.kind is self.kind:
            return alphabet
        for candidate in self.alphabets:
            if candidate.name == alphabet.name:
                return candidate
        return None


DNA: Final = AlphabetFamily(
    kind=MoleculeKind.DNA,
    alphabets=(
        Alphabet("common", MoleculeKind.DNA, "ATGCatgc", _DNA_COMMON_COMPLEMENT),
        Alphabet("with_n", MoleculeKind.DNA, "ACGTNacgtn", _DNA_WITH_N_COMPLEMENT),
        Alphabet("iupac", MoleculeKind.DNA, "ACGTRYSWKMBDHVNacgtryswkmbdhvn", _DNA_IUPAC_COMPLEMENT),
    ),
)

RNA: Final = AlphabetFamily(
    kind=MoleculeKind.RNA,
    alphabets=(
        Alphabet("common", MoleculeKind.RNA, "ACGUacgu", _RNA_COMMON_COMPLEMENT),
        Alphabet("with_n", MoleculeKind.RNA, "ACGUNacgun", _RNA_WITH_N_COMPLEMENT),
        Alphabet("iupac", MoleculeKind.RNA, "ACGURYSWKMBDHVNacguryswkmbdhvn", _RNA_IUPAC_COMPLEMENT),
    ),
)

AMINO_ACID: Final = AlphabetFamily(
    kind=MoleculeKind.AMINO_ACID,
    alphabets=(
        Alphabet(
            "common",
            MoleculeKind.AMINO_ACID,
            "ARNDCEQGHILKMFPSTWYVarndceqghilkmfpstwyv",
        ),
        Alphabet(
            "iupac",
            MoleculeKind.AMINO_ACID,
            "ABCDEFGHJIKLMNPQRSTVWXYZabcdefghjiklmnpqrstvwxyz",
        ),
    ),
)

_FAMILIES: Final[dict[MoleculeKind, AlphabetFamily]] = {
    MoleculeKind.DNA: DNA,
    MoleculeKind.RNA: RNA,
    MoleculeKind.AMINO_ACID: AMINO_ACID,
}


def family_for(kind: MoleculeKind | str) -> AlphabetFamily:
    """Return the alphabet family for a kind or kind name (``"dna"``, ``"rna"``, ``"amino_acid"``)."""
    if isinstance(kind, str):
        try:
            kind = MoleculeKind(kind.lower())
        except ValueError:
            raise KeyError(f"Unknown molecule kind: {kind}. Available: {[k.value for k in MoleculeKind]}") from None
    return _FAMILIES[kind]


def get_alphabet(kind: MoleculeKind | str, name: str = "common") -> Alphabet:
    return family_for(kind).get(name)


def parse_alphabet(spec: str) -> Alphabet:
    """Parse a ``"kind:name"`` reference such as ``"dna:iupac"``.

    A bare kind (``"rna"``) resolves to that family's default alphabet.
    """
    kind, _, name = spec.partition(":")
    family = family_for(kind.strip())
    return family.get(name.strip()) if name else family.default_alphabet()


def all_alphabets() -> Iterable[Alphabet]:
    for family in _FAMILIES.values():
        yield from family.alphabets
