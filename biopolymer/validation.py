"""Validation engine: alphabet membership and complementation.

These are low-level functions over plain symbol strings. The sequence types
in :mod:`biopolymer.core` build on them. Both :func:`validate_against` and
:func:`complement` scan the whole input and report *every* offending
position instead of stopping at the first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from biopolymer.alphabets import Alphabet, AlphabetFamily
from biopolymer.errors import AlphabetMismatchError, UnknownSymbolError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Mismatch:
    """A symbol at ``position`` that is not allowed by ``alphabet``."""

    symbol: str
    position: int
    alphabet: Alphabet


def ensure_alphabet(alphabet: object) -> Alphabet:
    """Reject anything that is not an :class:`Alphabet` (caller contract violation)."""
    if not isinstance(alphabet, Alphabet):
        raise TypeError(f"alphabet must be an Alphabet, received {alphabet!r}")
    return alphabet


def validate_against(symbols: str, alphabet: Alphabet) -> str:
    """Check every symbol of ``symbols`` against ``alphabet``.

    Returns the symbols unchanged when all are members.

    Raises
    ------
    AlphabetMismatchError
        Listing every position whose symbol is not in the alphabet.
    """
    ensure_alphabet(alphabet)
    mismatches = [
        Mismatch(symbol=symbol, position=index, alphabet=alphabet)
        for index, symbol in enumerate(symbols)
        if symbol not in alphabet.symbols
    ]
    if mismatches:
        _LOGGER.debug("%d mismatch(es) against %s", len(mismatches), alphabet.label)
        raise AlphabetMismatchError(mismatches)
    return symbols


def differences(a: Iterable[str], b: Iterable[str]) -> set[str]:
    """Distinct symbols of ``a`` that are not in ``b``.

    This is plain set subtraction and is asymmetric. Pass the sequence first
    and the alphabet second to find the symbols the alphabet does not allow.
    """
    return set(a) - set(b)


def complement(
    symbols: str,
    family: AlphabetFamily,
    alphabet: Alphabet | None = None,
) -> str:
    """Complement every symbol of ``symbols``.

    The alphabet defaults to the family's default alphabet. Casing is kept
    position by position, because the complement tables map each case
    separately.

    Raises
    ------
    AlphabetMismatchError
        Listing every symbol that has no complement in the alphabet.
    TypeError
        If ``alphabet`` is not an :class:`Alphabet` or has no complement table.
    """
    resolved = family.default_alphabet() if alphabet is None else ensure_alphabet(alphabet)
    if not resolved.has_complement:
        raise TypeError(f"alphabet {resolved.label} does not define complements")

    paired: list[str] = []
    mismatches: list[Mismatch] = []
    for index, symbol in enumerate(symbols):
        try:
            paired.append(resolved.complement(symbol))
        except UnknownSymbolError as exc:
            mismatches.append(Mismatch(symbol=exc.symbol, position=index, alphabet=exc.alphabet))

    if mismatches:
        raise AlphabetMismatchError(mismatches)
    return "".join(paired)


def reverse_complement(
    symbols: str,
    family: AlphabetFamily,
    alphabet: Alphabet | None = None,
) -> str:
    """Complement ``symbols`` and reverse the result."""
    return complement(symbols, family, alphabet)[::-1]
