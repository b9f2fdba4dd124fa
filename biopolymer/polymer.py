"""Polymer-level dispatch: conversion and alphabet-aware validation.

These functions work on any value that implements the
:class:`~biopolymer.core.interfaces.Polymeric` and
:class:`~biopolymer.core.interfaces.Sequential` surfaces.

Default conversions exist only where they are unambiguous:

>>> dna = DnaStrand.new("ttagccgt", label="a label")
>>> convert(dna, RnaStrand).symbols
'uuagccgu'

Other pairs, such as amino acid to DNA, would need a codon choice. They
raise :class:`~biopolymer.errors.UndefinedConversionError` unless a
converter is passed explicitly with ``conversion=``.
"""

from __future__ import annotations

import logging
from typing import Any

from biopolymer.alphabets import Alphabet
from biopolymer.conversions.base import Converter
from biopolymer.errors import NoAlphabetError, NoConverterError, UndefinedConversionError

_LOGGER = logging.getLogger(__name__)


def convert(data: Any, target: type, *, conversion: type[Converter] | None = None) -> Any:
    """Convert ``data`` into an instance of ``target``.

    The converter is ``conversion`` when given, otherwise the one exposed by
    ``type(data).converter()``. It supplies a k-wise function and its ``k``.
    The function receives ``data.kmers(k)`` and rebuilds a ``target``,
    carrying over leftover metadata such as the label.

    Raises
    ------
    NoConverterError
        If no override is given and ``data``'s type has no converter.
    UndefinedConversionError
        If the converter defines nothing for ``target``.
    SeqLenMismatchError
        If ``data`` cannot be split into the converter's k-mers.
    """
    converter = conversion
    if converter is None:
        factory = getattr(type(data), "converter", None)
        if factory is None or not callable(factory):
            raise NoConverterError(type(data))
        converter = factory()

    try:
        function, k = converter.to(target)
    except UndefinedConversionError:
        raise UndefinedConversionError(type(data), target) from None

    _LOGGER.debug("Converting %s -> %s via %s (k=%d)", type(data).__name__, target.__name__, converter.__name__, k)
    return function(data.kmers(k), target)


def _resolve(data: Any, alphabet: Alphabet | None) -> Alphabet | None:
    return alphabet if alphabet is not None else getattr(data, "alphabet", None)


def is_valid(data: Any, alphabet: Alphabet | None = None) -> bool:
    """Check ``data`` against the given alphabet, falling back to the carried one.

    Returns ``False`` when neither is available.
    """
    resolved = _resolve(data, alphabet)
    if resolved is None:
        return False
    return data.is_valid(resolved)


def validate(data: Any, alphabet: Alphabet | None = None) -> Any:
    """Validate ``data`` against the given alphabet, falling back to the carried one.

    Raises
    ------
    NoAlphabetError
        If neither a given nor a carried alphabet is available.
    AlphabetMismatchError
        With every offending position. The double-strand variants are
        described in :meth:`biopolymer.core.double_strand.DoubleStrand.validate`.
    """
    resolved = _resolve(data, alphabet)
    if resolved is None:
        raise NoAlphabetError()
    return data.validate(resolved)
