"""Converter registry base."""

from __future__ import annotations

import logging
from typing import ClassVar

from biopolymer.core.interfaces import KmerConverter
from biopolymer.errors import UndefinedConversionError

_LOGGER = logging.getLogger(__name__)


class Converter:
    """Maps target sequence types to k-wise conversion functions.

    Each subclass gets its own empty registry. A conversion function takes
    the source's :class:`~biopolymer.core.kmers.KmerPartition` and the
    target type, and returns the new instance.

    Example
    -------
    >>> class ShoutingConverter(Converter):
    ...     pass
    >>> ShoutingConverter.register(DnaStrand, lambda kmers, target: target.new(
    ...     "".join(kmers).upper(), label=kmers.metadata["label"]), k=1)
    """

    _conversions: ClassVar[dict[type, tuple[KmerConverter, int]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._conversions = {}

    @classmethod
    def register(cls, target: type, function: KmerConverter, k: int = 1) -> None:
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        cls._conversions[target] = (function, k)
        _LOGGER.debug("Registered %s -> %s (k=%d)", cls.__name__, target.__name__, k)

    @classmethod
    def to(cls, target: type) -> tuple[KmerConverter, int]:
        """Return ``(function, k)`` for ``target``.

        Raises
        ------
        UndefinedConversionError
            If no default conversion to ``target`` is registered. That does
            not mean none could exist, only that the choice is left to the
            caller.
        """
        try:
            return cls._conversions[target]
        except KeyError:
            raise UndefinedConversionError(cls, target) from None

    @classmethod
    def targets(cls) -> list[type]:
        return list(cls._conversions)
