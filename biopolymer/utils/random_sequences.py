"""Random DNA generation."""

from __future__ import annotations

import logging
from typing import Literal

import numpy as np

from biopolymer.alphabets import DNA, Alphabet
from biopolymer.core.strands import DnaStrand

_LOGGER = logging.getLogger(__name__)

Case = Literal["lower", "upper", "mixed"]


def _pool(alphabet: Alphabet, case: Case) -> list[str]:
    symbols = alphabet.symbols
    if case == "lower":
        symbols = symbols.lower()
    elif case == "upper":
        symbols = symbols.upper()
    elif case != "mixed":
        raise ValueError(f"case must be 'lower', 'upper' or 'mixed', got {case!r}")
    return list(dict.fromkeys(symbols))


def random_dna(
    size: int,
    count: int,
    *,
    seed: int | None = None,
    alphabet: Alphabet | None = None,
    case: Case = "lower",
) -> list[str]:
    """Draw ``count`` DNA strings of exactly ``size`` symbols, uniformly from ``alphabet``.

    Parameters
    ----------
    size : int
        Symbols per sequence.
    count : int
        Number of sequences.
    seed : int | None
        Seed for :func:`numpy.random.default_rng`. The same seed gives the
        same sequences.
    alphabet : Alphabet | None
        Defaults to ``DNA.common()``.
    case : {"lower", "upper", "mixed"}
        Case of the emitted symbols. ``"mixed"`` draws from both cases.
    """
    if size < 0 or count < 0:
        raise ValueError(f"size and count must be non-negative, got size={size}, count={count}")
    pool = _pool(alphabet if alphabet is not None else DNA.common(), case)
    rng = np.random.default_rng(seed)
    draws = rng.integers(0, len(pool), size=(count, size))
    _LOGGER.debug("Generated %d random sequences of %d symbols (seed=%s)", count, size, seed)
    return ["".join(pool[index] for index in row) for row in draws]


def random_dna_strands(
    size: int,
    count: int,
    *,
    seed: int | None = None,
    alphabet: Alphabet | None = None,
    case: Case = "lower",
) -> list[DnaStrand]:
    """Same as :func:`random_dna`, wrapped as labelled :class:`DnaStrand` values."""
    resolved = alphabet if alphabet is not None else DNA.common()
    strings = random_dna(size, count, seed=seed, alphabet=resolved, case=case)
    return [
        DnaStrand.new(symbols, label=f"random_{index}", alphabet=resolved)
        for index, symbols in enumerate(strings)
    ]
