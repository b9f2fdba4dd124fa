"""Utility exports."""

from .config import PolymerConfig, load_config
from .logging import get_logger
from .random_sequences import random_dna, random_dna_strands

__all__ = [
    "PolymerConfig",
    "get_logger",
    "load_config",
    "random_dna",
    "random_dna_strands",
]
