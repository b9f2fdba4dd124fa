"""Conversion registry and the default nucleic-acid conversions."""

from .base import Converter
from .nucleic import (
    AminoAcidConverter,
    DnaConverter,
    DnaDoubleStrandConverter,
    RnaConverter,
    RnaDoubleStrandConverter,
    reverse_transcribe,
    transcribe,
)

__all__ = [
    "Converter",
    "AminoAcidConverter",
    "DnaConverter",
    "DnaDoubleStrandConverter",
    "RnaConverter",
    "RnaDoubleStrandConverter",
    "reverse_transcribe",
    "transcribe",
]
