"""Configuration utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from biopolymer.alphabets import Alphabet, family_for


@dataclass(slots=True)
class PolymerConfig:
    kind: str = "dna"
    alphabet: str = "common"
    gap: str = "-"
    seed: int | None = None
    log_level: str = "INFO"
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.gap) != 1:
            raise ValueError(f"gap must be a single character, got {self.gap!r}")

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "alphabet": self.alphabet,
            "gap": self.gap,
            "seed": self.seed,
            "log_level": self.log_level,
            "extra": dict(self.extra),
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> PolymerConfig:
        """Build a config from a mapping. Unknown keys are kept in ``extra``."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs = {key: value for key, value in data.items() if key in known}
        extra = dict(data.get("extra") or {})
        extra.update({key: value for key, value in data.items() if key not in known and key != "extra"})
        return cls(**kwargs, extra=extra)

    def resolve_alphabet(self) -> Alphabet:
        """Look up ``(kind, alphabet)`` in the registry.

        Raises
        ------
        KeyError
            If the kind or alphabet name is unknown.
        """
        return family_for(self.kind).get(self.alphabet)


def load_config(path: str | Path) -> PolymerConfig:
    """Read a JSON or YAML config file into a :class:`PolymerConfig`."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() == ".json":
        data = json.loads(path.read_text())
    else:
        data = yaml.safe_load(path.read_text())
    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return PolymerConfig.from_mapping(data)
