# src/atlas_configstore/core/store/options.py
"""
Opções de comportamento do store.

Campos:
- parse_env: interpola `${NAME}` / `${NAME|default}` em folhas string lidas
- readonly: rejeita escritas via `set`
- dump_format: formato usado por `write_to`
- read_format: formato usado quando a fonte não informa o seu
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..codecs.registry import JSON, canonical_format


@dataclass
class Options:
    parse_env: bool = False
    readonly: bool = False
    dump_format: str = JSON
    read_format: str = JSON

    def __post_init__(self) -> None:
        self.dump_format = canonical_format(self.dump_format or JSON)
        self.read_format = canonical_format(self.read_format or JSON)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Options":
        """
        Constrói opções a partir de um mapeamento simples.

        Raises:
            ValueError: Se o mapeamento contiver chaves desconhecidas.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"unknown store options: {', '.join(unknown)}")
        return cls(**dict(mapping))
