# src/atlas_configstore/core/config/cache.py
"""
Cache de leitura segregado por tipo.

Cada tipo de acessor possui um espaço próprio (`int`, `str`, `strings`,
`string_map`, ...): ler `x` como inteiro e como string produz entradas
independentes.

Invariantes:
    - Uma entrada contém o último valor convertido com sucesso para (path, tipo)
    - `clear()` invalida todos os espaços de uma só vez
    - Valores mutáveis (listas, dicts) são copiados na entrada e na saída

Limites explícitos:
    - Não decide quando invalidar (responsabilidade do Store)
    - Não resolve paths nem converte valores
"""

from __future__ import annotations

import threading
from copy import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

INT = "int"
FLOAT = "float"
STR = "str"
BOOL = "bool"
STRINGS = "strings"
STRING_MAP = "string_map"

CACHE_KINDS = (INT, FLOAT, STR, BOOL, STRINGS, STRING_MAP)


@dataclass
class AccessorCache:
    _entries: Dict[str, Dict[str, Any]] = field(
        default_factory=lambda: {kind: {} for kind in CACHE_KINDS}, init=False, repr=False
    )
    _mutex: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def lookup(self, kind: str, path: str) -> Tuple[Any, bool]:
        with self._mutex:
            bucket = self._entries[kind]
            if path not in bucket:
                return None, False
            return copy(bucket[path]), True

    def store(self, kind: str, path: str, value: Any) -> None:
        with self._mutex:
            self._entries[kind][path] = copy(value)

    def clear(self) -> None:
        with self._mutex:
            for bucket in self._entries.values():
                bucket.clear()

    def size(self, kind: str = "") -> int:
        with self._mutex:
            if kind:
                return len(self._entries[kind])
            return sum(len(bucket) for bucket in self._entries.values())
