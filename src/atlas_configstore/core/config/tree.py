# src/atlas_configstore/core/config/tree.py
"""
Modelo de árvore de configuração.

A árvore do Atlas ConfigStore é composta exclusivamente por estruturas
Python puras:
    - mapeamento → `dict` com chaves `str`
    - sequência  → `list`
    - escalar    → `str`, `int`, `float`, `bool` ou `None`

Todo consumidor da árvore (merge, resolução de path, escrita, coerção)
classifica nós via `kind_of`, que devolve um `NodeKind` fechado. Nós fora
desse universo não são aceitos na árvore.

Responsabilidades do módulo:
    - Classificar nós (`NodeKind`, `kind_of`)
    - Normalizar dados externos (dataclasses, Mappings, tuplas) em árvore

Invariantes:
    - `normalize` sempre devolve uma estrutura nova (sem aliasing com a entrada)
    - Chaves de mapeamento são sempre `str` após normalização

Limites explícitos:
    - Não valida semântica de domínio
    - Não realiza merge
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, time
from enum import Enum
from typing import Any, Dict

from .errors import ConfigTypeConflictError


class NodeKind(str, Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


_SCALAR_TYPES = (str, int, float, bool, type(None))


def kind_of(value: Any) -> NodeKind:
    """
    Classifica um nó da árvore.

    Raises:
        TypeError: Se o valor não pertencer ao universo da árvore.
    """
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, list):
        return NodeKind.SEQUENCE
    if isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR
    raise TypeError(f"unsupported config node type: {type(value).__name__}")


def normalize(value: Any) -> Any:
    """
    Converte dados estruturados externos em uma árvore de configuração.

    Conversões aplicadas:
        - instância de dataclass → `dataclasses.asdict` (recursivo)
        - `Mapping`              → `dict` com chaves convertidas para `str`
        - `list` / `tuple`       → `list`
        - `date` / `datetime` / `time` → string ISO 8601
        - escalares              → preservados

    Chaves não textuais (ex.: inteiros produzidos por YAML) são
    convertidas com `str()`; booleanos viram `"true"`/`"false"`.

    Args:
        value (Any): Valor a normalizar.

    Returns:
        Any: Nova estrutura composta apenas por nós suportados.

    Raises:
        ConfigTypeConflictError: Se algum valor não puder ser representado
            na árvore (ex.: objetos arbitrários, sets, bytes).
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return normalize(dataclasses.asdict(value))

    if isinstance(value, Mapping):
        out: Dict[str, Any] = {}
        for key, item in value.items():
            out[_key_to_str(key)] = normalize(item)
        return out

    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]

    if isinstance(value, (date, time)):
        return value.isoformat()

    if isinstance(value, _SCALAR_TYPES):
        return value

    raise ConfigTypeConflictError(
        f"cannot merge value of type {type(value).__name__} into config tree"
    )


def _key_to_str(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return str(key)
    raise ConfigTypeConflictError(
        f"unsupported mapping key type: {type(key).__name__}"
    )
