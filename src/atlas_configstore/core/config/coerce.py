# src/atlas_configstore/core/config/coerce.py
"""
Coerção de valores brutos da árvore para tipos primitivos.

Cada função recebe o valor resolvido e devolve `(valor, ok)`. Uma falha
de coerção nunca levanta exceção: o chamador recebe `ok=False` e decide
o fallback (normalmente o default do acessor).

Regras:
    - int:    `int` (exceto `bool`), `float` integral, `str` com dígitos ASCII
    - float:  `int`/`float` (exceto `bool`), `str` em notação decimal ASCII
    - str:    `str`, números via `str()`, `bool` → `"true"`/`"false"`
    - bool:   `bool`, strings reconhecidas (`true`, `yes`, `on`, `1`, ...)
    - strings: sequência cujos elementos são todos convertíveis para `str`
    - string map: mapeamento cujos valores são todos convertíveis para `str`

Nas conversões para texto (`to_str`, `to_strings`, `to_string_map`) o
parâmetro `text` é aplicado a toda folha `str` antes da conversão (usado
pelo store para interpolação de ambiente). Conversões numéricas e
booleanas leem a string literal.

Limites explícitos:
    - Não acessa a árvore nem caches
    - Não converte estruturas aninhadas em strings
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Tuple

from .tree import NodeKind, kind_of

TextHook = Callable[[str], str]

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_TRUE_WORDS = {"1", "t", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "f", "false", "no", "n", "off"}


def _identity(text: str) -> str:
    return text


def to_str(value: Any, text: TextHook = _identity) -> Tuple[str, bool]:
    if isinstance(value, str):
        return text(value), True
    if isinstance(value, bool):
        return ("true" if value else "false"), True
    if isinstance(value, (int, float)):
        return str(value), True
    return "", False


def to_int(value: Any) -> Tuple[int, bool]:
    if isinstance(value, bool):
        return 0, False
    if isinstance(value, int):
        return value, True
    if isinstance(value, float):
        if value.is_integer():
            return int(value), True
        return 0, False
    if isinstance(value, str):
        digits = value.strip()
        if _INT_TEXT.fullmatch(digits):
            return int(digits), True
        return 0, False
    return 0, False


def to_float(value: Any) -> Tuple[float, bool]:
    if isinstance(value, bool):
        return 0.0, False
    if isinstance(value, (int, float)):
        return float(value), True
    if isinstance(value, str):
        number = value.strip()
        if _FLOAT_TEXT.fullmatch(number):
            return float(number), True
        return 0.0, False
    return 0.0, False


def to_bool(value: Any) -> Tuple[bool, bool]:
    if isinstance(value, bool):
        return value, True
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True, True
        if word in _FALSE_WORDS:
            return False, True
    return False, False


def to_strings(value: Any, text: TextHook = _identity) -> Tuple[List[str], bool]:
    if kind_of(value) is not NodeKind.SEQUENCE:
        return [], False

    out: List[str] = []
    for item in value:
        converted, ok = to_str(item, text)
        if not ok:
            return [], False
        out.append(converted)
    return out, True


def to_string_map(value: Any, text: TextHook = _identity) -> Tuple[Dict[str, str], bool]:
    if kind_of(value) is not NodeKind.MAPPING:
        return {}, False

    out: Dict[str, str] = {}
    for key, item in value.items():
        converted, ok = to_str(item, text)
        if not ok:
            return {}, False
        out[key] = converted
    return out, True
