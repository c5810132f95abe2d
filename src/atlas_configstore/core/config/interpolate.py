# src/atlas_configstore/core/config/interpolate.py
"""
Interpolação de variáveis de ambiente em strings de configuração.

Marcadores suportados:
    - `${NAME}`          → valor de `NAME` no ambiente, ou `""` se ausente
    - `${NAME|default}`  → valor de `NAME`, ou `default` se ausente

A substituição ocorre em uma única passada: o texto substituído não é
reanalisado, mesmo que contenha novos marcadores.
"""

from __future__ import annotations

import os
import re
from typing import Mapping, Optional

ENV_MARKER = re.compile(r"\$\{\s*([A-Za-z_][A-Za-z0-9_.\-]*)\s*(?:\|([^}]*))?\}")


def interpolate_env(text: str, environ: Optional[Mapping[str, str]] = None) -> str:
    if "${" not in text:
        return text

    env = os.environ if environ is None else environ

    def _substitute(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        value = env.get(name)
        if value is not None:
            return value
        return default if default is not None else ""

    return ENV_MARKER.sub(_substitute, text)
