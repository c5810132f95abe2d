# src/atlas_configstore/core/config/hashing.py
"""
Impressão digital (fingerprint) de nós da árvore de configuração.

O fingerprint identifica o conteúdo estrutural de qualquer nó da árvore
(a árvore inteira, uma subárvore ou uma folha). O store registra o
fingerprint da árvore no event log a cada merge e expõe o de qualquer
path via `ConfigStore.fingerprint(path)`.

Política:
    - O tipo do nó (`NodeKind`) participa do hash: `{}` e `[]` diferem
    - Mapeamentos são serializados com chaves ordenadas
    - JSON compacto em UTF-8, resumido com SHA-256

Invariantes:
    - Nós estruturalmente equivalentes produzem o mesmo fingerprint,
      independente da ordem de inserção das chaves
    - O valor é sempre uma string hexadecimal de 64 caracteres
    - O nó nunca é mutado
"""

import hashlib
import json
from typing import Any

from .tree import kind_of


def _canonical(node: Any) -> bytes:
    return json.dumps(
        node,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def compute_config_hash(node: Any) -> str:
    """
    Gera o fingerprint SHA-256 de um nó da árvore.

    Raises:
        TypeError: Se o nó não pertencer ao universo da árvore.
    """
    kind = kind_of(node)

    digest = hashlib.sha256()
    digest.update(kind.value.encode("ascii"))
    digest.update(b":")
    digest.update(_canonical(node))
    return digest.hexdigest()
