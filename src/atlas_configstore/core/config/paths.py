# src/atlas_configstore/core/config/paths.py
"""
Resolução de paths pontuados sobre a árvore de configuração.

Sintaxe:
    - segmentos separados por `.`: `db.hosts.0.port`
    - segmento sobre mapeamento → busca por chave
    - segmento sobre sequência  → índice inteiro não negativo (ASCII)
    - path vazio → a árvore inteira

Invariantes:
    - `resolve` nunca muta a árvore
    - Um miss em qualquer segmento resulta em not-found, nunca em exceção
    - Não existe limite de profundidade além da própria árvore

Limites explícitos:
    - Não realiza coerção de tipos
    - Não interage com caches
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigPathError
from .tree import NodeKind, kind_of

PATH_SEPARATOR = "."


def split_path(path: str) -> List[str]:
    if path == "":
        return []
    return path.split(PATH_SEPARATOR)


def _as_index(segment: str) -> Optional[int]:
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def resolve(tree: Any, path: str) -> Tuple[Any, bool]:
    """
    Percorre a árvore seguindo o path pontuado.

    Args:
        tree (Any): Nó raiz da busca (normalmente a árvore do store).
        path (str): Path pontuado; `""` endereça a própria raiz.

    Returns:
        Tuple[Any, bool]: `(valor, True)` quando encontrado, `(None, False)` caso contrário.
    """
    node = tree
    for segment in split_path(path):
        kind = kind_of(node)

        if kind is NodeKind.MAPPING:
            if segment not in node:
                return None, False
            node = node[segment]

        elif kind is NodeKind.SEQUENCE:
            index = _as_index(segment)
            if index is None or index >= len(node):
                return None, False
            node = node[index]

        else:
            return None, False

    return node, True


def assign(tree: Dict[str, Any], path: str, value: Any) -> None:
    """
    Escreve `value` no local endereçado por `path`, mutando `tree`.

    Mapeamentos intermediários ausentes são criados. Elementos existentes
    de sequências podem ser substituídos por índice.

    Todas as verificações que podem falhar ocorrem sobre nós já existentes,
    antes da criação de qualquer nó novo: em caso de erro a árvore
    permanece inalterada.

    Raises:
        ConfigPathError: Se o path for vazio, atravessar um escalar ou usar
            um índice inválido em uma sequência.
    """
    segments = split_path(path)
    if not segments:
        raise ConfigPathError("cannot assign to an empty path")

    node: Any = tree
    for position, segment in enumerate(segments):
        last = position == len(segments) - 1
        kind = kind_of(node)

        if kind is NodeKind.MAPPING:
            if last:
                node[segment] = value
                return
            child = node.get(segment)
            if child is None:
                child = {}
                node[segment] = child
            node = child

        elif kind is NodeKind.SEQUENCE:
            index = _as_index(segment)
            if index is None or index >= len(node):
                raise ConfigPathError(
                    f"invalid sequence index '{segment}' in path '{path}'"
                )
            if last:
                node[index] = value
                return
            child = node[index]
            if child is None:
                child = {}
                node[index] = child
            node = child

        else:
            done = PATH_SEPARATOR.join(segments[:position])
            raise ConfigPathError(
                f"cannot descend into scalar at '{done}' while assigning '{path}'"
            )
