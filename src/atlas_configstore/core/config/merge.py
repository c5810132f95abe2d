# src/atlas_configstore/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de merge utilizada por toda operação
de carregamento do Atlas ConfigStore: cada fonte decodificada é mesclada
sobre a árvore existente, na ordem das chamadas.

Política de merge:
    - mapping + mapping → merge recursivo por chave
    - sequência         → sobrescrita total (sem concatenação nem merge por índice)
    - escalar           → sobrescrita direta (o valor mais recente vence)
    - mapping vs não-mapping → erro estrutural explícito

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves não sobrescritas são preservadas
    - Conflitos estruturais interrompem o merge sem resultado parcial

Limites explícitos:
    - Não carrega arquivos nem decodifica bytes
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError, InvalidConfigRootTypeError
from .tree import NodeKind, kind_of, normalize


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas árvores de configuração.

    Esta função combina uma árvore base com uma árvore de override,
    produzindo uma nova estrutura resultante sem mutar nenhum dos inputs.

    Decisões arquiteturais:
        - Mapeamentos são mesclados recursivamente
        - Sequências e escalares do override substituem o valor base
        - Escalares de tipos distintos (inclusive `None`) não geram conflito
        - Um mapeamento nunca é substituído por (nem substitui) um valor
          de outro tipo de nó, `None` incluído

    Args:
        base (Dict[str, Any]): Árvore base (ex.: fontes carregadas antes).
        override (Dict[str, Any]): Árvore mais recente.

    Returns:
        Dict[str, Any]: Nova árvore resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito estrutural entre base e override.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"deep-merge requires mappings at the root, got: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    return _merge_mapping(base, override, prefix="")


def _merge_mapping(base: Dict[str, Any], override: Dict[str, Any], prefix: str) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        path = f"{prefix}{key}"

        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]
        base_kind = kind_of(base_value)
        override_kind = kind_of(override_value)

        if base_kind is NodeKind.MAPPING and override_kind is NodeKind.MAPPING:
            result[key] = _merge_mapping(base_value, override_value, prefix=f"{path}.")
            continue

        if (base_kind is NodeKind.MAPPING) != (override_kind is NodeKind.MAPPING):
            raise ConfigTypeConflictError(
                f"type conflict at key '{path}': "
                f"{base_kind.value} vs {override_kind.value}"
            )

        # sequência ou escalar -> sobrescrita total
        result[key] = deepcopy(override_value)

    return result


def merge_into(tree: Dict[str, Any], incoming: Any) -> Dict[str, Any]:
    """
    Mescla uma fonte (já decodificada ou estruturada) sobre a árvore do store.

    A fonte é normalizada antes do merge, permitindo dataclasses e
    `Mapping`s arbitrários. Quando a árvore atual está vazia, a fonte
    normalizada torna-se a nova árvore sem custo de merge.

    Args:
        tree (Dict[str, Any]): Árvore atual do store (não é mutada).
        incoming (Any): Fonte a mesclar. `None` equivale a uma fonte vazia.

    Returns:
        Dict[str, Any]: Nova árvore resultante.

    Raises:
        InvalidConfigRootTypeError: Se a raiz da fonte não for um mapeamento.
        ConfigTypeConflictError: Se a fonte não for representável ou houver
            conflito estrutural.
    """
    if incoming is None:
        incoming = {}

    normalized = normalize(incoming)
    if kind_of(normalized) is not NodeKind.MAPPING:
        raise InvalidConfigRootTypeError(
            f"config root must be a mapping, got: {type(incoming).__name__}"
        )

    if not tree:
        return normalized

    return deep_merge(tree, normalized)
