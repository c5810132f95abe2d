# src/atlas_configstore/core/config/errors.py
"""
Exceções canônicas do Atlas ConfigStore.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, decodificação, merge e escrita de configuração.

A distinção entre os tipos de falha é parte do contrato do store:
    - valor ausente → silencioso (não é exceção)
    - fonte malformada → `ConfigDecodeError`
    - formato sem codec → `UnsupportedConfigFormatError`
    - estruturas incompatíveis → `ConfigTypeConflictError`

Invariantes:
    - Todas as exceções do store herdam de `ConfigError`
    - Falhas de coerção de tipo nunca são representadas por exceções
    - Misses de path nunca são representados por exceções

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (responsabilidade do Store)
"""


class ConfigError(Exception):
    """
    Exceção base para erros do Atlas ConfigStore.

    Todas as exceções levantadas durante carregamento, merge, escrita
    e serialização de configuração herdam desta classe, permitindo
    captura genérica por chamadores que tratam configuração como
    requisito de inicialização.
    """


class ConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração não existe.

    Decisões arquiteturais:
        - Em `load_files` a ausência é fatal para a chamada
        - Em `load_exists` a ausência é ignorada e esta exceção não é levantada

    Limites explícitos:
        - Não tenta criar o arquivo nem inferir caminhos alternativos
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando não existe codec registrado para um formato.

    Ocorre tanto na decodificação (load) quanto na codificação (dump).
    Na decodificação aborta o carregamento; na codificação é devolvida
    ao chamador, que pode tratá-la e tentar outro formato.

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
        - Não converte automaticamente entre formatos
    """


class ConfigDecodeError(ConfigError):
    """Conteúdo da fonte não pôde ser decodificado pelo codec do formato."""


class ConfigEncodeError(ConfigError):
    """Encoder do formato falhou ao serializar a árvore."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando estruturas incompatíveis são mescladas.

    Exemplo de conflito:
        - base:     {"engine": {"fail_fast": true}}
        - override: {"engine": "DEBUG"}

    Um mapeamento nunca é substituído por um escalar ou sequência (e
    vice-versa). Escalares de tipos diferentes e sequências não geram
    conflito: o valor mais recente sobrescreve o anterior.

    Invariantes:
        - Nenhum merge parcial é aplicado ao store em caso de conflito
    """


class InvalidConfigRootTypeError(ConfigTypeConflictError):
    """
    Exceção levantada quando a raiz de uma fonte não é um mapeamento.

    A árvore do store é sempre um mapa chave-valor; listas ou escalares
    no root não podem ser mesclados nela.
    """


class ReadonlyConfigError(ConfigError):
    """Escrita solicitada em um store configurado como somente leitura."""


class ConfigPathError(ConfigError):
    """
    Exceção levantada quando um path não pode ser usado para escrita.

    Exemplos:
        - path vazio
        - descida através de um valor escalar (`a.b` quando `a` é string)
        - índice não numérico ou fora do intervalo em uma sequência

    Limites explícitos:
        - Leituras nunca levantam esta exceção (miss → not-found)
    """
