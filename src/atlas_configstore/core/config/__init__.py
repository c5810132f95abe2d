# src/atlas_configstore/core/config/__init__.py
"""
Camada de árvore de configuração do Atlas ConfigStore.

Este pacote contém as estruturas e utilitários puros que operam sobre a
árvore de configuração, independentes do store e de qualquer formato de
serialização.

Responsabilidades do pacote:
    - Modelo de nós da árvore e normalização de dados externos (tree)
    - Deep-merge determinístico com sobrescrita (merge)
    - Resolução e escrita por path pontuado (paths)
    - Coerção tipada de valores brutos (coerce)
    - Interpolação de variáveis de ambiente (interpolate)
    - Cache de leitura segregado por tipo (cache)
    - Hash canônico da árvore (hashing)
    - Hierarquia de exceções (errors)

Invariantes:
    - A árvore é composta apenas por dict, list e escalares
    - Conflitos estruturais são tratados como erro
    - Misses de leitura nunca são tratados como erro

Limites explícitos:
    - Não lê arquivos
    - Não mantém estado global
    - Não controla concorrência (responsabilidade do store)
"""
