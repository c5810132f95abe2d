# src/atlas_configstore/core/__init__.py
"""
Core do Atlas ConfigStore.

Este pacote reúne a implementação canônica do store de configuração,
sem dependência de CLI, serviços externos ou estado global.

Componentes principais:
    - config → árvore, merge, paths, coerção, interpolação, cache e hashing
    - codecs → registro de codecs e drivers de formato (JSON, YAML, TOML)
    - store  → orquestração de carga, leitura, escrita e dump

Princípios fundamentais:
    - Nenhuma decisão silenciosa sobre fontes malformadas
    - Valores ausentes são rotina, não erro
    - Toda mutação invalida os caches derivados

Limites explícitos:
    - Não valida schema
    - Não observa arquivos
    - Não realiza I/O de rede
"""
