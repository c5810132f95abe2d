# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas ConfigStore.

Este módulo define fixtures reutilizáveis que fornecem:
- fontes de configuração mínimas em YAML e JSON (como strings)
- stores prontos com o driver YAML registrado

Decisões arquiteturais:
    - Fontes são fornecidas como string para evitar I/O desnecessário
    - Testes que exigem arquivos usam `tmp_path` explicitamente
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Cada fixture devolve dados novos e isolados

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Fontes de configuração
# =====================================================

@pytest.fixture
def project_like_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML base (defaults) semelhante ao uso real.

    Representa o conteúdo típico de um `config.defaults.yaml`, servindo
    como base sobre a qual fontes posteriores são mescladas.

    Returns:
        str: Conteúdo YAML representando a configuração base.
    """

    return """\
name: atlas
debug: false
engine:
  fail_fast: true
  log_level: INFO
  workers: 4
db:
  hosts:
    - host: db-1
      port: 5432
    - host: db-2
      port: 5433
tags: [core, config]
"""


@pytest.fixture
def project_like_local_yaml() -> str:
    """
    Fixture que fornece um YAML de override local.

    Contém apenas as chaves sobrescritas: um escalar aninhado, uma
    sequência (substituída por inteiro) e uma chave nova.

    Returns:
        str: Conteúdo YAML representando overrides locais.
    """

    return """\
engine:
  log_level: DEBUG
tags: [local]
extra:
  owner: data-team
"""


@pytest.fixture
def json_base() -> str:
    return """\
{
  // comentário de linha inteira
  "name": "app",
  "arr1": ["val1", "val21"],
  "map1": {"key": "val", "key1": "val1"},
  "baseKey": "value",
  "envKey": "${SHELL}",
  "envKey1": "${NotExist|defValue}"
}
"""


@pytest.fixture
def json_other() -> str:
    return """\
{
  "name": "app-other",
  "map1": {"key2": "val2"},
  "arr1": ["other"]
}
"""


# =====================================================
# Stores
# =====================================================

@pytest.fixture
def yaml_store():
    """
    Fixture que fornece um `ConfigStore` vazio com o driver YAML registrado.

    Returns:
        ConfigStore: Store nomeado `test`, com JSON (padrão) e YAML.
    """
    from atlas_configstore import YAML_DRIVER, ConfigStore

    store = ConfigStore("test")
    store.add_driver(YAML_DRIVER)
    return store


@pytest.fixture
def loaded_store(yaml_store, project_like_defaults_yaml):
    """Store com o YAML de defaults já carregado."""
    yaml_store.load_sources("yaml", project_like_defaults_yaml)
    return yaml_store
