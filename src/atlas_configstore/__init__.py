# src/atlas_configstore/__init__.py
"""
Atlas ConfigStore: store de configuração em memória, multi-formato.

Este pacote raiz define o namespace público do Atlas ConfigStore. Um
`ConfigStore` carrega fontes estruturadas (JSON, YAML, TOML ou dados
Python), mescla todas em uma única árvore e expõe acessores tipados por
path pontuado, com cache e interpolação opcional de variáveis de ambiente.

Arquitetura em alto nível:
    - core.config → árvore, merge, resolução de paths, coerção e cache
    - core.codecs → registro de codecs e drivers de formato
    - core.store  → orquestração, opções e concorrência

Nota importante:
    Não existe store global. O chamador cria o `ConfigStore` e o repassa
    explicitamente aos componentes que precisam de configuração.
"""

from .core.codecs import (
    JSON,
    JSON_DRIVER,
    TOML,
    TOML_DRIVER,
    YAML,
    YAML_DRIVER,
    YML,
    CodecRegistry,
    Driver,
)
from .core.config.errors import (
    ConfigDecodeError,
    ConfigEncodeError,
    ConfigError,
    ConfigNotFoundError,
    ConfigPathError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    ReadonlyConfigError,
    UnsupportedConfigFormatError,
)
from .core.store import ConfigStore, Options

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "Options",
    "CodecRegistry",
    "Driver",
    "JSON",
    "YAML",
    "YML",
    "TOML",
    "JSON_DRIVER",
    "YAML_DRIVER",
    "TOML_DRIVER",
    "ConfigError",
    "ConfigNotFoundError",
    "UnsupportedConfigFormatError",
    "ConfigDecodeError",
    "ConfigEncodeError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "ReadonlyConfigError",
    "ConfigPathError",
]
