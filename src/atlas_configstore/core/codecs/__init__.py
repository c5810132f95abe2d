# src/atlas_configstore/core/codecs/__init__.py
"""
Codecs de formato do Atlas ConfigStore.

Este pacote contém o registro de codecs e os drivers de formato
distribuídos com o projeto. Cada driver é um par decoder/encoder
tratado pelo store como caixa-preta.

Drivers disponíveis:
    - JSON → pré-registrado em todo store
    - YAML → plugin (PyYAML)
    - TOML → plugin somente leitura (`tomllib`)

Limites explícitos:
    - Não realiza merge
    - Não acessa a árvore do store
"""

from .json_codec import JSON_DRIVER
from .registry import JSON, TOML, YAML, YML, CodecRegistry, Driver, canonical_format
from .toml_codec import TOML_DRIVER
from .yaml_codec import YAML_DRIVER

__all__ = [
    "CodecRegistry",
    "Driver",
    "canonical_format",
    "JSON",
    "YAML",
    "YML",
    "TOML",
    "JSON_DRIVER",
    "YAML_DRIVER",
    "TOML_DRIVER",
]
