# src/atlas_configstore/core/codecs/toml_codec.py
"""
Driver TOML (plugin, somente leitura).

Decodificação via `tomllib` da biblioteca padrão. O driver não possui
encoder: dump em TOML levanta `UnsupportedConfigFormatError`.
"""

from __future__ import annotations

import tomllib
from typing import Any, Dict

from .registry import TOML, Driver


def decode_toml(blob: bytes) -> Dict[str, Any]:
    return tomllib.loads(blob.decode("utf-8-sig"))


TOML_DRIVER = Driver(name=TOML, decoder=decode_toml)
