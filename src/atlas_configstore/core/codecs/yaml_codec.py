# src/atlas_configstore/core/codecs/yaml_codec.py
"""
Driver YAML (plugin; registrado explicitamente pelo chamador).

Usa apenas as APIs seguras do PyYAML (`safe_load` / `safe_dump`).
Documento vazio é decodificado como `None`, tratado pelo store como
fonte vazia.
"""

from __future__ import annotations

from typing import Any

import yaml  # PyYAML

from .registry import YAML, Driver


def decode_yaml(blob: bytes) -> Any:
    return yaml.safe_load(blob.decode("utf-8-sig"))


def encode_yaml(tree: Any) -> bytes:
    text = yaml.safe_dump(
        tree,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    return text.rstrip("\n").encode("utf-8")


YAML_DRIVER = Driver(name=YAML, decoder=decode_yaml, encoder=encode_yaml)
