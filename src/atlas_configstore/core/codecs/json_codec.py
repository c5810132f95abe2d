# src/atlas_configstore/core/codecs/json_codec.py
"""
Driver JSON (pré-registrado em todo store).

Notas:
- Linhas inteiras de comentário iniciadas por `//` são ignoradas na
  decodificação; comentários no fim de linha não são suportados.
- A codificação usa UTF-8 sem escape de caracteres não ASCII.
"""

from __future__ import annotations

import json
import re
from typing import Any

from .registry import JSON, Driver

_COMMENT_LINE = re.compile(r"^[ \t]*//[^\n]*$", re.MULTILINE)


def strip_comment_lines(text: str) -> str:
    return _COMMENT_LINE.sub("", text)


def decode_json(blob: bytes) -> Any:
    text = blob.decode("utf-8-sig")
    if not text.strip():
        return None
    return json.loads(strip_comment_lines(text))


def encode_json(tree: Any) -> bytes:
    return json.dumps(tree, indent=2, ensure_ascii=False).encode("utf-8")


JSON_DRIVER = Driver(name=JSON, decoder=decode_json, encoder=encode_json)
