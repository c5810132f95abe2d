# src/atlas_configstore/core/store/sources.py
"""
Leitura de fontes de configuração a partir do filesystem.

Este módulo é o adaptador fino entre arquivos em disco e o ponto de
entrada `load_sources` do store: lê o conteúdo inteiro do arquivo e
infere o formato pela extensão.

Decisões arquiteturais:
    - O formato é inferido pela extensão, sem distinção de maiúsculas
    - Arquivos sem extensão usam o formato de leitura padrão do store
    - A leitura ocorre fora do lock do store

Limites explícitos:
    - Não decodifica conteúdo
    - Não realiza merge
    - Não verifica se existe codec para o formato inferido
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..codecs.registry import canonical_format
from ..config.errors import ConfigError, ConfigNotFoundError

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SourceBlob:
    origin: str
    format: str
    content: bytes


def format_from_path(path: Path, fallback: str) -> str:
    suffix = path.suffix.lower().lstrip(".")
    if not suffix:
        return canonical_format(fallback)
    return canonical_format(suffix)


def read_source(path: PathLike, *, fallback_format: str, must_exist: bool) -> Optional[SourceBlob]:
    """
    Lê um arquivo de configuração por inteiro.

    Args:
        path: Caminho do arquivo.
        fallback_format: Formato usado quando o arquivo não tem extensão.
        must_exist: Se False, arquivo ausente resulta em `None`.

    Returns:
        SourceBlob com origem, formato inferido e conteúdo bruto; ou `None`
        quando o arquivo não existe e `must_exist` é False.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir e `must_exist` for True.
        ConfigError: Se o caminho existir mas não puder ser lido.
    """
    p = Path(path)

    try:
        content = p.read_bytes()
    except FileNotFoundError:
        if must_exist:
            raise ConfigNotFoundError(f"config file not found: {p}") from None
        return None
    except OSError as e:
        raise ConfigError(f"cannot read config file {p}: {e}") from e

    return SourceBlob(
        origin=str(path),
        format=format_from_path(p, fallback_format),
        content=content,
    )
