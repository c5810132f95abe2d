# src/atlas_configstore/core/codecs/registry.py
"""
Registro de codecs por formato.

Este módulo define o `CodecRegistry`, responsável por associar um
identificador de formato (`json`, `yaml`, `toml`, ...) a uma função de
decodificação (bytes → árvore) e a uma função de codificação
(árvore → bytes).

Responsabilidades do módulo:
    - Normalizar aliases de formato (`yml` → `yaml`)
    - Registrar decoders e encoders de forma independente
    - Expor lookup explícito, com erro tipado para formatos ausentes

Invariantes:
    - `yml` e `yaml` ocupam sempre o mesmo slot
    - Identificadores são sensíveis a maiúsculas/minúsculas
    - Um registry criado por `with_defaults()` contém apenas o par JSON

Limites explícitos:
    - Não lê arquivos
    - Não realiza merge
    - Não implementa sintaxe de nenhum formato
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..config.errors import UnsupportedConfigFormatError

Decoder = Callable[[bytes], Any]
Encoder = Callable[[Any], bytes]

JSON = "json"
YAML = "yaml"
YML = "yml"
TOML = "toml"

_ALIASES = {YML: YAML}


def canonical_format(format: str) -> str:
    return _ALIASES.get(format, format)


@dataclass(frozen=True)
class Driver:
    """
    Par decoder/encoder de um formato, registrado como plugin.

    `encoder` pode ser `None` para formatos somente leitura.
    """

    name: str
    decoder: Decoder
    encoder: Optional[Encoder] = None


@dataclass
class CodecRegistry:
    """
    Registro canônico de codecs de configuração.

    Decodificação de formato não registrado é erro fatal para a carga em
    andamento; codificação de formato não registrado levanta o mesmo tipo
    de erro, que o chamador de dump pode tratar.
    """

    _decoders: Dict[str, Decoder] = field(default_factory=dict, init=False, repr=False)
    _encoders: Dict[str, Encoder] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def with_defaults(cls) -> "CodecRegistry":
        from .json_codec import JSON_DRIVER

        registry = cls()
        registry.register_driver(JSON_DRIVER)
        return registry

    def register_decoder(self, format: str, decoder: Decoder) -> None:
        if not callable(decoder):
            raise TypeError(f"decoder for '{format}' must be callable")
        self._decoders[canonical_format(format)] = decoder

    def register_encoder(self, format: str, encoder: Encoder) -> None:
        if not callable(encoder):
            raise TypeError(f"encoder for '{format}' must be callable")
        self._encoders[canonical_format(format)] = encoder

    def register_driver(self, driver: Driver) -> None:
        self.register_decoder(driver.name, driver.decoder)
        if driver.encoder is not None:
            self.register_encoder(driver.name, driver.encoder)

    def has_decoder(self, format: str) -> bool:
        return canonical_format(format) in self._decoders

    def has_encoder(self, format: str) -> bool:
        return canonical_format(format) in self._encoders

    def decoder_for(self, format: str) -> Decoder:
        key = canonical_format(format)
        if key not in self._decoders:
            raise UnsupportedConfigFormatError(
                f"no decoder registered for the format: {format}"
            )
        return self._decoders[key]

    def encoder_for(self, format: str) -> Encoder:
        key = canonical_format(format)
        if key not in self._encoders:
            raise UnsupportedConfigFormatError(
                f"no encoder registered for the format: {format}"
            )
        return self._encoders[key]

    def formats(self) -> List[str]:
        return sorted(set(self._decoders) | set(self._encoders))
