# src/atlas_configstore/core/store/store.py
"""
Store de configuração em memória.

Este módulo define o `ConfigStore`, dono da árvore de configuração, do
registro de codecs, do cache de leitura e das opções. Ele orquestra as
operações de carga, merge, leitura tipada, escrita e dump.

Fluxo de dados:
    bytes → decoder do formato → merge sobre a árvore → leituras por path
    (com cache) → encoder do formato → stream de saída

Concorrência:
    - Um único lock leitores-escritor protege árvore, cache e registry
    - Acessores de leitura rodam concorrentemente entre si
    - Cargas, `set` e limpezas exigem acesso exclusivo
    - Leitura de arquivos e decodificação ocorrem fora do lock

Invariantes:
    - Toda mutação da árvore invalida todos os caches
    - `loaded_files` só recebe um caminho após merge bem-sucedido
    - Um store somente leitura nunca altera a árvore via `set`
    - Falhas de carga são propagadas ao chamador; fontes anteriores da
      mesma chamada permanecem mescladas

Logs:
    Cada store mantém um event log estruturado em memória (`events`),
    com `store`, `level`, `message` e `timestamp` em todas as entradas.
    O log guarda apenas os `max_events` eventos mais recentes e é
    esvaziado por `clear_all`.

Limites explícitos:
    - Não observa arquivos nem recarrega automaticamente
    - Não valida schema
    - Não mantém instância global
"""

from __future__ import annotations

import io
from collections import deque
from copy import deepcopy
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Deque, Dict, List, Mapping, Optional, Tuple, Union

from ..codecs.registry import CodecRegistry, Decoder, Driver, Encoder, canonical_format
from ..config import cache as kinds
from ..config.cache import AccessorCache
from ..config.coerce import (
    to_bool,
    to_float,
    to_int,
    to_str,
    to_string_map,
    to_strings,
)
from ..config.errors import (
    ConfigDecodeError,
    ConfigEncodeError,
    ConfigError,
    ReadonlyConfigError,
)
from ..config.hashing import compute_config_hash
from ..config.interpolate import interpolate_env
from ..config.merge import merge_into
from ..config.paths import assign, resolve
from ..config.tree import normalize
from .lock import RWLock
from .options import Options
from .sources import PathLike, read_source

Source = Union[bytes, str]

DEFAULT_MAX_EVENTS = 1000


class ConfigStore:
    """
    Store de configuração nomeado, com merge de múltiplas fontes.

    Um store novo contém apenas o codec JSON; demais formatos são
    adicionados como drivers (`add_driver`).

    Com `parse_env`, marcadores `${NAME}` são interpolados apenas pelos
    acessores de texto (`get_str`, `get_strings`, `get_string_map`);
    acessores numéricos e booleanos leem o valor literal.

    Exemplo:
        >>> store = ConfigStore("app")
        >>> store.add_driver(YAML_DRIVER)
        >>> store.load_sources("yaml", b"db:\\n  port: 5432\\n")
        >>> store.get_int("db.port")
        (5432, True)
    """

    def __init__(
        self,
        name: str,
        options: Optional[Options] = None,
        registry: Optional[CodecRegistry] = None,
        max_events: int = DEFAULT_MAX_EVENTS,
    ) -> None:
        self._name = name
        self._options = options if options is not None else Options()
        self._registry = registry if registry is not None else CodecRegistry.with_defaults()
        self._data: Dict[str, Any] = {}
        self._loaded_files: List[str] = []
        self._cache = AccessorCache()
        self._lock = RWLock()
        self.events: Deque[Dict[str, Any]] = deque(maxlen=max_events)

    def __repr__(self) -> str:
        return f"ConfigStore(name={self._name!r}, keys={sorted(self._data)})"

    # -----------------------------
    # Identity & options
    # -----------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> Options:
        return replace(self._options)

    def set_options(self, options: Options) -> None:
        with self._lock.write():
            self._options = replace(options)
            self._cache.clear()

    def set_readonly(self, readonly: bool = True) -> None:
        with self._lock.write():
            self._options.readonly = readonly

    # -----------------------------
    # Codec drivers
    # -----------------------------

    def add_driver(self, driver: Driver) -> None:
        with self._lock.write():
            self._registry.register_driver(driver)

    def set_driver(self, format: str, decoder: Decoder, encoder: Encoder) -> None:
        with self._lock.write():
            self._registry.register_decoder(format, decoder)
            self._registry.register_encoder(format, encoder)

    def set_decoder(self, format: str, decoder: Decoder) -> None:
        with self._lock.write():
            self._registry.register_decoder(format, decoder)

    def set_decoders(self, decoders: Mapping[str, Decoder]) -> None:
        with self._lock.write():
            for format, decoder in decoders.items():
                self._registry.register_decoder(format, decoder)

    def set_encoder(self, format: str, encoder: Encoder) -> None:
        with self._lock.write():
            self._registry.register_encoder(format, encoder)

    def set_encoders(self, encoders: Mapping[str, Encoder]) -> None:
        with self._lock.write():
            for format, encoder in encoders.items():
                self._registry.register_encoder(format, encoder)

    def has_decoder(self, format: str) -> bool:
        with self._lock.read():
            return self._registry.has_decoder(format)

    def has_encoder(self, format: str) -> bool:
        with self._lock.read():
            return self._registry.has_encoder(format)

    # -----------------------------
    # Loading
    # -----------------------------

    def load_files(self, *paths: PathLike) -> None:
        """
        Carrega arquivos na ordem informada; arquivo ausente é erro.

        Raises:
            ConfigNotFoundError: Se algum arquivo não existir.
            UnsupportedConfigFormatError: Se não houver decoder para a extensão.
            ConfigDecodeError: Se o conteúdo estiver malformado.
            ConfigTypeConflictError: Se o conteúdo conflitar com a árvore.
        """
        for path in paths:
            self._load_file(path, must_exist=True)

    def load_exists(self, *paths: PathLike) -> None:
        """Como `load_files`, mas ignora silenciosamente arquivos ausentes."""
        for path in paths:
            self._load_file(path, must_exist=False)

    def _load_file(self, path: PathLike, *, must_exist: bool) -> None:
        try:
            blob = read_source(
                path,
                fallback_format=self._options.read_format,
                must_exist=must_exist,
            )
        except ConfigError as e:
            self._log("ERROR", "config file could not be read", origin=str(path), error=str(e))
            raise

        if blob is None:
            self._log("DEBUG", "missing config file skipped", origin=str(path))
            return

        self._ingest(blob.format, blob.content, origin=blob.origin, from_file=True)

    def load_sources(self, format: Optional[str], *sources: Source) -> None:
        """
        Decodifica e mescla conteúdos em memória, na ordem informada.

        Este é o ponto de entrada central de carga: as variantes baseadas
        em arquivo apenas leem os bytes e delegam para cá.

        Args:
            format: Identificador do formato (`json`, `yaml`, `yml`, `toml`, ...).
                Vazio ou `None` usa `options.read_format`.
            *sources: Conteúdos em `bytes` ou `str` (UTF-8).

        Raises:
            UnsupportedConfigFormatError: Se não houver decoder para o formato.
            ConfigDecodeError: Se algum conteúdo estiver malformado.
            ConfigTypeConflictError: Se algum conteúdo conflitar com a árvore.
        """
        fmt = canonical_format(format or self._options.read_format)
        for position, source in enumerate(sources):
            self._ingest(fmt, source, origin=f"<source:{position}>", from_file=False)

    def load_data(self, *objects: Any) -> None:
        """
        Mescla dados já estruturados (dicts, Mappings, dataclasses).

        Raises:
            InvalidConfigRootTypeError: Se algum objeto não tiver raiz de mapeamento.
            ConfigTypeConflictError: Se algum objeto conflitar com a árvore
                ou não for representável.
        """
        for position, obj in enumerate(objects):
            with self._lock.write():
                self._merge_locked(obj, origin=f"<data:{position}>", format=None)

    def _ingest(self, format: str, source: Source, *, origin: str, from_file: bool) -> None:
        with self._lock.read():
            try:
                decoder = self._registry.decoder_for(format)
            except ConfigError as e:
                self._log("ERROR", "no decoder for source", origin=origin, format=format, error=str(e))
                raise

        content = source.encode("utf-8") if isinstance(source, str) else source

        try:
            decoded = decoder(content)
        except ConfigError:
            raise
        except Exception as e:
            self._log("ERROR", "source decode failed", origin=origin, format=format, error=str(e))
            raise ConfigDecodeError(
                f"failed to decode {format} source {origin}: {e}"
            ) from e

        with self._lock.write():
            self._merge_locked(decoded, origin=origin, format=format)
            if from_file:
                self._loaded_files.append(origin)

    def _merge_locked(self, incoming: Any, *, origin: str, format: Optional[str]) -> None:
        try:
            self._data = merge_into(self._data, incoming)
        except ConfigError as e:
            self._log("ERROR", "source merge failed", origin=origin, format=format, error=str(e))
            raise

        self._cache.clear()
        self._log(
            "INFO",
            "source merged",
            origin=origin,
            format=format,
            config_hash=compute_config_hash(self._data),
        )

    # -----------------------------
    # Reading
    # -----------------------------

    def data(self) -> Dict[str, Any]:
        with self._lock.read():
            return deepcopy(self._data)

    def loaded_files(self) -> List[str]:
        with self._lock.read():
            return list(self._loaded_files)

    def fingerprint(self, path: str = "") -> Optional[str]:
        """
        Devolve o fingerprint do nó em `path` (a árvore inteira por padrão).

        Returns:
            Optional[str]: Hash hexadecimal SHA-256, ou `None` se o path não existir.
        """
        with self._lock.read():
            node, found = resolve(self._data, path)
            if not found:
                return None
            return compute_config_hash(node)

    def exists(self, path: str) -> bool:
        with self._lock.read():
            _, found = resolve(self._data, path)
            return found

    def get(self, path: str, default: Any = None) -> Any:
        """
        Devolve o valor bruto em `path` (cópia), ou `default` se ausente.

        Valores brutos não passam por coerção, interpolação ou cache.
        """
        with self._lock.read():
            value, found = resolve(self._data, path)
            if not found:
                return default
            return deepcopy(value)

    def _text_hook(self) -> Callable[[str], str]:
        if self._options.parse_env:
            return interpolate_env
        return _verbatim

    def _typed(
        self, kind: str, path: str, convert: Callable, zero: Any, *, textual: bool = False
    ) -> Tuple[Any, bool]:
        with self._lock.read():
            cached, hit = self._cache.lookup(kind, path)
            if hit:
                return cached, True

            raw, found = resolve(self._data, path)
            if not found:
                return zero, False

            if textual:
                value, ok = convert(raw, self._text_hook())
            else:
                value, ok = convert(raw)
            if not ok:
                return zero, False

            self._cache.store(kind, path, value)
            return value, True

    def get_int(self, path: str) -> Tuple[int, bool]:
        return self._typed(kinds.INT, path, to_int, 0)

    def def_int(self, path: str, default: int = 0) -> int:
        value, found = self.get_int(path)
        return value if found else default

    def get_float(self, path: str) -> Tuple[float, bool]:
        return self._typed(kinds.FLOAT, path, to_float, 0.0)

    def def_float(self, path: str, default: float = 0.0) -> float:
        value, found = self.get_float(path)
        return value if found else default

    def get_str(self, path: str) -> Tuple[str, bool]:
        return self._typed(kinds.STR, path, to_str, "", textual=True)

    def def_str(self, path: str, default: str = "") -> str:
        value, found = self.get_str(path)
        return value if found else default

    def get_bool(self, path: str) -> Tuple[bool, bool]:
        return self._typed(kinds.BOOL, path, to_bool, False)

    def def_bool(self, path: str, default: bool = False) -> bool:
        value, found = self.get_bool(path)
        return value if found else default

    def get_strings(self, path: str) -> Tuple[List[str], bool]:
        return self._typed(kinds.STRINGS, path, to_strings, [], textual=True)

    def def_strings(self, path: str, default: Optional[List[str]] = None) -> List[str]:
        value, found = self.get_strings(path)
        if found:
            return value
        return list(default) if default is not None else []

    def get_string_map(self, path: str) -> Tuple[Dict[str, str], bool]:
        return self._typed(kinds.STRING_MAP, path, to_string_map, {}, textual=True)

    def def_string_map(self, path: str, default: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        value, found = self.get_string_map(path)
        if found:
            return value
        return dict(default) if default is not None else {}

    # -----------------------------
    # Writing
    # -----------------------------

    def set(self, path: str, value: Any) -> None:
        """
        Escreve `value` em `path`, criando mapeamentos intermediários.

        Raises:
            ReadonlyConfigError: Se o store for somente leitura.
            ConfigPathError: Se o path não puder receber escrita.
            ConfigTypeConflictError: Se o valor não for representável na árvore.
        """
        with self._lock.write():
            if self._options.readonly:
                self._log("ERROR", "write rejected on readonly store", path=path)
                raise ReadonlyConfigError(
                    f"config store '{self._name}' is readonly, cannot set '{path}'"
                )

            assign(self._data, path, normalize(value))
            self._cache.clear()
            self._log("INFO", "value set", path=path)

    # -----------------------------
    # Dumping
    # -----------------------------

    def write_to(self, out: Any) -> int:
        return self.dump_to(out, self._options.dump_format)

    def dump_to(self, out: Any, format: str) -> int:
        """
        Codifica a árvore no formato pedido e escreve um blob terminado em newline.

        Aceita streams binários e de texto. Devolve a quantidade escrita
        (bytes ou caracteres, conforme o stream).

        Raises:
            UnsupportedConfigFormatError: Se não houver encoder para o formato.
            ConfigEncodeError: Se o encoder falhar.
        """
        payload = self._encode(format) + b"\n"

        if _is_text_stream(out):
            text = payload.decode("utf-8")
            written = out.write(text)
            size = len(text)
        else:
            written = out.write(payload)
            size = len(payload)

        self._log("INFO", "config dumped", format=canonical_format(format))
        return written if written is not None else size

    def dumps(self, format: Optional[str] = None) -> str:
        return self._encode(format or self._options.dump_format).decode("utf-8")

    def _encode(self, format: str) -> bytes:
        with self._lock.read():
            try:
                encoder = self._registry.encoder_for(format)
            except ConfigError as e:
                self._log("ERROR", "no encoder for format", format=format, error=str(e))
                raise
            snapshot = deepcopy(self._data)

        try:
            encoded = encoder(snapshot)
        except Exception as e:
            raise ConfigEncodeError(f"failed to encode config as {format}: {e}") from e

        if isinstance(encoded, str):
            encoded = encoded.encode("utf-8")
        return encoded

    # -----------------------------
    # Clearing
    # -----------------------------

    def clear_all(self) -> None:
        with self._lock.write():
            self._data = {}
            self._cache.clear()
            self._loaded_files = []
            self.events.clear()
            self._log("INFO", "store cleared")

    def clear_data(self) -> None:
        with self._lock.write():
            self._data = {}
            self._cache.clear()
            self._log("INFO", "data cleared")

    def clear_caches(self) -> None:
        with self._lock.write():
            self._cache.clear()

    # -----------------------------
    # Logging
    # -----------------------------

    def _log(self, level: str, message: str, **extra: Any) -> None:
        event = {
            "store": self._name,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)


def _verbatim(text: str) -> str:
    return text


def _is_text_stream(out: Any) -> bool:
    if isinstance(out, io.TextIOBase):
        return True
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(out, "mode", None)
    if isinstance(mode, str):
        return "b" not in mode
    return False
