# tests/core/store/test_store_accessors.py
"""
Testes dos acessores tipados do ConfigStore.

Os testes asseguram que:
- valores são resolvidos por path pontuado (inclusive índices de sequência)
- coerções sem perda são aplicadas e falhas resultam em found=False
- variantes `def_*` devolvem o default quando o valor está ausente ou é inválido
- resultados são servidos por um cache segregado por tipo
- a interpolação de ambiente só ocorre com `parse_env` habilitado

Limites explícitos:
    - Não valida escrita (ver test_store_set_clear)
"""

import pytest

from atlas_configstore import ConfigStore, Options


def test_get_str_and_int_by_path(loaded_store):
    assert loaded_store.get_str("name") == ("atlas", True)
    assert loaded_store.get_str("db.hosts.1.host") == ("db-2", True)
    assert loaded_store.get_int("db.hosts.0.port") == (5432, True)
    assert loaded_store.get_int("engine.workers") == (4, True)


def test_numeric_to_string_and_back(loaded_store):
    assert loaded_store.get_str("db.hosts.0.port") == ("5432", True)
    loaded_store.load_data({"timeout": "30"})
    assert loaded_store.get_int("timeout") == (30, True)


def test_get_bool(loaded_store):
    assert loaded_store.get_bool("engine.fail_fast") == (True, True)
    assert loaded_store.get_bool("debug") == (False, True)
    assert loaded_store.get_bool("name") == (False, False)


def test_get_float(loaded_store):
    assert loaded_store.get_float("engine.workers") == (4.0, True)
    assert loaded_store.def_float("missing", 1.5) == 1.5


def test_get_strings_and_string_map(loaded_store):
    assert loaded_store.get_strings("tags") == (["core", "config"], True)
    assert loaded_store.get_string_map("db.hosts.0") == ({"host": "db-1", "port": "5432"}, True)
    assert loaded_store.get_string_map("engine") == (
        {"fail_fast": "true", "log_level": "INFO", "workers": "4"},
        True,
    )


def test_container_accessor_miss_on_nested_values(loaded_store):
    assert loaded_store.get_strings("db.hosts") == ([], False)
    assert loaded_store.get_string_map("db") == ({}, False)


def test_missing_path_is_not_found_without_error(loaded_store):
    assert loaded_store.get_int("nope.nothing") == (0, False)
    assert loaded_store.get_str("db.hosts.9.host") == ("", False)
    assert loaded_store.get_strings("tags.x") == ([], False)


def test_int_accessor_on_non_numeric_string_falls_back(loaded_store):
    """
    Verifica que uma falha de coerção não é erro e devolve o default.

    Invariantes:
        - `get_int` devolve `(0, False)`
        - `def_int` devolve o default informado
    """
    assert loaded_store.get_int("name") == (0, False)
    assert loaded_store.def_int("name", 99) == 99


def test_def_variants_return_defaults(loaded_store):
    assert loaded_store.def_str("missing", "x") == "x"
    assert loaded_store.def_bool("missing", True) is True
    assert loaded_store.def_strings("missing", ["a"]) == ["a"]
    assert loaded_store.def_strings("missing") == []
    assert loaded_store.def_string_map("missing", {"k": "v"}) == {"k": "v"}
    assert loaded_store.def_string_map("missing") == {}
    assert loaded_store.def_str("name", "x") == "atlas"


def test_raw_get_and_exists(loaded_store):
    assert loaded_store.get("db.hosts.0") == {"host": "db-1", "port": 5432}
    assert loaded_store.get("missing") is None
    assert loaded_store.get("missing", "fallback") == "fallback"
    assert loaded_store.exists("engine.log_level")
    assert not loaded_store.exists("engine.log_level.x")
    assert loaded_store.get("") == loaded_store.data()


def test_raw_get_returns_copy(loaded_store):
    hosts = loaded_store.get("db.hosts")
    hosts.append({"host": "db-3"})
    assert len(loaded_store.get("db.hosts")) == 2


def test_cache_is_filled_and_type_segregated(loaded_store):
    """
    Verifica que o cache guarda entradas independentes por tipo.

    Invariantes:
        - Ler o mesmo path como int e como str produz duas entradas
        - Misses e falhas de coerção não são cacheados
    """
    loaded_store.get_int("db.hosts.0.port")
    loaded_store.get_str("db.hosts.0.port")
    loaded_store.get_int("name")
    loaded_store.get_int("missing")

    cache = loaded_store._cache
    assert cache.lookup("int", "db.hosts.0.port") == (5432, True)
    assert cache.lookup("str", "db.hosts.0.port") == ("5432", True)
    assert cache.size() == 2


def test_cached_containers_are_not_shared_with_callers(loaded_store):
    tags, _ = loaded_store.get_strings("tags")
    tags.append("mutated")
    assert loaded_store.get_strings("tags") == (["core", "config"], True)


def test_env_interpolation_when_enabled(monkeypatch):
    """
    Verifica a interpolação de `${NAME}` e `${NAME|default}` com `parse_env`.

    Invariantes:
        - Variável presente → seu valor
        - Variável ausente com default → default
        - Variável ausente sem default → string vazia
        - Acessores numéricos leem o marcador literal (sem interpolação)
    """
    monkeypatch.setenv("ENVKEY", "hello")
    monkeypatch.delenv("MISSING", raising=False)
    monkeypatch.delenv("PORT_NOT_SET", raising=False)

    store = ConfigStore("env", options=Options(parse_env=True))
    store.load_data({
        "greeting": "${ENVKEY}",
        "fallback": "${MISSING|fallback}",
        "empty": "${MISSING}",
        "list": ["${ENVKEY}", "plain"],
        "map": {"k": "${MISSING|d}"},
        "port": "${PORT_NOT_SET|8080}",
    })

    assert store.get_str("greeting") == ("hello", True)
    assert store.get_str("fallback") == ("fallback", True)
    assert store.get_str("empty") == ("", True)
    assert store.get_strings("list") == (["hello", "plain"], True)
    assert store.get_string_map("map") == ({"k": "d"}, True)
    assert store.get_str("port") == ("8080", True)
    assert store.get_int("port") == (0, False)


def test_env_interpolation_disabled_by_default(monkeypatch, json_base):
    monkeypatch.setenv("SHELL", "/bin/sh")
    store = ConfigStore("app")
    store.load_sources("json", json_base)
    assert store.get_str("envKey") == ("${SHELL}", True)
    assert store.get("envKey1") == "${NotExist|defValue}"


def test_env_interpolation_on_json_source(monkeypatch, json_base):
    monkeypatch.setenv("SHELL", "/bin/sh")
    monkeypatch.delenv("NotExist", raising=False)
    store = ConfigStore("app", options=Options(parse_env=True))
    store.load_sources("json", json_base)
    assert store.def_str("envKey", "") == "/bin/sh"
    assert store.def_str("envKey1", "") == "defValue"


def test_toggling_parse_env_invalidates_cache(monkeypatch):
    monkeypatch.setenv("ENVKEY", "hello")
    store = ConfigStore("env")
    store.load_data({"greeting": "${ENVKEY}"})
    assert store.def_str("greeting") == "${ENVKEY}"

    store.set_options(Options(parse_env=True))
    assert store.def_str("greeting") == "hello"


@pytest.mark.parametrize("path", ["", "db", "tags"])
def test_scalar_accessors_miss_on_containers(loaded_store, path):
    assert loaded_store.get_str(path) == ("", False)
    assert loaded_store.get_int(path) == (0, False)
