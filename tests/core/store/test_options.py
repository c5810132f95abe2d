# tests/core/store/test_options.py
"""
Testes das opções do store.
"""

import pytest

from atlas_configstore import ConfigStore, Options


def test_defaults():
    opts = Options()
    assert opts.parse_env is False
    assert opts.readonly is False
    assert opts.dump_format == "json"
    assert opts.read_format == "json"


def test_empty_formats_default_to_json_and_yml_is_canonical():
    opts = Options(dump_format="", read_format="yml")
    assert opts.dump_format == "json"
    assert opts.read_format == "yaml"


def test_from_mapping():
    opts = Options.from_mapping({"parse_env": True, "dump_format": "yaml"})
    assert opts == Options(parse_env=True, dump_format="yaml")


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError):
        Options.from_mapping({"parse_envs": True})


def test_store_options_are_a_copy():
    store = ConfigStore("app")
    opts = store.options
    opts.readonly = True
    assert store.options.readonly is False
