"""Tests for decoder config models and the config layer."""

import json

import pytest
from pydantic import ValidationError

from gzdec import config as config_layer
from gzdec.errors import ConfigError
from gzdec.models import CHUNK_SIZE, GZIP_WINDOW_BITS, DecoderConfig


def test_defaults_match_reference_sizing():
    cfg = DecoderConfig()
    assert cfg.input_chunk_size == CHUNK_SIZE == 256 * 1024
    assert cfg.output_chunk_size == CHUNK_SIZE
    assert cfg.window_bits == GZIP_WINDOW_BITS == 31
    assert cfg.silent is False
    assert cfg.forward_partial is False


@pytest.mark.parametrize("field", ["input_chunk_size", "output_chunk_size"])
def test_chunk_sizes_must_be_positive(field):
    with pytest.raises(ValidationError):
        DecoderConfig(**{field: 0})


@pytest.mark.parametrize("bits", [-15, 15, 24, 32, 48])
def test_window_bits_must_select_gzip_framing(bits):
    with pytest.raises(ValidationError):
        DecoderConfig(window_bits=bits)


@pytest.mark.parametrize("bits", [25, 31, 40, 47])
def test_window_bits_accepted(bits):
    assert DecoderConfig(window_bits=bits).window_bits == bits


def test_no_config_file_uses_defaults():
    cfg = config_layer.require()
    assert cfg == DecoderConfig()
    assert config_layer.config_path() is None


def test_cwd_config_file_is_found(tmp_path):
    (tmp_path / "gzdec.json").write_text(json.dumps({"input_chunk_size": 1024}))
    cfg = config_layer.require()
    assert cfg.input_chunk_size == 1024
    assert config_layer.config_path().resolve() == (tmp_path / "gzdec.json").resolve()


def test_hidden_config_file_preferred(tmp_path):
    (tmp_path / "gzdec.json").write_text(json.dumps({"silent": False}))
    (tmp_path / ".gzdec.json").write_text(json.dumps({"silent": True}))
    assert config_layer.require().silent is True


def test_env_var_overrides_cwd(tmp_path, monkeypatch):
    (tmp_path / "gzdec.json").write_text(json.dumps({"silent": False}))
    env_file = tmp_path / "other.json"
    env_file.write_text(json.dumps({"silent": True}))
    monkeypatch.setenv("GZDEC_CONFIG", str(env_file))
    assert config_layer.require().silent is True


def test_require_caches_until_reset(tmp_path):
    path = tmp_path / "gzdec.json"
    path.write_text(json.dumps({"output_chunk_size": 10}))
    first = config_layer.require()
    path.write_text(json.dumps({"output_chunk_size": 20}))
    assert config_layer.require() is first

    config_layer.reset()
    assert config_layer.require().output_chunk_size == 20


def test_missing_explicit_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        config_layer.use(tmp_path / "nope.json")


def test_invalid_json_is_config_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError, match="Cannot read"):
        config_layer.use(path)


def test_invalid_values_are_config_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"window_bits": -15}))
    with pytest.raises(ConfigError, match="Invalid config"):
        config_layer.use(path)


def test_persist_round_trips(tmp_path):
    path = tmp_path / "saved.json"
    saved = config_layer.persist(DecoderConfig(input_chunk_size=4096), path)
    assert json.loads(path.read_text())["input_chunk_size"] == 4096
    assert config_layer.config_path() == path

    config_layer.reset()
    assert config_layer.use(path) == saved


def test_persist_without_path_is_config_error():
    with pytest.raises(ConfigError):
        config_layer.persist(DecoderConfig())
