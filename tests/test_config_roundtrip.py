import math

import pytest

from impulse_sandbox.core.config import SandboxConfig
from impulse_sandbox.core.errors import ConfigError
from impulse_sandbox.core.io import (
    config_from_dict,
    deserialize_config,
    load_config,
    save_config,
    serialize_config,
)


def test_defaults() -> None:
    config = SandboxConfig()
    assert config.interval == 0.1
    assert config.gravity == 50.0
    assert (config.x0, config.y0, config.u0, config.v0) == (100.0, 200.0, 0.0, 0.0)
    assert config.interval_ms == 100


def test_config_roundtrip(tmp_path) -> None:
    config = SandboxConfig(interval=0.05, gravity=9.81, x0=10.0, y0=20.0, u0=1.5, v0=-2.5)
    path = save_config(config, tmp_path / "sandbox.json")

    loaded = load_config(path)

    assert loaded == config


def test_missing_keys_take_defaults() -> None:
    config = deserialize_config('{"gravity": 20}')
    assert config.gravity == 20.0
    assert config.interval == 0.1
    assert (config.x0, config.y0) == (100.0, 200.0)


def test_serialized_layout() -> None:
    payload = serialize_config(SandboxConfig())
    assert '"initial_position": [\n    100.0,\n    200.0\n  ]' in payload
    assert '"schema_version": 1' in payload


@pytest.mark.parametrize(
    "kwargs",
    [
        {"interval": 0.0},
        {"interval": -1.0},
        {"gravity": math.inf},
        {"x0": math.nan},
        {"u0": "fast"},
    ],
)
def test_invalid_config_rejected(kwargs) -> None:
    with pytest.raises(ConfigError):
        SandboxConfig(**kwargs)


def test_unknown_schema_version_rejected() -> None:
    with pytest.raises(ConfigError):
        config_from_dict({"schema_version": 99})


def test_malformed_payloads_rejected() -> None:
    with pytest.raises(ConfigError):
        deserialize_config("{not json")
    with pytest.raises(ConfigError):
        deserialize_config("[1, 2]")
    with pytest.raises(ConfigError):
        config_from_dict({"initial_position": [1.0]})


@pytest.mark.parametrize("version", [None, "v1", [1], 1.9, True])
def test_non_integer_schema_version_rejected(version) -> None:
    with pytest.raises(ConfigError):
        config_from_dict({"schema_version": version})


def test_schema_version_is_not_a_constructor_argument() -> None:
    assert SandboxConfig().schema_version == 1
    with pytest.raises(TypeError):
        SandboxConfig(schema_version=7)


def test_non_utf8_file_rejected(tmp_path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(ConfigError) as info:
        load_config(path)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
