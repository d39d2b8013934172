from __future__ import annotations

import json

import pytest

from anaso_algorithm.config import AppConfig, default_config, load_config


def test_default_config_values() -> None:
    config = default_config()

    assert config.log_level == "INFO"
    assert config.output.format == "table"
    assert config.output.indent == 2


def test_load_config_from_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"log_level": "debug", "output": {"format": "json", "indent": 0}}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert isinstance(config, AppConfig)
    assert config.log_level == "DEBUG"
    assert config.output.format == "json"
    assert config.output.indent == 0


def test_load_config_from_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "log_level: warning\noutput:\n  format: table\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.log_level == "WARNING"
    assert config.output.format == "table"


@pytest.mark.parametrize(
    "payload",
    [
        {"log_level": "loud"},
        {"output": {"format": "xml"}},
        {"output": {"indent": -1}},
        {"twelve_hours": 3600},
    ],
)
def test_load_config_rejects_invalid_values(tmp_path, payload: dict) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_load_config_rejects_non_object_root(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(ValueError, match="root must be an object"):
        load_config(path)
