import json
from pathlib import Path

import pytest

from domain_browser.config.config_loader import DATA_FILE_ENV, load_global_config
from domain_browser.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(DATA_FILE_ENV, raising=False)


def _write_global(root: Path, payload) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(payload))


def test_load_global_config(tmp_path):
    config_root = tmp_path / "config"
    _write_global(
        config_root,
        {
            "ui_title": "Test Browser",
            "data_file": "data/catalog.csv",
            "brand_codes": ["XB", "YB"],
            "measures": ["Quality", "Freshness"],
            "default_measure": "Freshness",
            "moat_labels": {"1": "Moat One"},
        },
    )

    cfg = load_global_config(config_root)

    assert cfg.ui_title == "Test Browser"
    assert cfg.data_file == (config_root / "data" / "catalog.csv").resolve()
    assert cfg.brand_codes == ["XB", "YB"]
    assert cfg.measures == ["Quality", "Freshness"]
    assert cfg.default_measure == "Freshness"
    assert cfg.moat_labels == {"1": "Moat One"}


def test_missing_global_json_uses_defaults(tmp_path):
    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Data Domain Browser"
    assert cfg.brand_codes == ["AFI", "ADG", "RH"]
    assert cfg.measures == ["Quality", "Accessibility", "Timeliness", "Completeness"]
    assert cfg.data_file == (tmp_path / "data" / "data.csv").resolve()


def test_env_var_overrides_data_file(tmp_path, monkeypatch):
    override = tmp_path / "elsewhere.csv"
    monkeypatch.setenv(DATA_FILE_ENV, str(override))
    _write_global(tmp_path, {"data_file": "data/data.csv"})

    cfg = load_global_config(tmp_path)

    assert cfg.data_file == override


def test_default_measure_outside_vocabulary_is_kept_with_warning(tmp_path, caplog):
    _write_global(tmp_path, {"measures": ["Quality"], "default_measure": "Timeliness"})

    assert load_global_config(tmp_path).default_measure == "Timeliness"
    assert "first available measure" in caplog.text


def test_null_default_measure_is_kept(tmp_path):
    _write_global(tmp_path, {"default_measure": None})

    assert load_global_config(tmp_path).default_measure is None


def test_malformed_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"brand_codes": "AFI"},
        {"measures": [1, 2]},
        {"moat_labels": ["Moat 1"]},
        {"default_measure": 3},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, payload):
    _write_global(tmp_path, payload)

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
