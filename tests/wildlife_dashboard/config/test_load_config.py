import json
from pathlib import Path

import pytest

from wildlife_dashboard.config.loader import load_global_config
from wildlife_dashboard.core.exceptions import ConfigError


def test_missing_global_json_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("WILDLIFE_DASHBOARD_DATA_ROOT", raising=False)

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Wildlife Observations"
    assert cfg.export_filename == "wildlife_filtered.csv"
    assert cfg.data_path == (tmp_path / "data.csv").resolve()
    assert cfg.config_root == tmp_path


def test_global_json_values_are_used(tmp_path, monkeypatch):
    monkeypatch.delenv("WILDLIFE_DASHBOARD_DATA_ROOT", raising=False)
    (tmp_path / "global.json").write_text(
        json.dumps(
            {
                "ui_title": "Pond Survey",
                "subtitle": "Spring 2024",
                "data_path": "surveys/pond.csv",
                "export_filename": "pond.csv",
            }
        )
    )

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Pond Survey"
    assert cfg.subtitle == "Spring 2024"
    assert cfg.data_path == (tmp_path / "surveys" / "pond.csv").resolve()
    assert cfg.export_filename == "pond.csv"


def test_absolute_data_path_is_kept(tmp_path):
    target = tmp_path / "elsewhere" / "obs.csv"
    (tmp_path / "global.json").write_text(json.dumps({"data_path": str(target)}))

    assert load_global_config(tmp_path).data_path == target


def test_data_root_env_var_is_the_base_for_relative_paths(tmp_path, monkeypatch):
    data_root = tmp_path / "data_root"
    monkeypatch.setenv("WILDLIFE_DASHBOARD_DATA_ROOT", str(data_root))
    (tmp_path / "global.json").write_text(json.dumps({"data_path": "obs.csv"}))

    assert load_global_config(tmp_path).data_path == (data_root / "obs.csv").resolve()


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_non_object_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("[1, 2, 3]")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_wrong_type_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": 42}))

    with pytest.raises(ConfigError, match="ui_title"):
        load_global_config(Path(tmp_path))
