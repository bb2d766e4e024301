import pytest

import core.config_manager as config_manager
from core.exceptions import ConfigError


def test_defaults_without_runtime_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "RUNTIME_CONFIG_PATH", tmp_path / "missing.yaml")
    cfg = config_manager.get_config()

    assert cfg.KEY_PREFIX == "devjourney"
    assert cfg.DISTANCE_PER_MINUTE_KM == 0.05
    assert cfg.PROGRESS_STEP == 5


def test_runtime_overrides_and_unknown_keys(tmp_path, monkeypatch):
    path = tmp_path / "runtime.yaml"
    path.write_text("PROGRESS_STEP: 10\nHTTP_TIMEOUT_SECONDS: 3\nNOT_A_KEY: 1\n", encoding="utf-8")
    monkeypatch.setattr(config_manager, "RUNTIME_CONFIG_PATH", path)

    cfg = config_manager.get_config()
    assert cfg.PROGRESS_STEP == 10
    assert cfg.HTTP_TIMEOUT_SECONDS == 3
    assert not hasattr(cfg, "NOT_A_KEY")


def test_wrong_type_raises_config_error(tmp_path, monkeypatch):
    path = tmp_path / "runtime.yaml"
    path.write_text("MOOD_MAX: high\n", encoding="utf-8")
    monkeypatch.setattr(config_manager, "RUNTIME_CONFIG_PATH", path)

    with pytest.raises(ConfigError) as exc:
        config_manager.get_config()
    assert "MOOD_MAX" in exc.value.message
    assert str(path) in exc.value.get_user_message()


def test_unreadable_yaml_is_ignored(tmp_path, monkeypatch):
    path = tmp_path / "runtime.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")
    monkeypatch.setattr(config_manager, "RUNTIME_CONFIG_PATH", path)

    assert config_manager.get_config().KEY_PREFIX == "devjourney"
