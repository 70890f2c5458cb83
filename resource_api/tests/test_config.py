from resource_api.config import DEFAULTS, get_settings, read_config_yaml


def _clear_env(monkeypatch):
    for k in ("RESOURCE_API_HOST", "RESOURCE_API_PORT", "RESOURCE_API_LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)


def test_defaults_when_config_missing(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    s = get_settings(str(tmp_path / "absent.yaml"))
    assert s.host == DEFAULTS["host"]
    assert s.port == 3000
    assert s.log_level == "INFO"


def test_yaml_values_and_env_override(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    cfg = tmp_path / "config.yaml"
    cfg.write_text("host: 127.0.0.1\nport: 8080\nlog_level: debug\n", encoding="utf-8")

    s = get_settings(str(cfg))
    assert (s.host, s.port, s.log_level) == ("127.0.0.1", 8080, "DEBUG")

    monkeypatch.setenv("RESOURCE_API_PORT", "9090")
    assert get_settings(str(cfg)).port == 9090


def test_bad_port_falls_back_to_default(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("RESOURCE_API_PORT", "not-a-port")
    assert get_settings(str(tmp_path / "absent.yaml")).port == 3000
    monkeypatch.setenv("RESOURCE_API_PORT", "70000")
    assert get_settings(str(tmp_path / "absent.yaml")).port == 3000


def test_malformed_yaml_is_ignored(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("db_path: [unclosed\n", encoding="utf-8")
    assert read_config_yaml(str(cfg)) == {}

    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    assert read_config_yaml(str(cfg)) == {}


def test_blank_strings_are_dropped(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("db_path: '   '\nhost: ' example '\n", encoding="utf-8")
    assert read_config_yaml(str(cfg)) == {"host": "example"}
