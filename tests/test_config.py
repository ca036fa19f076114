import config


def test_load_config_reads_nested_tables(config_dir, monkeypatch):
    for name in ("LEETSPACE_HOST", "LEETSPACE_PORT", "LEETSPACE_LOG_LEVEL", "LEETSPACE_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)

    loaded = config.load_config()
    assert loaded["server"] == {"host": "127.0.0.1", "port": 8000}
    assert loaded["logging"] == {"level": "INFO", "json": False}


def test_env_overrides_config(config_dir, monkeypatch):
    monkeypatch.setenv("LEETSPACE_PORT", "9100")
    monkeypatch.setenv("LEETSPACE_LOG_LEVEL", "debug")
    monkeypatch.setenv("LEETSPACE_LOG_JSON", "true")

    loaded = config.load_config()
    assert loaded["server"]["port"] == 9100
    assert loaded["logging"]["level"] == "DEBUG"
    assert loaded["logging"]["json"] is True
    assert config.get_config_value("server", "port") == 9100


def test_legacy_flat_keys(config_dir, monkeypatch):
    for name in ("LEETSPACE_HOST", "LEETSPACE_PORT", "LEETSPACE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config.CONFIG_PATH.write_text('host = "0.0.0.0"\nport = 5000\nlog_level = "warning"\n', encoding="utf-8")

    loaded = config.load_config()
    assert loaded["server"] == {"host": "0.0.0.0", "port": 5000}
    assert loaded["logging"]["level"] == "WARNING"


def test_missing_config_copies_example(tmp_path, monkeypatch):
    config_dir = tmp_path / "fresh"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_dir / "config.toml")
    monkeypatch.delenv("LEETSPACE_PORT", raising=False)

    loaded = config.load_config()
    assert (config_dir / "config.toml").exists()
    assert loaded["server"]["port"] == 8000
