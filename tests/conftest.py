from pathlib import Path

import pytest

import config
from db import database


def _write_test_config(config_path: Path) -> None:
    config_path.write_text(
        "\n".join(
            [
                "[server]",
                "host = \"127.0.0.1\"",
                "port = 8000",
                "",
                "[logging]",
                "level = \"INFO\"",
                "json = false",
            ]
        ),
        encoding="utf-8",
    )


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    config_dir = tmp_path / ".leetspace"
    config_dir.mkdir()
    config_path = config_dir / "config.toml"
    _write_test_config(config_path)

    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_path)
    monkeypatch.setattr(database, "DB_PATH", config_dir / "leetspace.db")
    return config_dir


@pytest.fixture
def conn(config_dir):
    database.init_db()
    with database.get_conn() as conn:
        yield conn


def _count_rows(conn, table: str) -> int:
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


@pytest.fixture
def count_rows():
    return _count_rows
