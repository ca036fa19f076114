import tomllib
import shutil
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import find_dotenv, load_dotenv
import os

CONFIG_DIR = Path.home() / ".leetspace"
CONFIG_PATH = CONFIG_DIR / "config.toml"
PROJECT_CONFIG_EXAMPLE = Path(__file__).parent / "config.toml"

def load_env() -> None:
    """Load a .env found from the working directory upwards; real env vars win."""
    load_dotenv(find_dotenv(usecwd=True))

def load_config() -> Dict[str, Any]:
    """Load config from ~/.leetspace/config.toml, copy example if missing, load .env overrides."""
    load_env()  # Load .env for overrides (e.g., LEETSPACE_PORT env var)
    if not CONFIG_PATH.exists():
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        shutil.copy(PROJECT_CONFIG_EXAMPLE, CONFIG_PATH)
    with open(CONFIG_PATH, "rb") as f:
        config = tomllib.load(f)
    # Support legacy flat keys while preferring nested tables
    legacy_server = {
        "host": config.get("host"),
        "port": config.get("port"),
    }
    legacy_logging = {
        "level": config.get("log_level"),
    }

    server_cfg = config.get("server", {})
    config["server"] = {
        "host": os.getenv("LEETSPACE_HOST", server_cfg.get("host", legacy_server.get("host") or "127.0.0.1")),
        "port": int(os.getenv("LEETSPACE_PORT", server_cfg.get("port", legacy_server.get("port") or 8000))),
    }
    logging_cfg = config.get("logging", {})
    config["logging"] = {
        "level": os.getenv(
            "LEETSPACE_LOG_LEVEL",
            logging_cfg.get("level", legacy_logging.get("level") or "INFO"),
        ).upper(),
        "json": os.getenv(
            "LEETSPACE_LOG_JSON",
            str(logging_cfg.get("json", False)),
        ).lower() == "true",
    }
    return config

def get_config_value(section: str, key: str, default: Optional[Any] = None) -> Any:
    """Get nested config value, e.g., get_config_value('server', 'port')."""
    config = load_config()
    value = config.get(section, {}).get(key, default)
    return value
