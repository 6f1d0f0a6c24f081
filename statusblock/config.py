import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "STATUSBLOCK_FALLBACK_WIDTH": "80",
    "STATUSBLOCK_DEMO_LINES": "5",
    "STATUSBLOCK_DEMO_STEPS": "30",
    "STATUSBLOCK_DEMO_INTERVAL": "0.2",
    "STATUSBLOCK_DEMO_LOG_EVERY": "5",
    "STATUSBLOCK_DEMO_DYNAMIC": "false",
}

# File Paths
STATUSBLOCK_DIR = Path(os.getenv("STATUSBLOCK_DIR", str(Path.home() / ".statusblock")))
CONFIG_FILE = Path(os.getenv("STATUSBLOCK_CONFIG_FILE", str(STATUSBLOCK_DIR / "config.json")))


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = config_file or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(key: str, default: int) -> int:
    """Get integer setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default))
    try:
        return int(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


def get_float_setting(key: str, default: float) -> float:
    """Get float setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default))
    try:
        return float(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid float value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower())
    return value.lower() in ("true", "1", "yes", "on")


# Width used for truncation when the terminal cannot report its column count.
# Height has no fallback: absolute positioning needs a real row count.
FALLBACK_WIDTH = get_int_setting(
    "STATUSBLOCK_FALLBACK_WIDTH", int(DEFAULT_CONFIG["STATUSBLOCK_FALLBACK_WIDTH"])
)
