from __future__ import annotations

# resource_api/config.py
import os
from dataclasses import dataclass
import yaml

# 配置来源优先级：环境变量 > config.yaml > DEFAULTS
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.yaml")

DEFAULTS = {
    "host": "0.0.0.0",
    "port": 3000,
    "log_level": "INFO",
}

_STR_KEYS = ("db_path", "test_db_path", "host", "log_level")


def read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or CONFIG_PATH
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in _STR_KEYS:
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    if cfg.get("port") is not None:
        out["port"] = cfg["port"]
    return out


def _to_port(value, default: int) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        return default
    return port if 0 < port < 65536 else default


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str


def get_settings(path: str | None = None) -> Settings:
    """
    读取服务启动参数。环境变量 RESOURCE_API_HOST / RESOURCE_API_PORT /
    RESOURCE_API_LOG_LEVEL 覆盖 config.yaml 中同名键。
    """
    cfg = read_config_yaml(path)
    host = os.environ.get("RESOURCE_API_HOST") or cfg.get("host") or DEFAULTS["host"]
    port = _to_port(os.environ.get("RESOURCE_API_PORT") or cfg.get("port"), DEFAULTS["port"])
    level = (os.environ.get("RESOURCE_API_LOG_LEVEL") or cfg.get("log_level") or DEFAULTS["log_level"]).upper()
    return Settings(host=host, port=port, log_level=level)
