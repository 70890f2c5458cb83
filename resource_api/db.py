from __future__ import annotations

# resource_api/db.py
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence
import os

from .config import PROJECT_ROOT, read_config_yaml

# DB 路径解析顺序：
# 1) 环境变量 RESOURCE_DB_PATH（最高优先级）
# 2) config.yaml 的 test_db_path（当检测到测试环境时）
# 3) config.yaml 的 db_path（生产默认）
# 4) 兜底：项目根 database.sqlite
_DEFAULT_DB = os.path.join(PROJECT_ROOT, "database.sqlite")

SCHEMA = """
CREATE TABLE IF NOT EXISTS resources (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL,
  description TEXT,
  createdAt TEXT DEFAULT CURRENT_TIMESTAMP
);
"""

Params = Sequence[Any] | Mapping[str, Any]


def get_db_path(config_path: str | None = None) -> str:
    env_path = os.environ.get("RESOURCE_DB_PATH")
    cfg = read_config_yaml(config_path)
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _DEFAULT_DB

    # 确保目录存在
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    获取 SQLite 连接。优先使用显式传入的 db_path，否则走 get_db_path()。
    每次打开都执行一次 CREATE TABLE IF NOT EXISTS；退出时无论成功或异常都会关闭连接。
    """
    path = db_path or get_db_path()
    conn = sqlite3.connect(path, check_same_thread=False, isolation_level=None)
    try:
        conn.row_factory = sqlite3.Row
        conn.executescript(SCHEMA)
        yield conn
    finally:
        conn.close()


def ensure_schema(db_path: str | None = None):
    with get_conn(db_path):
        pass


@dataclass
class ExecResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    last_insert_id: int | None = None
    rows_affected: int = 0


def run(conn: sqlite3.Connection, statement: str, params: Params = ()) -> ExecResult:
    """在给定连接上执行单条语句，并把结果整理为 ExecResult。"""
    cur = conn.execute(statement, params)
    try:
        rows = [dict(r) for r in cur.fetchall()] if cur.description else []
        return ExecResult(
            rows=rows,
            last_insert_id=cur.lastrowid or None,
            rows_affected=max(cur.rowcount, 0),
        )
    finally:
        cur.close()


def execute(statement: str, params: Params = (), db_path: str | None = None) -> ExecResult:
    with get_conn(db_path) as conn:
        return run(conn, statement, params)
