from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

from ..db import ExecResult, run


def insert(conn: Connection, name: str, description: Optional[str]) -> ExecResult:
    return run(
        conn,
        "INSERT INTO resources(name, description) VALUES(?, ?)",
        (name, description),
    )


def list_all(conn: Connection, name_contains: Optional[str] = None) -> ExecResult:
    # instr() 区分大小写；LIKE 对 ASCII 不区分，且会把 % _ 当通配符
    if name_contains:
        return run(
            conn,
            "SELECT * FROM resources WHERE instr(name, ?) > 0 ORDER BY id",
            (name_contains,),
        )
    return run(conn, "SELECT * FROM resources ORDER BY id")


def get_one(conn: Connection, resource_id: str) -> ExecResult:
    return run(conn, "SELECT * FROM resources WHERE id=?", (resource_id,))


def update(conn: Connection, resource_id: str, name: str, description: Optional[str]) -> ExecResult:
    return run(
        conn,
        "UPDATE resources SET name=?, description=? WHERE id=?",
        (name, description, resource_id),
    )


def delete(conn: Connection, resource_id: str) -> ExecResult:
    return run(conn, "DELETE FROM resources WHERE id=?", (resource_id,))
