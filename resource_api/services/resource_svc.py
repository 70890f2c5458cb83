from __future__ import annotations

import logging
from typing import Any

from ..db import get_conn
from ..domain.result import Err, Ok, Result, internal_error, not_found
from ..domain.validation import validate_payload
from ..repository import resource_repo

logger = logging.getLogger(__name__)


def _fail(operation: str) -> Err:
    """Handler boundary: must be called from inside an ``except`` block."""
    logger.exception(f"Error in {operation}")
    return internal_error()


def _echo_id(resource_id: str) -> int | str:
    # 路径 id 作为不透明键使用；数字形式按整数回显
    try:
        return int(resource_id)
    except ValueError:
        return resource_id


def create_resource(payload: Any) -> Result:
    try:
        checked = validate_payload(payload)
        if isinstance(checked, Err):
            return checked
        data = checked.value
        with get_conn() as conn:
            res = resource_repo.insert(conn, data["name"], data["description"])
        logger.info(f"Created resource {res.last_insert_id}")
        return Ok({"id": res.last_insert_id, "name": data["name"], "description": data["description"]}, status=201)
    except Exception:
        return _fail("create_resource")


def list_resources(name: str | None = None) -> Result:
    try:
        with get_conn() as conn:
            res = resource_repo.list_all(conn, name)
        return Ok(res.rows)
    except Exception:
        return _fail("list_resources")


def get_resource(resource_id: str) -> Result:
    try:
        with get_conn() as conn:
            res = resource_repo.get_one(conn, resource_id)
        if not res.rows:
            return not_found()
        return Ok(res.rows[0])
    except Exception:
        return _fail("get_resource")


def update_resource(resource_id: str, payload: Any) -> Result:
    """
    不做存在性预检查：以 UPDATE 影响行数为 0 判定 not found。
    """
    try:
        checked = validate_payload(payload)
        if isinstance(checked, Err):
            return checked
        data = checked.value
        with get_conn() as conn:
            res = resource_repo.update(conn, resource_id, data["name"], data["description"])
        if res.rows_affected == 0:
            return not_found()
        logger.info(f"Updated resource {resource_id}")
        return Ok({"id": _echo_id(resource_id), "name": data["name"], "description": data["description"]})
    except Exception:
        return _fail("update_resource")


def delete_resource(resource_id: str) -> Result:
    try:
        with get_conn() as conn:
            res = resource_repo.delete(conn, resource_id)
        if res.rows_affected == 0:
            return not_found()
        logger.info(f"Deleted resource {resource_id}")
        return Ok({"message": "Resource deleted successfully"})
    except Exception:
        return _fail("delete_resource")
