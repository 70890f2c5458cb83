from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as dist_version

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..db import execute

logger = logging.getLogger(__name__)

APP_NAME = "resource-api"

try:
    APP_VERSION = dist_version(APP_NAME)
except PackageNotFoundError:
    # 源码目录直接运行（未 pip install）
    APP_VERSION = "0.0.0"

router = APIRouter()


@router.get("/health")
def health():
    """存储可用时返回 200；连接或建表失败时返回 503。"""
    try:
        count = execute("SELECT COUNT(1) AS c FROM resources").rows[0]["c"]
    except Exception:
        logger.exception("Health check failed")
        return JSONResponse(status_code=503, content={"status": "error", "storage": "unavailable"})
    return {"status": "ok", "storage": "ok", "resources": count}


@router.get("/version")
def version():
    return {"app": APP_NAME, "version": APP_VERSION}
