from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse

from ..domain.result import Result
from ..services.resource_svc import (
    create_resource,
    list_resources,
    get_resource,
    update_resource,
    delete_resource,
)

router = APIRouter(prefix="/resources", tags=["resources"])


def _respond(result: Result) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.body)


# 请求体以原始 JSON 接收，由 validate_payload 统一校验并返回 400
@router.post("", status_code=201)
def api_create_resource(payload: Any = Body(None)):
    return _respond(create_resource(payload))


@router.get("")
def api_list_resources(name: str | None = Query(None, description="按名称子串过滤（区分大小写）")):
    return _respond(list_resources(name))


@router.get("/{resource_id}")
def api_get_resource(resource_id: str):
    return _respond(get_resource(resource_id))


@router.put("/{resource_id}")
def api_update_resource(resource_id: str, payload: Any = Body(None)):
    return _respond(update_resource(resource_id, payload))


@router.delete("/{resource_id}")
def api_delete_resource(resource_id: str):
    return _respond(delete_resource(resource_id))
