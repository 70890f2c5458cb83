from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .result import Ok, Result, validation_error


class ResourceIn(BaseModel):
    """Body accepted by create and update."""
    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(min_length=1)
    # 缺省为 None；显式传入 null 视为类型错误
    description: StrictStr = Field(None, min_length=1)


_MESSAGES = {
    "missing": '"{field}" is required',
    "string_type": '"{field}" must be a string',
    "string_too_short": '"{field}" is not allowed to be empty',
    "extra_forbidden": '"{field}" is not allowed',
}


@dataclass(frozen=True)
class PayloadSchema:
    model: type[BaseModel]
    label: str = "value"


RESOURCE_SCHEMA = PayloadSchema(model=ResourceIn)


def describe_error(err: dict, label: str = "value") -> str:
    loc = err.get("loc") or ()
    field = str(loc[0]) if loc else label
    template = _MESSAGES.get(err.get("type", ""), '"{field}" is invalid')
    return template.format(field=field)


def validate_payload(raw: Any, schema: PayloadSchema = RESOURCE_SCHEMA) -> Result:
    """
    Check a raw JSON body against ``schema``.

    Returns ``Ok`` with the normalized dict (every declared field present,
    absent optionals as None) or a validation ``Err`` describing only the
    first violated rule. A missing body counts as an empty object.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return validation_error(f'"{schema.label}" must be of type object')
    try:
        value = schema.model.model_validate(raw)
    except ValidationError as e:
        return validation_error(describe_error(e.errors()[0], schema.label))
    return Ok(value.model_dump())
