"""Tagged outcome returned by every resource handler stage.

Handlers never raise to the route layer: they return either ``Ok`` carrying
the response value and status, or ``Err`` carrying an ``ErrorKind`` and a
client-facing message.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


NOT_FOUND_MESSAGE = "Resource not found"
INTERNAL_MESSAGE = "Internal server error"


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    INTERNAL = "InternalError"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class Ok:
    value: Any
    status: int = 200

    @property
    def body(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def status(self) -> int:
        return STATUS_BY_KIND[self.kind]

    @property
    def body(self) -> dict:
        return {"message": self.message}


Result = Union[Ok, Err]


def validation_error(message: str) -> Err:
    return Err(ErrorKind.VALIDATION, message)


def not_found() -> Err:
    return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)


def internal_error() -> Err:
    # 内部错误细节只写日志，不返回给调用方
    return Err(ErrorKind.INTERNAL, INTERNAL_MESSAGE)
