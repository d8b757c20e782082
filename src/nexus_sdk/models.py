"""Response and result types shared by the executor and the decoding layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from .errors import HttpStatusError, RequestFailedError, ResponseDecodeError


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes
    headers: httpx.Headers

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class ErrorCode(IntEnum):
    DECODE_FAILED = 996
    HTTP_STATUS = 997
    REQUEST_FAILED = 998


class ApiError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    endpoint: str
    status: Optional[int] = None

    def to_document(self) -> Dict[str, Any]:
        return {"code": int(self.code), "message": self.message, "endpoint": self.endpoint}


@dataclass(frozen=True)
class JsonResult:
    """Either a parsed API document or an :class:`ApiError`, never both."""

    endpoint: str
    data: Any = None
    error: Optional[ApiError] = None

    @classmethod
    def success(cls, endpoint: str, data: Any) -> "JsonResult":
        return cls(endpoint=endpoint, data=data)

    @classmethod
    def failure(cls, error: ApiError) -> "JsonResult":
        return cls(endpoint=error.endpoint, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def document(self) -> Any:
        """Return the parsed document, or the error in its dictionary form."""
        if self.error is not None:
            return self.error.to_document()
        return self.data

    def unwrap(self) -> Any:
        error = self.error
        if error is None:
            return self.data
        if error.code is ErrorCode.HTTP_STATUS:
            raise HttpStatusError(error.message, endpoint=error.endpoint, status=error.status)
        if error.code is ErrorCode.DECODE_FAILED:
            raise ResponseDecodeError(error.message, endpoint=error.endpoint)
        raise RequestFailedError(error.message, endpoint=error.endpoint)


__all__ = ["ApiError", "ErrorCode", "JsonResult", "RawResponse"]
