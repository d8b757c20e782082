"""Turns raw executor output into tagged JSON results."""

from __future__ import annotations

import json
from typing import Optional

from .models import ApiError, ErrorCode, JsonResult, RawResponse

BODY_EXCERPT_BYTES = 300


def decode_response(path: str, response: Optional[RawResponse]) -> JsonResult:
    if response is None:
        return JsonResult.failure(
            ApiError(
                code=ErrorCode.REQUEST_FAILED,
                message="HTTP request failed (no response object).",
                endpoint=path,
            )
        )

    if not response.is_success:
        message = f"HTTP request failed with status {response.status}"
        if response.body:
            excerpt = response.body[:BODY_EXCERPT_BYTES].decode("utf-8", errors="replace")
            message += f" | Body: {excerpt}"
        return JsonResult.failure(
            ApiError(code=ErrorCode.HTTP_STATUS, message=message, endpoint=path, status=response.status)
        )

    try:
        data = json.loads(response.body)
    except json.JSONDecodeError as exc:
        detail = f"{exc.msg} (offset {exc.pos})"
    except UnicodeDecodeError as exc:
        detail = str(exc)
    else:
        return JsonResult.success(path, data)

    return JsonResult.failure(
        ApiError(
            code=ErrorCode.DECODE_FAILED,
            message=f"JSON parse failed: {detail}",
            endpoint=path,
            status=response.status,
        )
    )


__all__ = ["BODY_EXCERPT_BYTES", "decode_response"]
