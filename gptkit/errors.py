"""Errors reported by the API and by failed requests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def _optional_string(raw: Any, name: str) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    raise ValueError(f"field {name!r} must be a string, got {raw!r}")


@dataclass
class InnerError:
    """Azure content-filtering details attached to an API error."""

    code: str = ""
    content_filter_results: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "InnerError":
        """Build from a decoded JSON object; raises ValueError otherwise."""
        if not isinstance(data, dict):
            raise ValueError(f"inner error must be an object, got {data!r}")
        results = data.get("content_filter_result")
        if results is None:
            results = {}
        elif not isinstance(results, dict):
            raise ValueError(f"content_filter_result must be an object, got {results!r}")
        return cls(code=_optional_string(data.get("code"), "code"), content_filter_results=results)


class APIError(Exception):
    """An error object returned by the API."""

    def __init__(
        self,
        message: str = "",
        *,
        code: Any = None,
        param: Optional[str] = None,
        type: str = "",
        http_status: str = "",
        http_status_code: int = 0,
        inner_error: Optional[InnerError] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.param = param
        self.type = type
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.inner_error = inner_error

    @classmethod
    def from_json(cls, data: str | bytes) -> "APIError":
        """Parse an error object; raises ValueError on malformed input."""
        raw = json.loads(data)
        if not isinstance(raw, dict):
            raise ValueError(f"API error must be an object, got {raw!r}")

        if "message" not in raw:
            raise ValueError("API error has no message")
        message = raw["message"]
        if message is None:
            message = ""
        elif isinstance(message, list) and all(
            item is None or isinstance(item, str) for item in message
        ):
            message = ", ".join(item or "" for item in message)
        elif not isinstance(message, str):
            raise ValueError(f"message must be a string or list of strings, got {message!r}")

        error = cls(message)

        if "type" in raw:
            error.type = _optional_string(raw["type"], "type")

        if "innererror" in raw and raw["innererror"] is not None:
            error.inner_error = InnerError.from_dict(raw["innererror"])

        if "param" in raw:
            param = raw["param"]
            if param is not None and not isinstance(param, str):
                raise ValueError(f"param must be a string, got {param!r}")
            error.param = param

        if "code" in raw:
            code = raw["code"]
            if code is None:
                code = 0
            elif isinstance(code, int) and not isinstance(code, bool):
                if not _INT64_MIN <= code <= _INT64_MAX:
                    code = float(code)
            error.code = code

        return error

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return (
                f"error, status code: {self.http_status_code}, "
                f"status: {self.http_status}, message: {self.message}"
            )
        return self.message


class RequestError(Exception):
    """A request that failed without a parseable API error."""

    def __init__(
        self,
        err: Optional[BaseException] = None,
        *,
        http_status: str = "",
        http_status_code: int = 0,
        body: bytes = b"",
    ) -> None:
        super().__init__(err)
        self.err = err
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.body = body
        self.__cause__ = err

    def __str__(self) -> str:
        body = self.body.decode("utf-8", "replace")
        return (
            f"error, status code: {self.http_status_code}, status: {self.http_status}, "
            f"message: {self.err}, body: {body}"
        )