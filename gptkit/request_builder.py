"""Assembles outgoing HTTP requests."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from gptkit.codec import JSONMarshaller

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


@dataclass
class Request:
    """An HTTP request ready to send.

    ``body`` is the encoded bytes for marshalled values, the reader itself
    for readable bodies, or None.
    """

    method: str
    url: str
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


def _validate_method(method: str) -> str:
    if method == "":
        return "GET"
    if not all(char in _TOKEN_CHARS for char in method):
        raise ValueError(f"invalid method {method!r}")
    return method


def _validate_url(url: str) -> None:
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in url):
        raise ValueError("invalid control character in URL")
    if url.startswith(":"):
        raise ValueError("missing protocol scheme")
    urlsplit(url)


class RequestBuilder:
    """Builds requests, encoding non-reader bodies with a marshaller."""

    def __init__(self, marshaller: Any = None) -> None:
        self.marshaller = JSONMarshaller() if marshaller is None else marshaller

    def build(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Request:
        """Return a request; marshaller and URL errors propagate."""
        payload: Any = None
        if body is not None:
            payload = body if hasattr(body, "read") else self.marshaller.marshal(body)
        method = _validate_method(method)
        _validate_url(url)
        return Request(
            method=method,
            url=url,
            body=payload,
            headers={} if headers is None else headers,
        )