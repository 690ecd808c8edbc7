"""JSON encoding and decoding of request and response bodies."""

from __future__ import annotations

import json
from typing import Any


class JSONMarshaller:
    """Encodes values as compact UTF-8 JSON."""

    def marshal(self, value: Any) -> bytes:
        """Return the JSON encoding of ``value``; raises TypeError if unsupported."""
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        return text.encode("utf-8")


class JSONUnmarshaler:
    """Decodes JSON documents."""

    def unmarshal(self, data: bytes | str | None) -> Any:
        """Return the decoded value; raises ValueError on invalid or empty input."""
        if data is None:
            data = b""
        return json.loads(data)