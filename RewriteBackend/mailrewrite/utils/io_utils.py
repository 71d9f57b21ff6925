"""IO utilities for text files and small binary payloads.

Provides:
- ``read_text(path)``: read a UTF-8 text file, raising ``PromptSourceError``
  on any I/O or decoding failure.
- ``decode_b64(data)``: decode a base64 literal into bytes.
"""

from __future__ import annotations

import base64

from mailrewrite.errors import PromptSourceError


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PromptSourceError(path, e) from e


def decode_b64(data: str) -> bytes:
    return base64.b64decode(data)
