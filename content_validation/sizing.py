from __future__ import annotations

import json
import math
from typing import Any

from content_validation.errors import SerializationError


def canonical_json(value: Any) -> str:
    """
    Compact JSON text for a value, the same shape the runtime downloads:
    no insignificant whitespace, non-ASCII characters emitted as-is.
    """
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except ValueError as e:
        # json reports cycles as "Circular reference detected"
        raise SerializationError(str(e)) from e
    except (TypeError, RecursionError) as e:
        raise SerializationError(f"Value is not JSON serializable: {e}") from e


def size_of(value: Any) -> int:
    """
    Byte length of the UTF-8 encoded canonical JSON of value.

    Lone surrogates (legal in JSON escapes) are counted as their 6-byte
    \\uXXXX escape, the form a browser serializer sends them in.
    Floats keep Python's repr, so 1.0 counts as 3 bytes.
    """
    text = canonical_json(value)
    return len(text.encode("utf-8", errors="backslashreplace"))


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def to_kb(size_bytes: int) -> int:
    return round_half_up(size_bytes / 1024)
