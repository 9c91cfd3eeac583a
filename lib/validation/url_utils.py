from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError


_ANY_URL = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class UrlCheckResult:
    original: str
    normalized: Optional[str]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def check_absolute_url(raw: object) -> UrlCheckResult:
    """
    Syntactic check for an absolute URL (scheme required).

    No network access and no scheme allowlist: branding records may point
    at a CDN over https or at a data: URI.
    """
    s = "" if raw is None else str(raw).strip()
    if not s:
        return UrlCheckResult(original=s, normalized=None, error="URL is empty")

    try:
        url = _ANY_URL.validate_python(s)
    except ValidationError as e:
        return UrlCheckResult(original=s, normalized=None, error=e.errors()[0]["msg"])

    return UrlCheckResult(original=s, normalized=str(url))


def is_valid_absolute_url(raw: object) -> bool:
    return check_absolute_url(raw).ok
