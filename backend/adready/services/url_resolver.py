"""
URL Resolver - Turn free-form user input into an absolute URL candidate.
"""
import re

from pydantic import HttpUrl, TypeAdapter, ValidationError

from adready.services.errors import InvalidUrl

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_http_url = TypeAdapter(HttpUrl)


def resolve_url(raw: str) -> str:
    """Normalize raw input into an absolute http(s) URL.

    Bare hosts get an ``https://`` prefix. The result is validated with
    pydantic's ``HttpUrl`` but returned as typed (no trailing-slash rewrite).

    Raises:
        InvalidUrl: input is empty or not a well-formed absolute URL.
    """
    candidate = (raw or "").strip()
    if not candidate:
        raise InvalidUrl("URL is required.", "Provide the address of the website to analyze.")

    if not _SCHEME_RE.match(candidate):
        candidate = f"https://{candidate}"

    if any(ch.isspace() for ch in candidate):
        raise InvalidUrl("Invalid URL format provided.", "URLs cannot contain whitespace.")

    try:
        _http_url.validate_python(candidate)
    except ValidationError as e:
        raise InvalidUrl(
            "Invalid URL format provided.",
            f"Check if the URL is correct ({e.errors()[0]['msg']})."
        ) from e

    return candidate
