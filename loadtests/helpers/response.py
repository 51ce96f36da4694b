"""Response error extraction for load test observability.

The ordering routes answer in plain text; errors raised by the domain come
back as JSON from the Protean exception handlers ({"error": ...}), and
unmatched routes as FastAPI's {"detail": "Not Found"}.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

MAX_DETAIL = 300


def extract_error_detail(response: Response) -> str:
    """Compact, human-readable reason for a failed request."""
    content_type = response.headers.get("content-type", "")
    if not content_type.startswith("application/json"):
        return (response.text or "(empty response body)")[:MAX_DETAIL]

    try:
        body = response.json()
    except ValueError:
        return response.text[:MAX_DETAIL]

    if isinstance(body, dict):
        reason = body.get("error", body.get("detail", body))
        if isinstance(reason, dict):
            return " | ".join(f"{field}: {msg}" for field, msg in reason.items())
        return str(reason)[:MAX_DETAIL]
    return str(body)[:MAX_DETAIL]
