"""
Utility helpers shared across routers/services.
"""

from typing import Optional
from urllib.parse import urlencode


def with_notice(path: str, success: Optional[str] = None, error: Optional[str] = None) -> str:
    """
    Append success/error notices to a redirect target as query parameters.
    """
    params = {}
    if success:
        params["success"] = success
    if error:
        params["error"] = error
    if not params:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{urlencode(params)}"


def parse_id(value: str | None) -> Optional[int]:
    """Parse a path id; anything that is not a positive integer maps to None."""
    try:
        parsed = int(str(value or "").strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None
