"""
URL helpers for page metadata and the order call-to-action.
"""

from urllib.parse import urlsplit, urlunsplit


def get_canonical_url(base_url: str, path: str = "/") -> str:
    """
    Build the canonical URL for a page: origin plus path, no query or fragment.

    Args:
        base_url: Public base URL of the app (e.g., "https://example.com/app?x=1")
        path: Page path to append. An absolute path replaces the base path.

    Returns:
        Canonical URL string
    """
    parts = urlsplit(base_url.strip())
    if path.startswith("/"):
        full_path = path
    else:
        full_path = parts.path.rstrip("/") + "/" + path
    return urlunsplit((parts.scheme, parts.netloc, full_path or "/", "", ""))
