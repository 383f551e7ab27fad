import re
from urllib.parse import urlparse
from typing import Tuple

from app.platform.exceptions import InvalidScanUrl, MissingScanUrl


ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str) -> Tuple[bool, str, str]:
    """
    Check that `url` is an absolute http(s) URL.

    Returns (is_valid, stripped_url, error_message). A URL without a scheme is
    not rewritten; the client is asked to include http:// or https://.
    """
    if not url or not url.strip():
        return False, "", "Please enter a URL to scan"

    url = url.strip()

    try:
        parsed = urlparse(url)
    except ValueError as e:
        return False, url, f"URL parsing error: {str(e)}"

    if parsed.scheme not in ALLOWED_SCHEMES:
        return False, url, "Please enter a valid URL (include http:// or https://)"

    if not parsed.netloc or not parsed.hostname:
        return False, url, "Invalid URL format: missing domain"

    return True, url, ""


def ensure_valid_url(url: str) -> str:
    """Like validate_url but raises, for callers that cannot continue."""
    is_valid, url_str, error_message = validate_url(url)
    if is_valid:
        return url_str
    if not url_str:
        raise MissingScanUrl(error_message)
    raise InvalidScanUrl(error_message)


def extract_base_url(url: str) -> str:
    """
    Protocol + domain (+ port) of a URL, e.g. https://example.com.
    Paths, queries and fragments are dropped.
    """
    match = re.match(r'(https?://[^/?#]+)', url)
    return match.group(1) if match else url
