import pytest

from app.platform.exceptions import InvalidScanUrl, MissingScanUrl
from app.platform.utils.url_validator import ensure_valid_url, extract_base_url, validate_url


@pytest.mark.parametrize("url", ["https://example.com", "http://example.com/about?x=1", "  https://example.com  "])
def test_valid_urls(url):
    is_valid, url_str, error = validate_url(url)
    assert is_valid is True
    assert url_str == url.strip()
    assert error == ""


@pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "https://", "not a url", "javascript:alert(1)"])
def test_invalid_urls(url):
    is_valid, _, error = validate_url(url)
    assert is_valid is False
    assert error


def test_empty_url():
    assert validate_url("   ") == (False, "", "Please enter a URL to scan")


def test_ensure_valid_url_raises():
    with pytest.raises(MissingScanUrl):
        ensure_valid_url("")
    with pytest.raises(InvalidScanUrl):
        ensure_valid_url("example.com")
    assert ensure_valid_url("https://example.com") == "https://example.com"


def test_extract_base_url():
    assert extract_base_url("https://example.com/about#team") == "https://example.com"
    assert extract_base_url("http://localhost:8080?x=1") == "http://localhost:8080"
    assert extract_base_url("not-a-url") == "not-a-url"
