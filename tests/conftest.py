"""
Test configuration and fixtures for the Vudu A11y API.

Scan delays are zeroed and logs go to a temporary directory before the app is
imported, so settings pick them up.
"""

import os
import random
import tempfile
from typing import Generator

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

load_dotenv()

os.environ["SCAN_DELAY_SECONDS"] = "0"
os.environ["DOMAIN_SCAN_DELAY_SECONDS"] = "0"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="vudu-a11y-logs-"))


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture
def scan_session():
    """A fresh scanner session with a seeded RNG for domain scans."""
    from app.features.scan.services.scan.state import ScanSession

    return ScanSession(rng=random.Random(1234))


@pytest.fixture(scope="function")
def client(test_app, scan_session) -> Generator[TestClient, None, None]:
    """
    Test client whose scan routes use the per-test `scan_session`.
    """
    from app.features.scan.services.scan.state import get_scan_session

    test_app.dependency_overrides[get_scan_session] = lambda: scan_session
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.pop(get_scan_session, None)
