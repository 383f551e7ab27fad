import pytest
from pydantic import ValidationError

from app.platform.config import Settings


def test_default_compliance_fallback():
    assert Settings().COMPLIANCE_SCORE_FALLBACK == 100


@pytest.mark.parametrize("value", ["-1", "101"])
def test_out_of_range_compliance_fallback_rejected(monkeypatch, value):
    monkeypatch.setenv("COMPLIANCE_SCORE_FALLBACK", value)
    with pytest.raises(ValidationError):
        Settings()


def test_compliance_fallback_from_env(monkeypatch):
    monkeypatch.setenv("COMPLIANCE_SCORE_FALLBACK", "0")
    assert Settings().COMPLIANCE_SCORE_FALLBACK == 0
