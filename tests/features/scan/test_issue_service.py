from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.features.scan.schemas.issue import Issue, IssueKind
from app.features.scan.schemas.scan import PageResult, ScanResult
from app.features.scan.services.issue import (
    DEFAULT_REMEDIATION,
    KnownRule,
    build_page_result,
    classify_issue,
    count_issues,
    get_principle,
    get_remediation_example,
)


class TestClassifyIssue:

    def test_error(self):
        issue = classify_issue(
            "error",
            "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
            "Img element missing an alt attribute",
            'img[src="hero-image.jpg"]',
            '<img src="hero-image.jpg" class="hero-img">',
        )
        assert issue.kind == IssueKind.error
        assert issue.selector == 'img[src="hero-image.jpg"]'

    def test_kind_is_case_insensitive(self):
        assert classify_issue(" Warning ", "code", "msg").kind == IssueKind.warning

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            classify_issue("notice", "code", "msg")

    def test_issue_is_immutable(self):
        issue = classify_issue("error", "code", "msg")
        with pytest.raises(ValidationError):
            issue.message = "changed"


class TestPageResult:

    def test_counts_derived_from_issues(self):
        issues = [
            classify_issue("error", "a", "m"),
            classify_issue("warning", "b", "m"),
            classify_issue("error", "c", "m"),
        ]
        page = build_page_result("https://example.com", "Home", issues, passed_count=47)

        assert page.failed_count == 2
        assert page.warning_count == 1
        assert (page.failed_count, page.warning_count) == count_issues(page.issues)

    def test_mismatched_counts_rejected(self):
        with pytest.raises(ValidationError):
            PageResult(
                url="https://example.com",
                title="Home",
                issues=[Issue(kind=IssueKind.error, rule_code="a", message="m", selector="", context="")],
                passed_count=10,
                failed_count=0,
                warning_count=0,
            )

    def test_scan_result_totals_must_match_pages(self):
        page = build_page_result("https://example.com", "Home", [], passed_count=77)
        with pytest.raises(ValidationError):
            ScanResult(
                target_url="https://example.com",
                timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
                pages=[page],
                total_passed=70,
                total_failed=0,
                total_warnings=0,
                duration_seconds=1.0,
                compliance_score=100,
            )

    def test_scan_result_score_must_match_totals(self):
        page = build_page_result("https://example.com", "Home", [], passed_count=77)
        with pytest.raises(ValidationError):
            ScanResult(
                target_url="https://example.com",
                timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
                pages=[page],
                total_passed=77,
                total_failed=0,
                total_warnings=0,
                duration_seconds=1.0,
                compliance_score=5,
            )

    def test_scan_result_without_checks_accepts_fallback_score(self):
        page = build_page_result("https://example.com", "Home", [], passed_count=0)
        result = ScanResult(
            target_url="https://example.com",
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
            pages=[page],
            total_passed=0,
            total_failed=0,
            total_warnings=0,
            duration_seconds=1.0,
            compliance_score=0,
        )
        assert result.compliance_score == 0

    def test_negative_passed_rejected(self):
        with pytest.raises(ValidationError):
            build_page_result("https://example.com", "Home", [], passed_count=-1)

    def test_empty_page(self):
        page = build_page_result("https://example.com", "Home", [], passed_count=0)
        assert page.failed_count == 0
        assert page.warning_count == 0


class TestRemediation:

    def test_known_rule(self):
        example = get_remediation_example("WCAG2AA.Principle1.Guideline1_1.1_1_1.H37")
        assert "alt=" in example

    def test_every_known_rule_has_specific_example(self):
        for rule in KnownRule:
            assert get_remediation_example(rule.value) != DEFAULT_REMEDIATION

    def test_unknown_rule_returns_fallback(self):
        assert get_remediation_example("WCAG2AA.Made.Up.Rule") == DEFAULT_REMEDIATION

    def test_empty_and_none_return_fallback(self):
        assert get_remediation_example("") == DEFAULT_REMEDIATION
        assert get_remediation_example(None) == DEFAULT_REMEDIATION

    def test_lookup(self):
        assert KnownRule.lookup("WCAG2AA.Principle4.Guideline4_1.4_1_1.F77") is KnownRule.DUPLICATE_ID
        assert KnownRule.lookup("nope") is None


@pytest.mark.parametrize(
    "rule_code,expected",
    [
        ("WCAG2AA.Principle1.Guideline1_1.1_1_1.H37", "Perceivable"),
        ("WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.1.NoTitleEl", "Operable"),
        ("WCAG2AA.Principle3.Guideline3_1.3_1_1.H57.2", "Understandable"),
        ("WCAG2AA.Principle4.Guideline4_1.4_1_2.H91.Button.Name", "Robust"),
        ("color-contrast", "Other"),
        ("", "Other"),
    ],
)
def test_get_principle(rule_code, expected):
    assert get_principle(rule_code) == expected
