"""
Issue Service

Classification of raw findings into Issues and per-page counting.
"""
import re
from typing import Iterable, Optional, Tuple

from app.features.scan.schemas.issue import Issue, IssueKind
from app.features.scan.schemas.scan import PageResult


PRINCIPLE_NAMES = {
    "1": "Perceivable",
    "2": "Operable",
    "3": "Understandable",
    "4": "Robust",
}
OTHER_PRINCIPLE = "Other"

_PRINCIPLE_PATTERN = re.compile(r"\.Principle(\d)\.")


def classify_issue(
    kind: str,
    rule_code: str,
    message: str,
    selector: str = "",
    context: str = "",
) -> Issue:
    """
    Build an Issue from a raw finding.

    `kind` is the reported severity ("error" or "warning", case-insensitive).
    Raises ValueError for anything else.
    """
    normalized = (kind or "").strip().lower()
    try:
        issue_kind = IssueKind(normalized)
    except ValueError:
        raise ValueError(f"Unknown issue kind: {kind!r} (expected 'error' or 'warning')")

    return Issue(
        kind=issue_kind,
        rule_code=rule_code,
        message=message,
        selector=selector,
        context=context,
    )


def count_issues(issues: Iterable[Issue]) -> Tuple[int, int]:
    """Return (errors, warnings) for a collection of issues."""
    errors = 0
    warnings = 0
    for issue in issues:
        if issue.kind == IssueKind.error:
            errors += 1
        else:
            warnings += 1
    return errors, warnings


def build_page_result(
    url: str,
    title: str,
    issues: Iterable[Issue],
    passed_count: int,
    load_time_seconds: float = 0.0,
    status_code: int = 200,
) -> PageResult:
    """Create a PageResult whose failed/warning counters come from its issues."""
    issues = tuple(issues)
    failed_count, warning_count = count_issues(issues)
    return PageResult(
        url=url,
        title=title,
        issues=issues,
        passed_count=passed_count,
        failed_count=failed_count,
        warning_count=warning_count,
        load_time_seconds=load_time_seconds,
        status_code=status_code,
    )


def get_principle(rule_code: str) -> str:
    """Map a rule code like WCAG2AA.Principle1.... to its WCAG principle name."""
    found: Optional[re.Match] = _PRINCIPLE_PATTERN.search(rule_code or "")
    if not found:
        return OTHER_PRINCIPLE
    return PRINCIPLE_NAMES.get(found.group(1), OTHER_PRINCIPLE)
