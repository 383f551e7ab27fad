from datetime import datetime, timezone
from typing import Dict, Optional, Sequence

from app.features.scan.schemas.scan import PageResult, ScanResult
from app.features.scan.services.issue.issue_service import (
    OTHER_PRINCIPLE,
    PRINCIPLE_NAMES,
    get_principle,
)
from app.features.scan.services.utils.scoring import ComplianceScoreUndefined, compliance_score
from app.platform.config import settings


def compliance_score_or_default(passed: int, failed: int, fallback: Optional[int] = None) -> int:
    if fallback is None:
        fallback = settings.COMPLIANCE_SCORE_FALLBACK
    try:
        return compliance_score(passed, failed)
    except ComplianceScoreUndefined:
        return fallback


def page_score(page: PageResult, fallback: Optional[int] = None) -> int:
    """Compliance score of a single page."""
    return compliance_score_or_default(page.passed_count, page.failed_count, fallback)


def aggregate_pages(
    target_url: str,
    pages: Sequence[PageResult],
    duration_seconds: float,
    timestamp: Optional[datetime] = None,
    fallback: Optional[int] = None,
) -> ScanResult:
    """
    Combine page results into a ScanResult.

    Totals are plain sums so the page order does not matter.

    Raises:
        ValueError: when `pages` is empty
    """
    pages = tuple(pages)
    if not pages:
        raise ValueError("cannot aggregate a scan with no pages")

    total_passed = sum(page.passed_count for page in pages)
    total_failed = sum(page.failed_count for page in pages)
    total_warnings = sum(page.warning_count for page in pages)

    return ScanResult(
        target_url=target_url,
        timestamp=timestamp or datetime.now(timezone.utc),
        pages=pages,
        total_passed=total_passed,
        total_failed=total_failed,
        total_warnings=total_warnings,
        duration_seconds=duration_seconds,
        compliance_score=compliance_score_or_default(total_passed, total_failed, fallback),
    )


def issues_by_principle(pages: Sequence[PageResult]) -> Dict[str, int]:
    """Count issues per WCAG principle across all pages."""
    counts = {name: 0 for name in PRINCIPLE_NAMES.values()}
    counts[OTHER_PRINCIPLE] = 0
    for page in pages:
        for issue in page.issues:
            counts[get_principle(issue.rule_code)] += 1
    return counts
