from typing import List

from app.features.scan.schemas.scan import (
    PageSummary,
    ReportIssue,
    ScanReport,
    ScanResult,
    SummaryCards,
)
from app.features.scan.services.issue.issue_service import get_principle
from app.features.scan.services.issue.remediation import get_remediation_example
from app.features.scan.services.utils.aggregator import issues_by_principle, page_score


def get_score_band(score: int) -> str:
    """Determine the band a compliance score falls in."""
    if score >= 90:
        return "good"
    elif score >= 70:
        return "warning"
    else:
        return "critical"


def generate_summary_message(score: int, errors: int, warnings: int) -> str:
    """Generate summary message dynamically based on score ranges."""
    if errors == 0 and warnings == 0:
        return f"No accessibility issues found. Compliance score: {score}/100."
    elif score == 100:
        return f"Every check passed with a score of 100/100. Review {warnings} warning(s) to stay compliant."
    elif score >= 90:
        return f"The site is largely accessible with a score of {score}/100. Fix the remaining {errors} error(s) to reach full compliance."
    elif score >= 70:
        return f"The site has a fair score of {score}/100. Several barriers need attention, starting with {errors} error(s)."
    elif score >= 50:
        return f"The site needs attention. With a score of {score}/100, many users of assistive technology will run into barriers."
    else:
        return f"The site has serious accessibility problems. Score: {score}/100. Prioritize the {errors} error(s) listed below."


def generate_notification(result: ScanResult) -> str:
    """Short completion text shown when a scan finishes."""
    return f"Found {result.total_failed} errors and {result.total_warnings} warnings"


def build_page_summaries(result: ScanResult) -> List[PageSummary]:
    return [
        PageSummary(
            url=page.url,
            title=page.title,
            score=page_score(page),
            passed=page.passed_count,
            errors=page.failed_count,
            warnings=page.warning_count,
            load_time_seconds=page.load_time_seconds,
            status_code=page.status_code,
        )
        for page in result.pages
    ]


def build_report_issues(result: ScanResult) -> List[ReportIssue]:
    """Flatten issues of every page, keeping the order they were found in."""
    issues = []
    for page in result.pages:
        for issue in page.issues:
            issues.append(
                ReportIssue(
                    page_url=page.url,
                    kind=issue.kind,
                    rule_code=issue.rule_code,
                    message=issue.message,
                    selector=issue.selector,
                    context=issue.context,
                    principle=get_principle(issue.rule_code),
                    remediation=get_remediation_example(issue.rule_code),
                )
            )
    return issues


def build_report(result: ScanResult) -> ScanReport:
    """Transform a ScanResult into the report returned by the API."""
    return ScanReport(
        target_url=result.target_url,
        timestamp=result.timestamp,
        duration_seconds=result.duration_seconds,
        compliance_score=result.compliance_score,
        score_band=get_score_band(result.compliance_score),
        summary=SummaryCards(
            passed=result.total_passed,
            errors=result.total_failed,
            warnings=result.total_warnings,
        ),
        summary_message=generate_summary_message(
            result.compliance_score, result.total_failed, result.total_warnings
        ),
        notification=generate_notification(result),
        pages=build_page_summaries(result),
        issues=build_report_issues(result),
        issues_by_principle=issues_by_principle(result.pages),
    )
