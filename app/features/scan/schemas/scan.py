"""
Scan Schemas

Page and site level scan results, scan options and the request/response
models for the scan API endpoints.
"""
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from app.features.scan.schemas.issue import Issue, IssueKind
from app.features.scan.services.utils.scoring import compliance_score


class StandardId(str, Enum):
    """Accessibility standards a scan can be run against."""
    WCAG2A = "WCAG2A"
    WCAG2AA = "WCAG2AA"
    WCAG2AAA = "WCAG2AAA"
    Section508 = "Section508"


DEFAULT_STANDARDS = frozenset({StandardId.WCAG2AA})


# ============================================================================
# Results
# ============================================================================

class PageResult(BaseModel):
    """
    Outcome of scanning one URL.

    failed_count and warning_count must match the issues list; a mismatch is
    rejected at construction time.
    """
    url: str
    title: str
    issues: Tuple[Issue, ...] = ()
    passed_count: int = Field(ge=0)
    failed_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    load_time_seconds: float = Field(default=0.0, ge=0)
    status_code: int = 200

    class Config:
        frozen = True

    @model_validator(mode="after")
    def counts_match_issues(self):
        errors = sum(1 for issue in self.issues if issue.kind == IssueKind.error)
        warnings = len(self.issues) - errors
        if self.failed_count != errors:
            raise ValueError(
                f"failed_count={self.failed_count} but page has {errors} error issues"
            )
        if self.warning_count != warnings:
            raise ValueError(
                f"warning_count={self.warning_count} but page has {warnings} warning issues"
            )
        return self


class ScanResult(BaseModel):
    """Aggregate outcome of one scan across one or more pages."""
    target_url: str
    timestamp: datetime
    pages: Tuple[PageResult, ...]
    total_passed: int
    total_failed: int
    total_warnings: int
    duration_seconds: float
    compliance_score: int = Field(ge=0, le=100)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def totals_match_pages(self):
        expected = (
            sum(page.passed_count for page in self.pages),
            sum(page.failed_count for page in self.pages),
            sum(page.warning_count for page in self.pages),
        )
        actual = (self.total_passed, self.total_failed, self.total_warnings)
        if expected != actual:
            raise ValueError(f"totals {actual} do not match page counters {expected}")
        if self.total_passed + self.total_failed > 0:
            expected_score = compliance_score(self.total_passed, self.total_failed)
            if self.compliance_score != expected_score:
                raise ValueError(
                    f"compliance_score={self.compliance_score} but totals give {expected_score}"
                )
        return self


# ============================================================================
# Options and requests
# ============================================================================

class ScanOptions(BaseModel):
    full_domain: bool = False
    standards: FrozenSet[StandardId] = DEFAULT_STANDARDS

    class Config:
        frozen = True

    @field_validator("standards")
    @classmethod
    def at_least_one_standard(cls, value):
        if not value:
            raise ValueError("Select at least one accessibility standard")
        return value


class ScanStartRequest(BaseModel):
    """Request to start a scan."""
    url: str
    full_domain: bool = False
    standards: List[StandardId] = Field(default_factory=lambda: [StandardId.WCAG2AA], min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com",
                "full_domain": False,
                "standards": ["WCAG2AA"],
            }
        }

    def to_options(self) -> ScanOptions:
        return ScanOptions(full_domain=self.full_domain, standards=frozenset(self.standards))


class ScanStateResponse(BaseModel):
    """Snapshot of the scanner state."""
    phase: str
    url: str
    full_domain: bool
    standards: List[StandardId]
    has_result: bool
    error: Optional[str] = None


# ============================================================================
# Report
# ============================================================================

class SummaryCards(BaseModel):
    passed: int
    errors: int
    warnings: int


class PageSummary(BaseModel):
    url: str
    title: str
    score: int
    passed: int
    errors: int
    warnings: int
    load_time_seconds: float
    status_code: int


class ReportIssue(BaseModel):
    page_url: str
    kind: IssueKind
    rule_code: str
    message: str
    selector: str
    context: str
    principle: str
    remediation: str


class ScanReport(BaseModel):
    """Everything a client needs to render a finished scan."""
    target_url: str
    timestamp: datetime
    duration_seconds: float
    compliance_score: int
    score_band: str
    summary: SummaryCards
    summary_message: str
    notification: str
    pages: List[PageSummary]
    issues: List[ReportIssue]
    issues_by_principle: Dict[str, int]


class RemediationResponse(BaseModel):
    rule_code: str
    known: bool
    remediation: str
