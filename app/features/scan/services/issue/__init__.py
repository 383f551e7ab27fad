"""
Issue service module.

Classification of findings and remediation lookup.
"""
from app.features.scan.services.issue.issue_service import (
    build_page_result,
    classify_issue,
    count_issues,
    get_principle,
)
from app.features.scan.services.issue.remediation import (
    DEFAULT_REMEDIATION,
    KnownRule,
    get_remediation_example,
)

__all__ = [
    "build_page_result",
    "classify_issue",
    "count_issues",
    "get_principle",
    "DEFAULT_REMEDIATION",
    "KnownRule",
    "get_remediation_example",
]
