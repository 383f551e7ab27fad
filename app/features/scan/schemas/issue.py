"""
Issue Schemas

A single accessibility finding as reported by a scan.
"""
from enum import Enum

from pydantic import BaseModel


class IssueKind(str, Enum):
    """Severity of a finding. Errors count as failed checks."""
    error = "error"
    warning = "warning"


class Issue(BaseModel):
    """
    One accessibility finding on a page.

    `rule_code` is the HTML_CodeSniffer style code of the violated technique
    (e.g. WCAG2AA.Principle1.Guideline1_1.1_1_1.H37), `selector` locates the
    element and `context` is a snippet of its markup.
    """
    kind: IssueKind
    rule_code: str
    message: str
    selector: str
    context: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "error",
                "rule_code": "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
                "message": "Img element missing an alt attribute",
                "selector": 'img[src="hero-image.jpg"]',
                "context": '<img src="hero-image.jpg" class="hero-img">',
            }
        }
