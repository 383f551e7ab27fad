"""
Remediation examples for known accessibility rule codes.
"""
from enum import Enum
from typing import Optional


class KnownRule(str, Enum):
    IMG_MISSING_ALT = "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37"
    NO_TITLE_ELEMENT = "WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.1.NoTitleEl"
    BUTTON_MISSING_NAME = "WCAG2AA.Principle4.Guideline4_1.4_1_2.H91.Button.Name"
    LOW_CONTRAST = "WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail"
    INPUT_MISSING_LABEL = "WCAG2AA.Principle1.Guideline1_3.1_3_1.F68"
    HTML_MISSING_LANG = "WCAG2AA.Principle3.Guideline3_1.3_1_1.H57.2"
    LINK_MISSING_TEXT = "WCAG2AA.Principle4.Guideline4_1.4_1_2.H91.A.NoContent"
    DUPLICATE_ID = "WCAG2AA.Principle4.Guideline4_1.4_1_1.F77"
    HEADING_ORDER = "WCAG2AA.Principle1.Guideline1_3.1_3_1_A.G141"

    @classmethod
    def lookup(cls, rule_code: str) -> Optional["KnownRule"]:
        try:
            return cls((rule_code or "").strip())
        except ValueError:
            return None


DEFAULT_REMEDIATION = (
    "Review this element against the referenced WCAG technique and update the "
    "markup so assistive technologies can perceive and operate it."
)


def get_remediation_example(rule_code: str) -> str:
    """Return a short example fix for `rule_code`, or DEFAULT_REMEDIATION."""
    rule = KnownRule.lookup(rule_code)

    if rule is KnownRule.IMG_MISSING_ALT:
        return 'Add descriptive alt text: <img src="hero-image.jpg" alt="Team collaborating in the office">'
    elif rule is KnownRule.NO_TITLE_ELEMENT:
        return "Add a title to the document head: <head><title>Home | Example Co</title></head>"
    elif rule is KnownRule.BUTTON_MISSING_NAME:
        return 'Give the button an accessible name: <button aria-label="Submit form">Submit</button>'
    elif rule is KnownRule.LOW_CONTRAST:
        return "Raise the text/background contrast ratio to at least 4.5:1 (3:1 for large text)."
    elif rule is KnownRule.INPUT_MISSING_LABEL:
        return 'Associate a label with the field: <label for="email">Email</label><input id="email" type="email">'
    elif rule is KnownRule.HTML_MISSING_LANG:
        return 'Declare the page language: <html lang="en">'
    elif rule is KnownRule.LINK_MISSING_TEXT:
        return 'Give the link text or a label: <a href="/cart" aria-label="View cart"><svg aria-hidden="true"></svg></a>'
    elif rule is KnownRule.DUPLICATE_ID:
        return 'Make every id unique: <div id="nav-main"> ... <div id="nav-footer">'
    elif rule is KnownRule.HEADING_ORDER:
        return "Nest headings in order without skipping levels: <h1> then <h2> then <h3>."
    else:
        return DEFAULT_REMEDIATION
