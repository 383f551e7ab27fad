"""
Placeholder scan data.

No real scanning happens anywhere in this service. The single-page result is a
fixed sample and the domain-wide result is synthesized with random error and
warning injection. Both exist so the aggregation and reporting paths have data
to work on.
"""
import random
from typing import List, Optional
from urllib.parse import urljoin

from app.features.scan.schemas.scan import PageResult
from app.features.scan.services.issue.issue_service import build_page_result, classify_issue
from app.features.scan.services.issue.remediation import KnownRule
from app.platform.utils.url_validator import extract_base_url


IMG_MISSING_ALT = classify_issue(
    "error",
    KnownRule.IMG_MISSING_ALT.value,
    "Img element missing an alt attribute",
    'img[src="hero-image.jpg"]',
    '<img src="hero-image.jpg" class="hero-img">',
)

NO_TITLE_ELEMENT = classify_issue(
    "warning",
    KnownRule.NO_TITLE_ELEMENT.value,
    "Document should have a title element",
    "html",
    "<html><head>...",
)

BUTTON_MISSING_NAME = classify_issue(
    "error",
    KnownRule.BUTTON_MISSING_NAME.value,
    "Button element must have accessible name",
    "button.submit-btn",
    '<button class="submit-btn">Submit</button>',
)

SINGLE_PAGE_PASSED = 47

# (path, title, passed checks, issues always present, load time in seconds)
DOMAIN_PAGES = [
    ("/", "Home", 45, (IMG_MISSING_ALT,), 1.2),
    ("/about", "About Us", 32, (), 0.8),
    ("/contact", "Contact", 28, (BUTTON_MISSING_NAME,), 0.9),
    ("/blog", "Blog", 38, (NO_TITLE_ELEMENT,), 1.6),
    ("/services", "Services", 41, (), 1.1),
]

# Candidates for random injection on domain scans
INJECTED_ERRORS = [
    classify_issue(
        "error",
        KnownRule.LOW_CONTRAST.value,
        "Text has insufficient color contrast (3.1:1, expected 4.5:1)",
        "p.subtitle",
        '<p class="subtitle">Our latest updates</p>',
    ),
    classify_issue(
        "error",
        KnownRule.INPUT_MISSING_LABEL.value,
        "Form field has no associated label",
        "input#newsletter-email",
        '<input id="newsletter-email" type="email" placeholder="Email">',
    ),
    classify_issue(
        "error",
        KnownRule.LINK_MISSING_TEXT.value,
        "Anchor element has no link content",
        "a.icon-cart",
        '<a class="icon-cart" href="/cart"><svg>...</svg></a>',
    ),
]

INJECTED_WARNINGS = [
    classify_issue(
        "warning",
        KnownRule.HEADING_ORDER.value,
        "Heading levels should only increase by one",
        "h4.card-title",
        '<h4 class="card-title">Featured</h4>',
    ),
    classify_issue(
        "warning",
        KnownRule.HTML_MISSING_LANG.value,
        "The html element should have a lang attribute",
        "html",
        "<html>",
    ),
]

ERROR_INJECTION_RATE = 0.3
WARNING_INJECTION_RATE = 0.4


def single_page_result(url: str) -> PageResult:
    """The fixed sample result for a single-page scan of `url`."""
    return build_page_result(
        url=url,
        title="Scanned page",
        issues=[IMG_MISSING_ALT, NO_TITLE_ELEMENT, BUTTON_MISSING_NAME],
        passed_count=SINGLE_PAGE_PASSED,
        load_time_seconds=1.1,
    )


def domain_page_results(url: str, rng: Optional[random.Random] = None) -> List[PageResult]:
    """
    Synthesize one PageResult per page in DOMAIN_PAGES on the domain of `url`.

    Each page may get one extra error and one extra warning picked from the
    injection pools; injected errors are taken out of the page's passed checks
    so the number of checks per page stays constant.
    """
    rng = rng or random.Random()
    base = extract_base_url(url) + "/"
    pages = []

    for path, title, passed, fixed_issues, load_time in DOMAIN_PAGES:
        issues = list(fixed_issues)
        if rng.random() < ERROR_INJECTION_RATE and passed > 0:
            issues.append(rng.choice(INJECTED_ERRORS))
            passed -= 1
        if rng.random() < WARNING_INJECTION_RATE:
            issues.append(rng.choice(INJECTED_WARNINGS))

        pages.append(
            build_page_result(
                url=urljoin(base, path.lstrip("/")),
                title=title,
                issues=issues,
                passed_count=passed,
                load_time_seconds=round(load_time + rng.uniform(-0.2, 0.2), 2),
            )
        )

    return pages
