import asyncio
import random
import time
from typing import Optional

from app.features.scan.schemas.scan import ScanOptions, ScanResult
from app.features.scan.services.scan.fixtures import domain_page_results, single_page_result
from app.features.scan.services.utils.aggregator import aggregate_pages
from app.platform.config import settings
from app.platform.logger import get_logger
from app.platform.utils.url_validator import ensure_valid_url

logger = get_logger(__name__)


async def perform_scan(
    url: str,
    options: Optional[ScanOptions] = None,
    rng: Optional[random.Random] = None,
) -> ScanResult:
    """
    Run a (simulated) accessibility scan of `url`.

    Waits for the configured scan delay, builds fixture pages and aggregates
    them. Resolves exactly once with the full result; there are no partial
    results and no cancellation.

    Raises:
        InvalidScanUrl: if `url` is empty or not an absolute http(s) URL
    """
    options = options or ScanOptions()
    url_str = ensure_valid_url(url)
    standards = ",".join(sorted(standard.value for standard in options.standards))

    logger.info(f"Starting scan: url={url_str}, full_domain={options.full_domain}, standards={standards}")
    started = time.monotonic()

    if options.full_domain:
        await asyncio.sleep(settings.DOMAIN_SCAN_DELAY_SECONDS)
        if rng is None and settings.DOMAIN_SCAN_SEED is not None:
            rng = random.Random(settings.DOMAIN_SCAN_SEED)
        pages = domain_page_results(url_str, rng)
    else:
        await asyncio.sleep(settings.SCAN_DELAY_SECONDS)
        pages = [single_page_result(url_str)]

    result = aggregate_pages(
        target_url=url_str,
        pages=pages,
        duration_seconds=round(time.monotonic() - started, 2),
    )

    logger.info(
        f"Scan complete: url={url_str}, pages={len(result.pages)}, "
        f"errors={result.total_failed}, warnings={result.total_warnings}, "
        f"score={result.compliance_score}"
    )
    return result
