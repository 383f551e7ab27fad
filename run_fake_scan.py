import argparse
import asyncio
import json

from app.features.scan.schemas.scan import ScanOptions, StandardId
from app.features.scan.services.scan.scan import perform_scan
from app.features.scan.services.utils.scan_result_parser import build_report


async def run(url: str, full_domain: bool, standards: list):
    options = ScanOptions(full_domain=full_domain, standards=frozenset(standards))
    result = await perform_scan(url, options)
    report = build_report(result)
    print(json.dumps(report.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a simulated accessibility scan and print the report")
    parser.add_argument("url", help="URL to scan, including http:// or https://")
    parser.add_argument("--full-domain", action="store_true", help="Scan all pages within the domain")
    parser.add_argument(
        "--standard",
        action="append",
        choices=[standard.value for standard in StandardId],
        help="Standard to test against (repeatable, default WCAG2AA)",
    )
    args = parser.parse_args()

    standards = [StandardId(value) for value in (args.standard or [StandardId.WCAG2AA.value])]
    asyncio.run(run(args.url, args.full_domain, standards))
