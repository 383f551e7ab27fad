"""
Scan Services

Organized by responsibility:

1. issue/ - Finding classification and remediation lookup
   - issue_service.py: classify_issue(), build_page_result(), get_principle()
   - remediation.py: get_remediation_example() over the known rule codes

2. scan/ - Running scans
   - scan.py: perform_scan(), the simulated scanner
   - fixtures.py: placeholder page data for single-page and domain scans
   - state.py: immutable ScannerState, transition() and ScanSession

3. utils/ - Result shaping
   - scoring.py: compliance_score(), the half-up percentage
   - aggregator.py: fallback scores and page aggregation
   - scan_result_parser.py: ScanResult -> ScanReport for the API
"""
