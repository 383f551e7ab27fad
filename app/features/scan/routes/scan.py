from fastapi import APIRouter, BackgroundTasks, Depends, status

from app.features.scan.schemas.scan import (
    RemediationResponse,
    ScanReport,
    ScanStartRequest,
    ScanStateResponse,
)
from app.features.scan.services.issue.remediation import KnownRule, get_remediation_example
from app.features.scan.services.scan.state import ScanSession, get_scan_session
from app.features.scan.services.utils.scan_result_parser import build_report
from app.platform.exceptions import ScanExecutionError, ScanResultNotFound
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.schemas import APIResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])


@router.post(
    "/start",
    response_model=APIResponse[ScanStateResponse],
    status_code=status.HTTP_202_ACCEPTED,
)
async def start_scan(
    request: ScanStartRequest,
    background_tasks: BackgroundTasks,
    session: ScanSession = Depends(get_scan_session),
):
    """
    Start a scan in the background.
    Poll /scan/status and fetch /scan/results once the phase is "result".
    """
    state = session.submit(request.url, request.to_options())
    background_tasks.add_task(session.execute)

    mode = "domain" if state.options.full_domain else "page"
    logger.info(f"Queued {mode} scan for {state.url}")

    return api_response(
        data=state.to_response(),
        message="Scanning domain..." if state.options.full_domain else "Scanning page...",
        status_code=status.HTTP_202_ACCEPTED,
    )


@router.post("/run", response_model=APIResponse[ScanReport])
async def run_scan(
    request: ScanStartRequest,
    session: ScanSession = Depends(get_scan_session),
):
    """Run a scan and wait for the report."""
    state = await session.run(request.url, request.to_options())

    if state.result is None:
        raise ScanExecutionError(state.error or "Scan failed")

    report = build_report(state.result)
    return api_response(data=report, message="Scan Complete")


@router.get("/status", response_model=APIResponse[ScanStateResponse])
async def get_scan_status(session: ScanSession = Depends(get_scan_session)):
    return api_response(
        data=session.state.to_response(),
        message=f"Scanner is {session.state.phase.value}",
    )


@router.get("/results", response_model=APIResponse[ScanReport])
async def get_scan_results(session: ScanSession = Depends(get_scan_session)):
    result = session.state.result
    if result is None:
        raise ScanResultNotFound("No scan results available. Start a scan first.")

    report = build_report(result)
    return api_response(data=report, message=report.notification)


@router.post("/reset", response_model=APIResponse[ScanStateResponse])
async def reset_scan(session: ScanSession = Depends(get_scan_session)):
    state = session.reset()
    return api_response(data=state.to_response(), message="Ready for a new scan")


@router.get("/remediation/{rule_code}", response_model=APIResponse[RemediationResponse])
async def get_remediation(rule_code: str):
    remediation = RemediationResponse(
        rule_code=rule_code,
        known=KnownRule.lookup(rule_code) is not None,
        remediation=get_remediation_example(rule_code),
    )
    return api_response(data=remediation, message="Remediation example")
