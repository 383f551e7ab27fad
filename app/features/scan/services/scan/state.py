"""
Scanner State

The scanner is always in one of three phases: idle, scanning or result.
State objects are immutable; `transition` returns a new state for each event.
"""
import random
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from app.features.scan.schemas.scan import ScanOptions, ScanResult, ScanStateResponse
from app.features.scan.services.scan.scan import perform_scan
from app.platform.exceptions import InvalidTransition, ScanAlreadyRunning
from app.platform.logger import get_logger
from app.platform.utils.url_validator import ensure_valid_url

logger = get_logger(__name__)


class ScanPhase(str, Enum):
    idle = "idle"
    scanning = "scanning"
    result = "result"


class ScannerState(BaseModel):
    phase: ScanPhase = ScanPhase.idle
    url: str = ""
    options: ScanOptions = ScanOptions()
    result: Optional[ScanResult] = None
    error: Optional[str] = None

    class Config:
        frozen = True

    @property
    def is_scanning(self) -> bool:
        return self.phase == ScanPhase.scanning

    def to_response(self) -> ScanStateResponse:
        return ScanStateResponse(
            phase=self.phase.value,
            url=self.url,
            full_domain=self.options.full_domain,
            standards=sorted(self.options.standards, key=lambda s: s.value),
            has_result=self.result is not None,
            error=self.error,
        )


# ============================================================================
# Events
# ============================================================================

class SubmitScan(BaseModel):
    url: str
    options: ScanOptions = ScanOptions()


class ScanCompleted(BaseModel):
    result: ScanResult


class ScanFailed(BaseModel):
    error: str


class ResetScan(BaseModel):
    pass


ScanEvent = Union[SubmitScan, ScanCompleted, ScanFailed, ResetScan]


def transition(state: ScannerState, event: ScanEvent) -> ScannerState:
    """
    Apply `event` to `state`.

    Raises:
        ScanAlreadyRunning: on submit while a scan is pending
        InvalidTransition: on completion/failure when no scan is pending
    """
    if isinstance(event, SubmitScan):
        if state.is_scanning:
            raise ScanAlreadyRunning(f"A scan of {state.url} is already in progress")
        # The previous result is discarded as soon as a new scan starts
        return ScannerState(phase=ScanPhase.scanning, url=event.url, options=event.options)

    if isinstance(event, ScanCompleted):
        if not state.is_scanning:
            raise InvalidTransition("Received a scan result but no scan is in progress")
        return state.model_copy(update={"phase": ScanPhase.result, "result": event.result, "error": None})

    if isinstance(event, ScanFailed):
        if not state.is_scanning:
            raise InvalidTransition("Received a scan failure but no scan is in progress")
        return state.model_copy(update={"phase": ScanPhase.idle, "result": None, "error": event.error})

    if isinstance(event, ResetScan):
        if state.is_scanning:
            raise InvalidTransition("Cannot reset while a scan is in progress")
        return ScannerState()

    raise TypeError(f"Unknown scan event: {type(event).__name__}")


class ScanSession:
    """Holds the current ScannerState for this process and drives scans."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.state = ScannerState()
        self.rng = rng

    def dispatch(self, event: ScanEvent) -> ScannerState:
        self.state = transition(self.state, event)
        return self.state

    def submit(self, url: str, options: Optional[ScanOptions] = None) -> ScannerState:
        """Validate `url` and move to scanning. Nothing is scanned yet."""
        url_str = ensure_valid_url(url)
        return self.dispatch(SubmitScan(url=url_str, options=options or ScanOptions()))

    async def execute(self) -> ScannerState:
        """
        Run the pending scan and record its outcome.
        A failure is stored on the state rather than raised.
        """
        if not self.state.is_scanning:
            raise InvalidTransition("No scan has been submitted")

        try:
            result = await perform_scan(self.state.url, self.state.options, rng=self.rng)
        except Exception as e:
            logger.exception(f"Scan of {self.state.url} failed: {e}")
            return self.dispatch(ScanFailed(error=str(e) or type(e).__name__))

        return self.dispatch(ScanCompleted(result=result))

    async def run(self, url: str, options: Optional[ScanOptions] = None) -> ScannerState:
        self.submit(url, options)
        return await self.execute()

    def reset(self) -> ScannerState:
        return self.dispatch(ResetScan())


scan_session = ScanSession()


def get_scan_session() -> ScanSession:
    return scan_session
