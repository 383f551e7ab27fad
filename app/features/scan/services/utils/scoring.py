class ComplianceScoreUndefined(ZeroDivisionError):
    """Raised when there are no passed or failed checks to score."""


def compliance_score(passed: int, failed: int) -> int:
    """
    Percentage of passed checks among passed + failed, rounded half-up.

    Raises:
        ComplianceScoreUndefined: when passed + failed == 0
    """
    if passed < 0 or failed < 0:
        raise ValueError("check counts cannot be negative")

    total = passed + failed
    if total == 0:
        raise ComplianceScoreUndefined("no passed or failed checks to score")

    # round(100 * passed / total) with ties going up, in integer arithmetic
    return (200 * passed + total) // (2 * total)
