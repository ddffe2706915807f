"""Summary statistics over stored verification results."""

from datetime import date, datetime, timezone
from typing import Iterable, Optional

from ..models.base import CamelModel
from ..models.result import VerificationResult


class HistoryStats(CamelModel):
    """Aggregate figures shown on the dashboard."""

    total_verifications: int
    today_count: int
    average_trust_score: int
    average_response_time: int


def summarize_history(
    results: Iterable[VerificationResult],
    today: Optional[date] = None,
) -> HistoryStats:
    """Summarise a list of results.

    Args:
        results: Stored verification results
        today: Day to count as today, in UTC; defaults to the current day

    Returns:
        Totals and rounded averages; averages are 0 for an empty history
    """
    results = list(results)
    today = today or datetime.now(timezone.utc).date()

    if not results:
        return HistoryStats(total_verifications=0, today_count=0, average_trust_score=0, average_response_time=0)

    today_count = sum(1 for r in results if r.timestamp.astimezone(timezone.utc).date() == today)
    return HistoryStats(
        total_verifications=len(results),
        today_count=today_count,
        average_trust_score=round(sum(r.trust_score for r in results) / len(results)),
        average_response_time=round(sum(r.processing_time for r in results) / len(results)),
    )
