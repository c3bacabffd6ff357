"""Report Aggregator - folds the session log into per-day reports"""

from collections import defaultdict
from datetime import date, tzinfo
from typing import Dict, Iterable, List, Optional

from app.features.timer.domain import Phase
from app.features.history.domain import DailyReport, SessionRecord
from app.utils.datetime_helper import format_long_date, local_date


def group_by_date(
    records: Iterable[SessionRecord],
    tz: Optional[tzinfo] = None,
) -> Dict[date, List[SessionRecord]]:
    """Group records by the local calendar date they started on"""
    grouped: Dict[date, List[SessionRecord]] = defaultdict(list)
    for record in records:
        grouped[local_date(record.started_at, tz)].append(record)
    return dict(grouped)


def _build_report(day: date, records: List[SessionRecord]) -> DailyReport:
    completed = [r for r in records if r.completed]
    closed_ids = {r.started_id for r in completed if r.started_id is not None}
    open_starts = [r for r in records if not r.completed and r.id not in closed_ids]

    return DailyReport(
        date=day.isoformat(),
        formatted_date=format_long_date(day),
        total_study_time=sum(r.duration_seconds for r in completed if r.type is Phase.STUDY),
        total_break_time=sum(r.duration_seconds for r in completed if r.type is Phase.BREAK),
        completed_count=len(completed),
        incomplete_count=len(open_starts),
    )


def build_daily_reports(
    records: Iterable[SessionRecord],
    tz: Optional[tzinfo] = None,
) -> List[DailyReport]:
    """
    Build one DailyReport per local calendar date, newest date first.

    Study and break totals only count completed records, so a phase that
    ran out contributes its duration exactly once. A start record with no
    matching completion counts as incomplete.

    Args:
        records: session log in insertion order
        tz: timezone for calendar dates; None means server local time
    """
    grouped = group_by_date(records, tz)
    return [
        _build_report(day, grouped[day])
        for day in sorted(grouped, reverse=True)
    ]


def sessions_for_date(
    records: Iterable[SessionRecord],
    day: date,
    tz: Optional[tzinfo] = None,
) -> List[SessionRecord]:
    """Records of one local date, most recent first"""
    matching = [r for r in records if local_date(r.started_at, tz) == day]
    return sorted(matching, key=lambda r: r.id, reverse=True)
