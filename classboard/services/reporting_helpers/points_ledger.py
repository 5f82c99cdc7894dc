# /classboard/services/reporting_helpers/points_ledger.py

"""Specialist for assembling a student's points card from their raw point events."""

import logging
from typing import Any, List, Sequence

import pandas as pd

from ...models.behavior_model import LedgerEntry, PointType, RecentPoints, StudentPointsSummary
from .grouping import as_number, exact_quantity, row_value

logger = logging.getLogger(__name__)


def _display_name(event: Any, event_type: str):
    # Redemptions are named after the reward; everything else after the behavior.
    if event_type == PointType.REDEMPTION.value:
        return row_value(event, "reward_item_name") or row_value(event, "reward_title")
    return row_value(event, "behavior_name") or row_value(event, "behavior_title")


def _ledger_records(events: Sequence[Any]) -> List[dict]:
    known_types = {point_type.value for point_type in PointType}
    records = []
    for event in events:
        event_type = row_value(event, "type")
        if event_type not in known_types:
            continue
        name = _display_name(event, event_type)
        quantity = exact_quantity(row_value(event, "number_of_points"))
        if not name or quantity is None:
            continue
        records.append({
            "type": event_type,
            "name": name,
            "points": quantity,
            "created_date": row_value(event, "created_date"),
        })
    return records


def summarize_student_points(events: Sequence[Any], recent_limit: int = 5) -> StudentPointsSummary:
    """
    Aggregates one student's point events into totals and a recent-activity ledger.

    Events of the same type and name that happened within the same minute are
    merged into a single ledger entry. Totals are computed over every ledger
    entry; only the newest `recent_limit` entries of each type are listed.
    """
    records = _ledger_records(events)
    if not records:
        return StudentPointsSummary()

    df = pd.DataFrame(records)
    df["created_date"] = pd.to_datetime(df["created_date"], errors="coerce", utc=True, format="mixed")
    df.dropna(subset=["created_date"], inplace=True)
    if df.empty:
        return StudentPointsSummary()
    df["created_date"] = df["created_date"].dt.floor("min")

    # Points hold ints and Decimals, so they are summed with Python arithmetic
    # rather than a float reduction.
    ledger = (
        df.groupby(["type", "name", "created_date"], sort=False)
        .agg(points=("points", lambda values: sum(values, 0)))
        .reset_index()
        .sort_values("created_date", ascending=False, kind="stable")
    )

    totals = {}
    recent = {}
    for point_type in PointType:
        typed = ledger[ledger["type"] == point_type.value]
        totals[point_type.value] = sum(typed["points"], 0)
        recent[point_type.value] = [
            LedgerEntry(
                name=row.name,
                points=as_number(row.points),
                createdDate=row.created_date.to_pydatetime(),
            )
            for row in typed.head(recent_limit).itertuples(index=False)
        ]

    logger.debug("Summarized %d point events into %d ledger entries.", len(records), len(ledger))
    return StudentPointsSummary(
        totalPoints=as_number(sum(totals.values(), 0)),
        totalPositive=as_number(totals[PointType.POSITIVE.value]),
        totalNegative=as_number(totals[PointType.NEGATIVE.value]),
        totalRedemption=as_number(totals[PointType.REDEMPTION.value]),
        recent=RecentPoints(**recent),
    )
