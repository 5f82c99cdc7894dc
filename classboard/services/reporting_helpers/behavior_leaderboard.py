# /classboard/services/reporting_helpers/behavior_leaderboard.py

"""
Behavior Leaderboard Calculator.

Given the point events of one class and one polarity, finds every behavior for
which a subject student holds the top total. Ties at the top are shared: all
students at the maximum are co-leaders, and each standing reports how many
others share the spot.

Only students with at least one event for a behavior compete for it. Quantities
are accumulated exactly (ints, or Decimals for fractional points) so the
equality test behind tie detection does not depend on summation order.
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from ...models.behavior_model import GlowsAndGrows, Polarity, StandingEntry
from .grouping import ExactNumber, as_number, co_leaders, exact_quantity, group_by_key, row_value

logger = logging.getLogger(__name__)


def _is_eligible(event: Any, polarity: str) -> bool:
    """An event counts when it names a behavior and a student and matches the polarity."""
    if row_value(event, "behavior_id") is None or row_value(event, "student_id") is None:
        return False
    event_type = row_value(event, "type")
    return event_type is None or event_type == polarity


def _student_totals(events: List[Any]) -> Dict[Any, ExactNumber]:
    """Step 1 for a single behavior: sums quantities per distinct student."""
    totals: Dict[Any, ExactNumber] = {}
    for event in events:
        quantity = exact_quantity(row_value(event, "number_of_points"))
        if quantity is None:
            logger.debug("Skipping point event %s with unreadable quantity.", row_value(event, "id"))
            continue
        student_id = row_value(event, "student_id")
        totals[student_id] = totals.get(student_id, 0) + quantity
    return totals


def top_behavior_standings(
    events: Sequence[Any],
    polarity: Union[Polarity, str],
    subject_student_id: str,
) -> List[StandingEntry]:
    """
    Computes the subject's leading behaviors for one polarity.

    Args:
        events: Point event rows for one class, already filtered to `polarity`.
            Rows without a behavior id are skipped.
        polarity: 'positive' or 'negative'.
        subject_student_id: The student whose standings are being computed.

    Returns:
        One StandingEntry per behavior the subject co-leads. The list is empty
        when the subject leads nothing.
    """
    polarity = polarity.value if isinstance(polarity, Polarity) else polarity
    eligible = [event for event in events if _is_eligible(event, polarity)]

    standings: List[StandingEntry] = []
    for behavior_id, behavior_events in group_by_key(eligible, "behavior_id").items():
        totals = _student_totals(behavior_events)
        leaders = co_leaders(totals)
        if subject_student_id not in leaders:
            continue

        # Name and title are properties of the behavior, so any row of the group carries them.
        first_event = behavior_events[0]
        standings.append(StandingEntry(
            behaviorName=row_value(first_event, "behavior_name"),
            behaviorTitle=row_value(first_event, "behavior_title"),
            total=as_number(totals[subject_student_id]),
            otherLeadersCount=len(leaders) - 1,
        ))

    logger.debug(
        "Student %s leads %d %s behaviors (%d eligible events).",
        subject_student_id, len(standings), polarity, len(eligible)
    )
    return standings


def glows_and_grows(events: Sequence[Any], subject_student_id: str) -> GlowsAndGrows:
    """
    Runs the calculator once per polarity over a mixed event list. Glows are
    the positive behaviors the subject leads, grows the negative ones.
    """
    return GlowsAndGrows(
        glows=top_behavior_standings(events, Polarity.POSITIVE, subject_student_id),
        grows=top_behavior_standings(events, Polarity.NEGATIVE, subject_student_id),
    )
