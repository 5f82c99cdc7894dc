# /classboard/services/report_service.py

"""
This service module is the business logic layer for every read-only report.

Each public function follows the same three steps:
1. Validate the request: required identifiers first (400), then the caller's
   identity (401).
2. Delegate data retrieval to the fetch orchestrator, which checks class
   ownership (404) before running the report's reads in parallel.
3. Hand the flat rows to the pure reporting helpers and return their
   Pydantic output, which the router sends as-is.
"""

from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from ..core.errors import MissingParameterError, UnauthenticatedError
from ..models.behavior_model import GlowsAndGrows, Polarity, StandingEntry, StudentPointsSummary
from ..models.gradebook_model import AssignmentReport
from .fetch_orchestrator import fetch_class_rows
from .reporting_helpers import assignment_tree, behavior_leaderboard, points_ledger


# --- Request Validation ---

def _require(value: Optional[str], name: str) -> str:
    if value is None or not value.strip():
        raise MissingParameterError(f"Missing '{name}' search parameter.")
    return value


def _require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise UnauthenticatedError("Unauthorized")
    return user_id


def _parse_polarity(point_type: Optional[str]) -> Polarity:
    try:
        return Polarity(point_type or Polarity.POSITIVE.value)
    except ValueError:
        raise MissingParameterError(f"Invalid 'type' search parameter: {point_type!r}. Expected 'positive' or 'negative'.")


# --- Report Functions ---

async def get_assignment_tree(
    session_factory: sessionmaker,
    class_id: Optional[str],
    user_id: Optional[str],
) -> List[AssignmentReport]:
    """Builds the nested graded-assignment report for a class the caller teaches."""
    class_id = _require(class_id, "class_id")
    user_id = _require_user(user_id)

    rows = await fetch_class_rows(session_factory, class_id, user_id, {
        "assignments": lambda db: db.get_assignments_by_class_id(class_id),
        "sections": lambda db: db.get_sections_by_class_id(class_id),
        "scores": lambda db: db.get_scores_by_class_id(class_id),
    })
    return assignment_tree.build_assignment_tree(rows["assignments"], rows["sections"], rows["scores"])


async def get_behavior_standings(
    session_factory: sessionmaker,
    class_id: Optional[str],
    student_id: Optional[str],
    user_id: Optional[str],
    point_type: Optional[str] = None,
) -> List[StandingEntry]:
    """The behaviors of one polarity for which the student holds the class's top total."""
    class_id = _require(class_id, "class_id")
    student_id = _require(student_id, "student_id")
    polarity = _parse_polarity(point_type)
    user_id = _require_user(user_id)

    rows = await fetch_class_rows(session_factory, class_id, user_id, {
        "events": lambda db: db.get_behavior_points_by_class_id(class_id, point_type=polarity.value),
    })
    return behavior_leaderboard.top_behavior_standings(rows["events"], polarity, student_id)


async def get_glows_and_grows(
    session_factory: sessionmaker,
    class_id: Optional[str],
    student_id: Optional[str],
    user_id: Optional[str],
) -> GlowsAndGrows:
    """Both polarities at once; the positive and negative reads run in parallel."""
    class_id = _require(class_id, "class_id")
    student_id = _require(student_id, "student_id")
    user_id = _require_user(user_id)

    rows = await fetch_class_rows(session_factory, class_id, user_id, {
        Polarity.POSITIVE.value: lambda db: db.get_behavior_points_by_class_id(class_id, point_type=Polarity.POSITIVE.value),
        Polarity.NEGATIVE.value: lambda db: db.get_behavior_points_by_class_id(class_id, point_type=Polarity.NEGATIVE.value),
    })
    return behavior_leaderboard.glows_and_grows(
        rows[Polarity.POSITIVE.value] + rows[Polarity.NEGATIVE.value], student_id
    )


async def get_student_points_summary(
    session_factory: sessionmaker,
    class_id: Optional[str],
    student_id: Optional[str],
    user_id: Optional[str],
) -> StudentPointsSummary:
    """Totals and recent ledger entries for one student's points card."""
    class_id = _require(class_id, "class_id")
    student_id = _require(student_id, "student_id")
    user_id = _require_user(user_id)

    rows = await fetch_class_rows(session_factory, class_id, user_id, {
        "events": lambda db: db.get_points_by_student_id(class_id, student_id),
    })
    return points_ledger.summarize_student_points(rows["events"])
