# /classboard/services/reporting_helpers/assignment_tree.py

"""
Assignment Tree Builder.

Turns the three flat gradebook row sets of one class (assignments, sections,
scores) into one nested `AssignmentReport` per assignment. Every row set is
partitioned exactly once up front, so assembling the tree is a series of
dictionary lookups rather than a query or a scan per assignment.

A score is listed twice when it has a section: once under that section and
once in the assignment's flat `scores` list, which always holds every score
for the assignment. Scores whose assignment is not in the batch are dropped,
and scores pointing at an unknown section only appear in the flat list.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from ...models.gradebook_model import AssignmentReport, SectionReport, ScoreEntry
from .grouping import as_number, group_by_key, row_value

logger = logging.getLogger(__name__)

# Column names of the flat rows, as selected from the store.
SECTION_PARENT_KEY = "graded_assignment_id"
SCORE_ASSIGNMENT_KEY = "graded_assignment_id"
SCORE_SECTION_KEY = "section_id"


# --- Field Converters ---

def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


# --- Node Builders ---

def _score_entry(row: Any) -> ScoreEntry:
    return ScoreEntry(
        id=_as_text(row_value(row, "id")),
        studentId=_as_text(row_value(row, "student_id")),
        classId=_as_text(row_value(row, "class_id")),
        assignmentId=_as_text(row_value(row, SCORE_ASSIGNMENT_KEY)),
        sectionId=_as_text(row_value(row, SCORE_SECTION_KEY)),
        score=as_number(row_value(row, "score")),
        excused=row_value(row, "excused") is True,
    )


def _section_report(row: Any, section_scores: List[ScoreEntry]) -> SectionReport:
    return SectionReport(
        id=_as_text(row_value(row, "id")),
        name=_as_text(row_value(row, "name")),
        points=as_number(row_value(row, "points")),
        scores=section_scores,
    )


def _assignment_report(row: Any, sections: List[SectionReport], scores: List[ScoreEntry]) -> AssignmentReport:
    return AssignmentReport(
        id=_as_text(row_value(row, "id")),
        name=_as_text(row_value(row, "name")),
        totalPoints=as_number(row_value(row, "total_points")),
        createdDate=_as_datetime(row_value(row, "created_date")),
        updatedDate=_as_datetime(row_value(row, "updated_date")),
        sections=sections,
        scores=scores,
    )


# --- Core Public Function ---

def build_assignment_tree(
    assignments: Sequence[Any],
    sections: Sequence[Any],
    scores: Sequence[Any],
) -> List[AssignmentReport]:
    """
    Builds the nested assignment report for one class.

    Args:
        assignments: Assignment rows, in the order the caller wants them reported.
        sections: Section rows for those assignments, in display order.
        scores: Score rows for the class.

    Returns:
        One AssignmentReport per assignment, in input order. An empty assignment
        list yields an empty list.
    """
    # 1. Partition sections by their parent assignment.
    sections_by_assignment = group_by_key(sections, SECTION_PARENT_KEY)

    # 2. Partition scores by assignment and, when they have one, by section.
    #    Each score is converted once and shared between both views.
    score_entries = [(row, _score_entry(row)) for row in scores]
    scores_by_assignment: Dict[Any, List[ScoreEntry]] = {
        key: [entry for _, entry in group]
        for key, group in group_by_key(score_entries, lambda pair: row_value(pair[0], SCORE_ASSIGNMENT_KEY)).items()
    }
    scores_by_section: Dict[Any, List[ScoreEntry]] = {
        key: [entry for _, entry in group]
        for key, group in group_by_key(score_entries, lambda pair: row_value(pair[0], SCORE_SECTION_KEY)).items()
    }

    # 3. Assemble one node per assignment, preserving input order.
    report: List[AssignmentReport] = []
    for assignment in assignments:
        assignment_id = row_value(assignment, "id")
        section_nodes = [
            _section_report(section, _lookup(scores_by_section, row_value(section, "id")))
            for section in _lookup(sections_by_assignment, assignment_id)
        ]
        report.append(
            _assignment_report(assignment, section_nodes, _lookup(scores_by_assignment, assignment_id))
        )

    logger.debug(
        "Built assignment tree: %d assignments, %d sections, %d scores supplied.",
        len(report), len(sections), len(scores)
    )
    return report


def _lookup(groups: Dict[Any, List[Any]], key: Any) -> List[Any]:
    """Group lookup that treats a missing or unhashable key as an empty group."""
    if key is None:
        return []
    try:
        return list(groups.get(key, []))
    except TypeError:
        return []
