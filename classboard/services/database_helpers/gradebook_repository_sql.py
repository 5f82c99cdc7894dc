# /classboard/services/database_helpers/gradebook_repository_sql.py

"""
Filtered selects for the gradebook tables. Every method is scoped to one class
and returns flat row dictionaries, never ORM objects, so the results can leave
the worker thread (and its session) that produced them.

The three reads are independent of each other: sections are filtered through
their parent assignment's class rather than through a list of assignment ids,
which lets the fetch orchestrator run all three at the same time.
"""

from typing import Dict, List
from sqlalchemy.orm import Session

from classboard.db.models.gradebook_models import GradedAssignment, AssignmentSection, AssignmentScore


def _row_to_dict(obj) -> Dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


class GradebookRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_assignments_by_class_id(self, class_id: str) -> List[Dict]:
        """Assignments for the class, oldest first. The report keeps this order."""
        rows = (
            self.db.query(GradedAssignment)
            .filter(GradedAssignment.class_id == class_id)
            .order_by(GradedAssignment.created_date, GradedAssignment.id)
            .all()
        )
        return [_row_to_dict(r) for r in rows]

    def get_sections_by_class_id(self, class_id: str) -> List[Dict]:
        rows = (
            self.db.query(AssignmentSection)
            .join(GradedAssignment, AssignmentSection.graded_assignment_id == GradedAssignment.id)
            .filter(GradedAssignment.class_id == class_id)
            .order_by(AssignmentSection.id)
            .all()
        )
        return [_row_to_dict(r) for r in rows]

    def get_scores_by_class_id(self, class_id: str) -> List[Dict]:
        rows = (
            self.db.query(AssignmentScore)
            .filter(AssignmentScore.class_id == class_id)
            .all()
        )
        return [_row_to_dict(r) for r in rows]
