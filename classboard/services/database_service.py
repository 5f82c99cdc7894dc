# /classboard/services/database_service.py

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

# --- Repository Imports ---
from .database_helpers.class_repository_sql import ClassRepositorySQL
from .database_helpers.gradebook_repository_sql import GradebookRepositorySQL
from .database_helpers.behavior_repository_sql import BehaviorRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. One instance wraps exactly one session,
        so it must only be used from the thread that created it.
        """
        self.class_repo = ClassRepositorySQL(db_session)
        self.gradebook_repo = GradebookRepositorySQL(db_session)
        self.behavior_repo = BehaviorRepositorySQL(db_session)

    # --- CLASS OWNERSHIP (DELEGATED) ---
    def user_owns_class(self, class_id: str, user_id: str) -> bool: return self.class_repo.user_owns_class(class_id=class_id, user_id=user_id)

    # --- GRADEBOOK READS (DELEGATED) ---
    def get_assignments_by_class_id(self, class_id: str) -> List[Dict]: return self.gradebook_repo.get_assignments_by_class_id(class_id)
    def get_sections_by_class_id(self, class_id: str) -> List[Dict]: return self.gradebook_repo.get_sections_by_class_id(class_id)
    def get_scores_by_class_id(self, class_id: str) -> List[Dict]: return self.gradebook_repo.get_scores_by_class_id(class_id)

    # --- BEHAVIOR POINT READS (DELEGATED) ---
    def get_behavior_points_by_class_id(self, class_id: str, point_type: Optional[str] = None) -> List[Dict]:
        return self.behavior_repo.get_behavior_points_by_class_id(class_id, point_type=point_type)
    def get_points_by_student_id(self, class_id: str, student_id: str) -> List[Dict]:
        return self.behavior_repo.get_points_by_student_id(class_id, student_id)

