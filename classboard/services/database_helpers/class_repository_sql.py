# /classboard/services/database_helpers/class_repository_sql.py

"""
Raw SQLAlchemy queries for the `classes` and `teacher_classes` tables. This is
where the "does this user own this class" predicate is answered.
"""

from typing import Optional
from sqlalchemy.orm import Session

from classboard.db.models.class_models import TeacherClass


class ClassRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_teacher_class(self, class_id: str, user_id: str) -> Optional[TeacherClass]:
        """Returns the user's role row for the class, or None if they do not teach it."""
        return (
            self.db.query(TeacherClass)
            .filter(TeacherClass.class_id == class_id, TeacherClass.user_id == user_id)
            .first()
        )

    def user_owns_class(self, class_id: str, user_id: str) -> bool:
        return self.get_teacher_class(class_id=class_id, user_id=user_id) is not None
