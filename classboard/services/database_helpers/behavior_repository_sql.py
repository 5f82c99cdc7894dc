# /classboard/services/database_helpers/behavior_repository_sql.py

"""
Filtered selects for the behavior-points tables. Point events are returned
denormalized: each row carries the display name and title of its behavior and
reward item so the reporting engine never has to look them up.
"""

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from classboard.db.models.behavior_models import Behavior, Point, RewardItem


class BehaviorRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _point_columns(self):
        return (
            Point.id,
            Point.student_id,
            Point.class_id,
            Point.behavior_id,
            Point.reward_item_id,
            Point.type,
            Point.number_of_points,
            Point.created_date,
        )

    def get_behavior_points_by_class_id(self, class_id: str, point_type: Optional[str] = None) -> List[Dict]:
        """
        Point events of a class that are attached to a behavior, optionally
        restricted to one type. The inner join drops events whose behavior is
        NULL or no longer exists, as the leaderboard requires.
        """
        query = (
            self.db.query(
                *self._point_columns(),
                Behavior.name.label("behavior_name"),
                Behavior.title.label("behavior_title"),
            )
            .join(Behavior, Behavior.behavior_id == Point.behavior_id)
            .filter(Point.class_id == class_id)
        )
        if point_type is not None:
            query = query.filter(Point.type == point_type)
        return [dict(row._mapping) for row in query.all()]

    def get_points_by_student_id(self, class_id: str, student_id: str) -> List[Dict]:
        """Every point event of one student in one class, with behavior and reward names when present."""
        query = (
            self.db.query(
                *self._point_columns(),
                Behavior.name.label("behavior_name"),
                Behavior.title.label("behavior_title"),
                RewardItem.name.label("reward_item_name"),
                RewardItem.title.label("reward_title"),
            )
            .outerjoin(Behavior, Behavior.behavior_id == Point.behavior_id)
            .outerjoin(RewardItem, RewardItem.item_id == Point.reward_item_id)
            .filter(Point.class_id == class_id, Point.student_id == student_id)
            .order_by(Point.created_date.desc())
        )
        return [dict(row._mapping) for row in query.all()]
