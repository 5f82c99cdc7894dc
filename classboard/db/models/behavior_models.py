# /classboard/db/models/behavior_models.py

"""
SQLAlchemy ORM models for the behavior-points system: the behaviors a teacher
defines for a class, the reward items students can redeem, and the individual
point events that record both.
"""

from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.sql import func

from ..base_class import Base


class Behavior(Base):
    __tablename__ = "behaviors"

    behavior_id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=True, index=True)
    name = Column(String, nullable=False)
    title = Column(String, nullable=True)
    point_value = Column(Integer, nullable=False, default=1)
    icon = Column(String, nullable=True)


class RewardItem(Base):
    __tablename__ = "reward_items"

    item_id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=True, index=True)
    name = Column(String, nullable=False)
    title = Column(String, nullable=True)
    price = Column(Integer, nullable=False, default=0)


class Point(Base):
    """
    One point event. `type` is 'positive', 'negative' or 'redemption'.
    `behavior_id` is NULL for redemptions and for behaviors that were deleted.
    """
    __tablename__ = "points"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    student_id = Column(String, nullable=False, index=True)
    behavior_id = Column(String, ForeignKey("behaviors.behavior_id"), nullable=True, index=True)
    reward_item_id = Column(String, ForeignKey("reward_items.item_id"), nullable=True)
    type = Column(String, nullable=False, index=True)
    # Numeric keeps fractional quantities exact all the way to the engine's accumulator.
    number_of_points = Column(Numeric(12, 4), nullable=False)
    created_date = Column(DateTime(timezone=True), server_default=func.now())
