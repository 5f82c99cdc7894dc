# /classboard/db/models/class_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` entity and the
`TeacherClass` link table, which records which users teach (own) which class.
"""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Class(Base):
    """
    SQLAlchemy model representing a class. All gradebook and behavior data
    hangs off a class through its `class_id` column.
    """
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    complete = Column(Boolean, nullable=False, default=False)
    created_date = Column(DateTime(timezone=True), server_default=func.now())

    teachers = relationship("TeacherClass", back_populates="class_", cascade="all, delete-orphan")


class TeacherClass(Base):
    """
    A user's role in a class. The presence of a row for (user_id, class_id) is
    the ownership predicate checked before any report data is read.
    """
    __tablename__ = "teacher_classes"

    user_id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.id"), primary_key=True, index=True)
    role = Column(String, nullable=False, default="primary")

    class_ = relationship("Class", back_populates="teachers")
