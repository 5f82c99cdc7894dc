# /classboard/db/models/gradebook_models.py

"""
SQLAlchemy ORM models for the gradebook: graded assignments, their optional
sections, and the per-student scores recorded against them.
"""

from sqlalchemy import Column, String, Float, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class GradedAssignment(Base):
    __tablename__ = "graded_assignments"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    total_points = Column(Float, nullable=True)
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    updated_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Deleting an assignment removes its sections and scores.
    sections = relationship("AssignmentSection", back_populates="assignment", cascade="all, delete-orphan")
    scores = relationship("AssignmentScore", back_populates="assignment", cascade="all, delete-orphan")


class AssignmentSection(Base):
    __tablename__ = "assignment_sections"

    id = Column(String, primary_key=True, index=True)
    graded_assignment_id = Column(String, ForeignKey("graded_assignments.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    points = Column(Float, nullable=True)

    assignment = relationship("GradedAssignment", back_populates="sections")


class AssignmentScore(Base):
    """
    A single student's score. `section_id` is NULL when the score belongs to an
    assignment directly rather than to one of its sections.
    """
    __tablename__ = "assignment_scores"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=True)
    student_id = Column(String, nullable=False, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    graded_assignment_id = Column(String, ForeignKey("graded_assignments.id"), nullable=False, index=True)
    section_id = Column(String, ForeignKey("assignment_sections.id"), nullable=True)
    score = Column(Float, nullable=True)
    excused = Column(Boolean, nullable=False, default=False)

    assignment = relationship("GradedAssignment", back_populates="scores")
