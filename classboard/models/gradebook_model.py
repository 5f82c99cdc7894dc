# /classboard/models/gradebook_model.py

# --- Core Imports ---
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional, Union

# Numbers pass through unchanged: integral values stay ints in the JSON payload.
Number = Union[int, float]


# --- Model Definitions ---

class ScoreEntry(BaseModel):
    """A single student's score as it appears inside an assignment report."""

    id: Optional[str] = Field(default=None, description="The score's unique identifier.")
    studentId: Optional[str] = Field(default=None, description="The student the score belongs to.")
    classId: Optional[str] = Field(default=None)
    assignmentId: Optional[str] = Field(default=None)
    sectionId: Optional[str] = Field(
        default=None,
        description="The section this score was recorded against, or null for an assignment-level score."
    )
    score: Optional[Number] = Field(default=None, example=8)
    excused: bool = Field(default=False)


class SectionReport(BaseModel):
    """One section of an assignment together with the scores recorded for it."""

    id: Optional[str] = None
    name: Optional[str] = None
    points: Optional[Number] = None
    scores: List[ScoreEntry] = Field(default_factory=list)


class AssignmentReport(BaseModel):
    """
    Defines the data contract for one node of the assignment tree response.
    `scores` always holds every score for the assignment, whether or not it was
    also listed under one of the sections.
    """

    id: Optional[str] = None
    name: Optional[str] = Field(default=None, example="Quiz 1")
    totalPoints: Optional[Number] = Field(default=None, example=20)
    createdDate: Optional[datetime] = None
    updatedDate: Optional[datetime] = None
    sections: List[SectionReport] = Field(default_factory=list)
    scores: List[ScoreEntry] = Field(default_factory=list)
