# /classboard/models/behavior_model.py

# --- Core Imports ---
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional, Union


class Polarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class PointType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    REDEMPTION = "redemption"


# --- Leaderboard Models ---

class StandingEntry(BaseModel):
    """
    A behavior for which the subject student holds the top total in the class.
    """

    behaviorName: Optional[str] = Field(default=None, example="Helping Others")
    behaviorTitle: Optional[str] = Field(default=None, example="Super Helper")
    total: Union[int, float] = Field(..., description="The subject's summed points for this behavior.", example=5)
    otherLeadersCount: int = Field(
        ...,
        description="How many other students share the top total. 0 means the subject leads alone.",
        example=1
    )


class GlowsAndGrows(BaseModel):
    """Leaderboard standings for both polarities: glows are positive, grows negative."""

    glows: List[StandingEntry] = Field(default_factory=list)
    grows: List[StandingEntry] = Field(default_factory=list)


# --- Points Ledger Models ---

class LedgerEntry(BaseModel):
    name: str = Field(..., description="Behavior name for earned points, reward name for redemptions.")
    points: Union[int, float]
    createdDate: datetime = Field(..., description="Event time floored to the minute.")


class RecentPoints(BaseModel):
    positive: List[LedgerEntry] = Field(default_factory=list)
    negative: List[LedgerEntry] = Field(default_factory=list)
    redemption: List[LedgerEntry] = Field(default_factory=list)


class StudentPointsSummary(BaseModel):
    """
    Defines the data contract for a student's points card: running totals per
    point type and the most recent ledger entries of each type.
    """

    totalPoints: Union[int, float] = Field(default=0, example=12)
    totalPositive: Union[int, float] = Field(default=0, example=20)
    totalNegative: Union[int, float] = Field(default=0, example=-3)
    totalRedemption: Union[int, float] = Field(default=0, example=-5)
    recent: RecentPoints = Field(default_factory=RecentPoints)
