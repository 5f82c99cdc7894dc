# /classboard/routers/reports_router.py

"""
Read-only report endpoints. This is the "thin" router layer: it collects query
parameters and the caller's identity, delegates to `report_service`, and
translates the service's tagged errors into HTTP status codes:

- 400: a required identifier is missing (or `type` is not a polarity)
- 401: no caller identity
- 404: the caller does not teach the class
- 500: anything else, with the error message

Error bodies are `{"error": message}`, the shape existing dashboard clients read.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import sessionmaker

from ..core.deps import get_current_user_id
from ..core.errors import ReportError
from ..db.database import get_session_factory
from ..models.behavior_model import GlowsAndGrows, StandingEntry, StudentPointsSummary
from ..models.gradebook_model import AssignmentReport
from ..services import report_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _run_report(report_name: str, coroutine):
    """Awaits a report and maps every failure onto the endpoint status taxonomy."""
    try:
        return await coroutine
    except ReportError as e:
        if e.status_code >= 500:
            logger.error("Error fetching %s: %s", report_name, e.message)
        return _error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("Error fetching %s: %s", report_name, e)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Unknown error")


@router.get(
    "/graded-assignments",
    response_model=List[AssignmentReport],
    summary="Get Graded Assignments with Sections and Scores",
    description="Returns every graded assignment of a class as a tree: sections with their scores, plus all scores of the assignment."
)
async def get_graded_assignments(
    class_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    return await _run_report(
        "graded assignments",
        report_service.get_assignment_tree(session_factory, class_id=class_id, user_id=user_id)
    )


@router.get(
    "/behavior-leaders",
    response_model=List[StandingEntry],
    summary="Get a Student's Leading Behaviors",
    description="Behaviors of one polarity for which the student holds the class's top total, ties included."
)
async def get_behavior_leaders(
    class_id: Optional[str] = None,
    student_id: Optional[str] = None,
    type: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    return await _run_report(
        "behavior leaders",
        report_service.get_behavior_standings(
            session_factory, class_id=class_id, student_id=student_id, user_id=user_id, point_type=type
        )
    )


@router.get(
    "/glows-and-grows",
    response_model=GlowsAndGrows,
    summary="Get a Student's Glows and Grows"
)
async def get_glows_and_grows(
    class_id: Optional[str] = None,
    student_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    return await _run_report(
        "glows and grows",
        report_service.get_glows_and_grows(session_factory, class_id=class_id, student_id=student_id, user_id=user_id)
    )


@router.get(
    "/student-points",
    response_model=StudentPointsSummary,
    summary="Get a Student's Points Card"
)
async def get_student_points(
    class_id: Optional[str] = None,
    student_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    return await _run_report(
        "student points",
        report_service.get_student_points_summary(session_factory, class_id=class_id, student_id=student_id, user_id=user_id)
    )
