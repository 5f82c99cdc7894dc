# /tests/conftest.py

import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from classboard.db.base import (
    Base, Class, TeacherClass, GradedAssignment, AssignmentSection, AssignmentScore,
    Behavior, RewardItem, Point,
)
from classboard.db.database import get_session_factory
from classboard.main import app

TEACHER_ID = "user_teacher_1"
OTHER_TEACHER_ID = "user_teacher_2"


@pytest.fixture
def session_factory(tmp_path):
    """
    A session factory bound to a fresh, file-backed SQLite database for EACH
    test. A file (rather than :memory:) lets the orchestrator's worker threads
    open their own connections to the same data.
    """
    engine = create_engine(
        f"sqlite:///{tmp_path / 'classboard_test.db'}",
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


def _seed(session):
    session.add_all([
        Class(id="cls_1", name="Grade 4 Science"),
        Class(id="cls_2", name="Grade 5 Math"),
        TeacherClass(user_id=TEACHER_ID, class_id="cls_1", role="primary"),
        TeacherClass(user_id=OTHER_TEACHER_ID, class_id="cls_2", role="primary"),
    ])

    # --- Gradebook ---
    session.add_all([
        GradedAssignment(id="a1", user_id=TEACHER_ID, class_id="cls_1", name="Quiz 1", total_points=20,
                         created_date=datetime(2025, 1, 1, 9, 0), updated_date=datetime(2025, 1, 2, 9, 0)),
        GradedAssignment(id="a2", user_id=TEACHER_ID, class_id="cls_1", name="Essay", total_points=15,
                         created_date=datetime(2025, 2, 1, 9, 0), updated_date=datetime(2025, 2, 1, 9, 0)),
        GradedAssignment(id="a9", user_id=OTHER_TEACHER_ID, class_id="cls_2", name="Fractions", total_points=10,
                         created_date=datetime(2025, 1, 5, 9, 0), updated_date=datetime(2025, 1, 5, 9, 0)),
        AssignmentSection(id="s1", graded_assignment_id="a1", name="Part A", points=10),
        AssignmentSection(id="s2", graded_assignment_id="a1", name="Part B", points=10),
        AssignmentSection(id="s9", graded_assignment_id="a9", name="Part A", points=10),
        AssignmentScore(id="sc1", student_id="stu1", class_id="cls_1", graded_assignment_id="a1", section_id="s1", score=8),
        AssignmentScore(id="sc2", student_id="stu2", class_id="cls_1", graded_assignment_id="a1", section_id=None, score=9),
        AssignmentScore(id="sc3", student_id="stu1", class_id="cls_1", graded_assignment_id="a2", section_id=None, score=13.5, excused=False),
        AssignmentScore(id="sc4", student_id="stu2", class_id="cls_1", graded_assignment_id="a2", section_id=None, score=None, excused=True),
        # Orphan: its assignment is not part of the class's assignment batch.
        AssignmentScore(id="sc_orphan", student_id="stu3", class_id="cls_1", graded_assignment_id="a404", section_id=None, score=1),
        AssignmentScore(id="sc9", student_id="stu9", class_id="cls_2", graded_assignment_id="a9", section_id="s9", score=7),
    ])

    # --- Behaviors & Points ---
    session.add_all([
        Behavior(behavior_id="b1", class_id="cls_1", name="Helping Others", title="Super Helper", point_value=1),
        Behavior(behavior_id="b2", class_id="cls_1", name="Talking", title="Chatterbox", point_value=1),
        Behavior(behavior_id="b3", class_id="cls_1", name="On Task", title="Focus Master", point_value=1),
        RewardItem(item_id="r1", class_id="cls_1", name="Homework Pass", title="Free Pass", price=5),
    ])
    events = [
        # b1 (positive): stu1 = 3 + 2 = 5, stu2 = 5, stu3 = 2  -> stu1 and stu2 share the top.
        ("p1", "stu1", "b1", None, "positive", "3", datetime(2025, 3, 1, 10, 0, 10)),
        ("p2", "stu1", "b1", None, "positive", "2", datetime(2025, 3, 1, 10, 0, 40)),
        ("p3", "stu2", "b1", None, "positive", "5", datetime(2025, 3, 1, 10, 5)),
        ("p4", "stu3", "b1", None, "positive", "2", datetime(2025, 3, 1, 10, 6)),
        # b3 (positive): stu1 leads alone.
        ("p5", "stu1", "b3", None, "positive", "4", datetime(2025, 3, 1, 11, 0)),
        ("p6", "stu2", "b3", None, "positive", "1", datetime(2025, 3, 1, 11, 1)),
        # b2 (negative): stu3 = 2 + 1 = 3 leads, stu1 = 2.
        ("p7", "stu1", "b2", None, "negative", "2", datetime(2025, 3, 1, 12, 0)),
        ("p8", "stu3", "b2", None, "negative", "2", datetime(2025, 3, 1, 12, 1)),
        ("p9", "stu3", "b2", None, "negative", "1", datetime(2025, 3, 1, 12, 2)),
        # No behavior: never part of any leaderboard.
        ("p10", "stu3", None, None, "positive", "100", datetime(2025, 3, 1, 12, 3)),
        # Redemption.
        ("p11", "stu1", None, "r1", "redemption", "-5", datetime(2025, 3, 1, 13, 0)),
    ]
    session.add_all([
        Point(id=pid, user_id=TEACHER_ID, class_id="cls_1", student_id=student, behavior_id=behavior,
              reward_item_id=reward, type=point_type, number_of_points=Decimal(quantity), created_date=created)
        for pid, student, behavior, reward, point_type, quantity, created in events
    ])
    session.commit()


@pytest.fixture
def seeded_session_factory(session_factory):
    session = session_factory()
    try:
        _seed(session)
    finally:
        session.close()
    return session_factory


@pytest.fixture
def client(seeded_session_factory):
    """A TestClient whose orchestrator reads come from the seeded test database."""
    app.dependency_overrides[get_session_factory] = lambda: seeded_session_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def teacher_headers():
    return {"X-User-Id": TEACHER_ID}
