# /tests/test_points_ledger.py

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from classboard.models.behavior_model import StudentPointsSummary
from classboard.services.reporting_helpers.points_ledger import summarize_student_points


def _point(point_type, quantity, created, behavior_name=None, behavior_title=None,
           reward_item_name=None, reward_title=None):
    return {
        "type": point_type,
        "number_of_points": quantity,
        "created_date": created,
        "behavior_name": behavior_name,
        "behavior_title": behavior_title,
        "reward_item_name": reward_item_name,
        "reward_title": reward_title,
    }


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


# --- Test Data Fixtures ---

@pytest.fixture
def student_points():
    return [
        _point("positive", 3, datetime(2025, 3, 1, 10, 0, 10), behavior_name="Helping Others"),
        _point("positive", 2, datetime(2025, 3, 1, 10, 0, 40), behavior_name="Helping Others"),
        _point("positive", 4, datetime(2025, 3, 1, 11, 0), behavior_name="On Task"),
        _point("negative", Decimal("2.0000"), datetime(2025, 3, 1, 12, 0), behavior_title="Chatterbox"),
        _point("redemption", -5, "2025-03-01T13:00:00", reward_item_name="Homework Pass"),
    ]


# --- Unit Tests ---

def test_summary_totals(student_points):
    summary = summarize_student_points(student_points)
    assert isinstance(summary, StudentPointsSummary)
    assert summary.totalPositive == 9
    assert summary.totalNegative == 2
    assert summary.totalRedemption == -5
    assert summary.totalPoints == 6
    print("\n✅ SUCCESS: test_summary_totals passed.")


def test_same_minute_events_are_merged_and_sorted_newest_first(student_points):
    positive = summarize_student_points(student_points).recent.positive
    assert [(e.name, e.points) for e in positive] == [("On Task", 4), ("Helping Others", 5)]
    assert positive[1].createdDate == _utc(2025, 3, 1, 10, 0)


def test_display_name_fallbacks(student_points):
    recent = summarize_student_points(student_points).recent
    assert recent.negative[0].name == "Chatterbox"
    assert recent.redemption[0].name == "Homework Pass"
    assert recent.redemption[0].points == -5


def test_recent_limit_applies_per_type():
    events = [
        _point("positive", 1, datetime(2025, 3, 1, 9, minute), behavior_name="Reading")
        for minute in range(8)
    ]
    summary = summarize_student_points(events, recent_limit=3)
    assert [e.createdDate.minute for e in summary.recent.positive] == [7, 6, 5]
    assert summary.totalPositive == 8


def test_unlisted_events_are_ignored():
    events = [
        _point("positive", 1, datetime(2025, 3, 1, 9, 0)),                          # no name
        _point("positive", 1, "not a date", behavior_name="Reading"),              # bad date
        _point("positive", "many", datetime(2025, 3, 1, 9, 0), behavior_name="Reading"),
        _point("bonus", 1, datetime(2025, 3, 1, 9, 0), behavior_name="Reading"),    # unknown type
        _point("positive", 2, datetime(2025, 3, 1, 9, 5), behavior_name="Reading"),
    ]
    summary = summarize_student_points(events)
    assert summary.totalPositive == 2
    assert len(summary.recent.positive) == 1


def test_empty_events_give_zero_summary():
    summary = summarize_student_points([])
    assert summary.totalPoints == 0
    assert summary.recent.positive == [] and summary.recent.redemption == []


def test_fractional_points_stay_exact():
    events = [
        _point("positive", 0.1, datetime(2025, 3, 1, 9, 0), behavior_name="Reading"),
        _point("positive", 0.2, datetime(2025, 3, 1, 9, 0), behavior_name="Reading"),
    ]
    summary = summarize_student_points(events)
    assert summary.recent.positive[0].points == pytest.approx(0.3)
    assert summary.totalPositive == 0.3
