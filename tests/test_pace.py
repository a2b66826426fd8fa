from datetime import date, datetime

from fintrack.config import Thresholds
from fintrack.models import Transaction
from fintrack.pace import build_spending_calendar, compute_daily_pace, pace_status


def spend(amount, when, category="Food"):
    return Transaction(id="", title="", amount=amount, category=category, date=when)


TODAY = date(2025, 1, 22)


def test_daily_budget_spreads_balance_over_remaining_days():
    transactions = [
        spend(-100, datetime(2025, 1, 22, 9, 30)),
        spend(-55, datetime(2025, 1, 22, 18, 0)),
        spend(-500, datetime(2025, 1, 21, 12, 0)),
        spend(2000, datetime(2025, 1, 22, 8, 0)),
    ]

    pace = compute_daily_pace(transactions, balance=3100, today=TODAY)
    assert pace.remaining_days == 10
    assert pace.daily_budget == 310
    assert pace.today_spent == 155
    assert pace.progress_percent == 50
    assert pace.status == "good"


def test_progress_is_capped_at_100():
    pace = compute_daily_pace(
        [spend(-1000, datetime(2025, 1, 22, 9, 0))], balance=3100, today=TODAY
    )
    assert pace.progress_percent == 100
    assert pace.status == "over"


def test_no_daily_budget_without_positive_balance():
    pace = compute_daily_pace([], balance=-50, today=TODAY)
    assert pace.daily_budget == 0
    assert pace.progress_percent == 0
    assert pace.status == "good"

    pace = compute_daily_pace(
        [spend(-10, datetime(2025, 1, 22, 9, 0))], balance=0, today=TODAY
    )
    assert pace.progress_percent == 0
    assert pace.status == "over"


def test_pace_status_tiers():
    assert pace_status(100, 100) == "good"
    assert pace_status(110, 100) == "caution"
    assert pace_status(130, 100) == "over"
    assert pace_status(110, 100, Thresholds(pace_caution=1.05)) == "over"


def test_undated_transactions_are_not_counted_for_today():
    pace = compute_daily_pace([spend(-10, None)], balance=3100, today=TODAY)
    assert pace.today_spent == 0


def test_spending_calendar_marks_each_day():
    transactions = [
        spend(-50, datetime(2024, 2, 3, 10, 0)),
        spend(-110, datetime(2024, 2, 4, 10, 0)),
        spend(-200, datetime(2024, 2, 5, 10, 0)),
        spend(-999, datetime(2024, 3, 5, 10, 0)),
    ]

    calendar = build_spending_calendar(transactions, daily_budget=100, today=date(2024, 2, 10))
    assert len(calendar) == 29
    by_day = {entry.day.day: entry for entry in calendar}
    assert by_day[1].status == "none"
    assert by_day[3].status == "good"
    assert by_day[4].status == "caution"
    assert by_day[5].status == "over"
    assert by_day[5].total_spent == 200
    assert len(by_day[5].transactions) == 1
