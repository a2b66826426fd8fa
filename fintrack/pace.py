"""Daily spending pace and the month's spending calendar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Sequence

from .config import Thresholds
from .models import Transaction
from .periods import days_in_month, remaining_days

GOOD = "good"
CAUTION = "caution"
OVER = "over"
NONE = "none"


@dataclass(frozen=True)
class DailyPace:
    daily_budget: float
    today_spent: float
    progress_percent: float
    status: str
    remaining_days: int


@dataclass(frozen=True)
class CalendarDay:
    day: date
    total_spent: float
    transactions: Sequence[Transaction]
    status: str


def pace_status(spent: float, daily_budget: float, thresholds: Thresholds | None = None) -> str:
    thresholds = thresholds or Thresholds()
    if spent <= daily_budget * thresholds.pace_good:
        return GOOD
    if spent <= daily_budget * thresholds.pace_caution:
        return CAUTION
    return OVER


def spending_for_day(transactions: Iterable[Transaction], day: date) -> CalendarDay:
    """Collect the expenses dated on ``day``; status is left for the caller."""

    spent = [tx for tx in transactions if tx.is_expense and tx.day == day]
    return CalendarDay(
        day=day,
        total_spent=sum(abs(tx.amount) for tx in spent),
        transactions=tuple(spent),
        status=NONE,
    )


def compute_daily_pace(
    transactions: Iterable[Transaction],
    balance: float,
    today: date,
    thresholds: Thresholds | None = None,
) -> DailyPace:
    """Spread the remaining balance over the days left in the month."""

    days_left = remaining_days(today)
    daily_budget = balance / days_left if days_left > 0 and balance > 0 else 0.0
    today_spent = spending_for_day(transactions, today).total_spent
    if daily_budget > 0:
        progress = min(today_spent / daily_budget * 100, 100.0)
    else:
        progress = 0.0
    return DailyPace(
        daily_budget=daily_budget,
        today_spent=today_spent,
        progress_percent=progress,
        status=pace_status(today_spent, daily_budget, thresholds),
        remaining_days=days_left,
    )


def build_spending_calendar(
    transactions: Sequence[Transaction],
    daily_budget: float,
    today: date,
    thresholds: Thresholds | None = None,
) -> List[CalendarDay]:
    """One entry per day of the month containing ``today``."""

    days: List[CalendarDay] = []
    for number in range(1, days_in_month(today) + 1):
        entry = spending_for_day(transactions, today.replace(day=number))
        if entry.total_spent > 0:
            status = pace_status(entry.total_spent, daily_budget, thresholds)
        else:
            status = NONE
        days.append(
            CalendarDay(
                day=entry.day,
                total_spent=entry.total_spent,
                transactions=entry.transactions,
                status=status,
            )
        )
    return days
