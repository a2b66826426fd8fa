"""Utilities for working with calendar months."""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Tuple

# Fixed English abbreviations so labels don't depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def remaining_days(today: date) -> int:
    """Days left in the month of ``today``, counting ``today`` itself."""

    return days_in_month(today) - today.day + 1


def month_range(today: date | None = None) -> Tuple[date, date]:
    """Return the first and last day of the calendar month containing ``today``."""

    today = today or date.today()
    return today.replace(day=1), today.replace(day=days_in_month(today))


def month_label(moment: date | datetime, year_qualified: bool = False) -> str:
    label = MONTH_ABBREVIATIONS[moment.month - 1]
    if year_qualified:
        return f"{label} {moment.year}"
    return label
