"""Assemble every derived dashboard view from one snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from .alerts import Alert, evaluate_alerts
from .config import Thresholds
from .goals import BudgetStatus, GoalProjection, budget_status, project_goal
from .models import BudgetGoal, Transaction
from .pace import CalendarDay, DailyPace, build_spending_calendar, compute_daily_pace
from .summary import (
    CategoryRow,
    MonthlyRow,
    Totals,
    build_category_breakdown,
    build_monthly_rollup,
    compute_totals,
    top_category,
)


@dataclass(frozen=True)
class DerivedView:
    totals: Totals
    category_breakdown: Sequence[CategoryRow]
    monthly_rollup: Sequence[MonthlyRow]
    daily_pace: DailyPace
    goal_projection: GoalProjection
    alerts: Sequence[Alert]
    budget_status: BudgetStatus
    top_category: str
    calendar: Sequence[CalendarDay]
    as_of: date


def build_dashboard(
    transactions: Iterable[Transaction],
    budget_goal: BudgetGoal | None = None,
    today: date | None = None,
    thresholds: Thresholds | None = None,
    year_qualified_months: bool = False,
) -> DerivedView:
    """Compute the full dashboard for ``transactions``.

    The snapshot is read, never modified; calling this twice with the same
    arguments gives equal results.
    """

    snapshot = tuple(transactions)
    budget_goal = budget_goal or BudgetGoal()
    thresholds = thresholds or Thresholds()
    today = today or date.today()

    totals = compute_totals(snapshot, budget_goal.monthly_budget)
    categories = build_category_breakdown(snapshot)
    pace = compute_daily_pace(snapshot, totals.balance, today, thresholds)

    return DerivedView(
        totals=totals,
        category_breakdown=tuple(categories),
        monthly_rollup=tuple(build_monthly_rollup(snapshot, year_qualified_months)),
        daily_pace=pace,
        goal_projection=project_goal(totals, budget_goal),
        alerts=tuple(evaluate_alerts(totals, categories, snapshot, budget_goal, thresholds)),
        budget_status=budget_status(totals, budget_goal.monthly_budget, thresholds),
        top_category=top_category(categories),
        calendar=tuple(build_spending_calendar(snapshot, pace.daily_budget, today, thresholds)),
        as_of=today,
    )
