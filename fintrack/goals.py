"""Savings goal projection and budget usage."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .config import Thresholds
from .models import BudgetGoal
from .summary import Totals

UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class GoalProjection:
    months_to_goal: Union[int, str]
    progress_percent: float
    amount_to_goal: float
    monthly_saving_power: float
    remaining: float

    @property
    def reached(self) -> bool:
        return self.months_to_goal == 0


@dataclass(frozen=True)
class BudgetStatus:
    used_percent: float
    tier: str
    exceeded: bool


def monthly_saving_power(totals: Totals, monthly_budget: float) -> float:
    """Money saved per month: what is left of the budget, or net income without one."""

    if monthly_budget > 0:
        return monthly_budget - totals.total_expense
    return totals.total_income - totals.total_expense


def project_goal(totals: Totals, budget_goal: BudgetGoal) -> GoalProjection:
    goal = budget_goal.savings_goal
    power = monthly_saving_power(totals, budget_goal.monthly_budget)
    amount_to_goal = goal - totals.savings

    if totals.savings >= goal:
        months: Union[int, str] = 0
    elif power <= 0:
        months = UNREACHABLE
    else:
        months = math.ceil(amount_to_goal / power)

    if goal > 0:
        progress = max(0.0, min(totals.savings / goal * 100, 100.0))
    else:
        progress = 0.0

    return GoalProjection(
        months_to_goal=months,
        progress_percent=progress,
        amount_to_goal=amount_to_goal,
        monthly_saving_power=power,
        remaining=max(0.0, amount_to_goal),
    )


def budget_status(
    totals: Totals, monthly_budget: float, thresholds: Thresholds | None = None
) -> BudgetStatus:
    """Share of the monthly budget already spent.

    ``used_percent`` is not clamped, so overspending reads above 100.
    """

    thresholds = thresholds or Thresholds()
    used = totals.total_expense / monthly_budget * 100 if monthly_budget > 0 else 0.0
    if used > thresholds.budget_danger_percent:
        tier = "bad"
    elif used > thresholds.budget_caution_percent:
        tier = "caution"
    else:
        tier = "good"
    return BudgetStatus(used_percent=used, tier=tier, exceeded=used > 100)
