"""Rule-based alerts derived from totals and category data.

Every rule is evaluated on its own and all matches are returned, in rule
order. Alert ids are stable across recomputations so the host application can
keep a set of dismissed ids and filter them out with ``without_dismissed``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Sequence

from .config import Thresholds
from .models import BudgetGoal, Transaction
from .summary import CategoryRow, Totals

WARNING = "warning"
DANGER = "danger"
SUCCESS = "success"

SPENDING_EXCEEDS_INCOME = "spending-exceeds-income"
BUDGET_EXCEEDED = "budget-exceeded"
GOAL_REACHED = "goal-reached"
GOAL_PROGRESS = "goal-progress"
LARGE_TRANSACTION = "large-transaction"
CATEGORY_CONCENTRATION = "category-concentration"


@dataclass(frozen=True)
class Alert:
    id: str
    kind: str
    message: str
    severity: str


def evaluate_alerts(
    totals: Totals,
    categories: Sequence[CategoryRow],
    transactions: Iterable[Transaction],
    budget_goal: BudgetGoal,
    thresholds: Thresholds | None = None,
) -> List[Alert]:
    thresholds = thresholds or Thresholds()
    budget = budget_goal.monthly_budget
    goal = budget_goal.savings_goal
    alerts: List[Alert] = []

    if totals.total_expense > totals.total_income:
        alerts.append(
            Alert(
                SPENDING_EXCEEDS_INCOME,
                SPENDING_EXCEEDS_INCOME,
                "Spending is higher than your income",
                WARNING,
            )
        )

    if budget > 0 and totals.total_expense > budget:
        alerts.append(
            Alert(
                BUDGET_EXCEEDED,
                BUDGET_EXCEEDED,
                "You have exceeded your budget limit",
                DANGER,
            )
        )

    if goal > 0 and totals.savings >= goal:
        alerts.append(
            Alert(
                GOAL_REACHED,
                GOAL_REACHED,
                "Congratulations! You reached your savings goal",
                SUCCESS,
            )
        )

    if goal > 0 and 0 < totals.savings < goal:
        percent = math.floor(totals.savings / goal * 100)
        alerts.append(
            Alert(
                GOAL_PROGRESS,
                GOAL_PROGRESS,
                f"You've completed {percent}% of your savings goal",
                SUCCESS,
            )
        )

    large = next(
        (tx for tx in transactions if abs(tx.amount) >= thresholds.large_transaction),
        None,
    )
    if large is not None:
        alerts.append(
            Alert(
                LARGE_TRANSACTION,
                LARGE_TRANSACTION,
                f"Large transaction detected: {abs(large.amount):,.2f}",
                WARNING,
            )
        )

    if totals.total_expense > 0:
        for row in categories:
            if row.total / totals.total_expense > thresholds.category_concentration:
                alerts.append(
                    Alert(
                        f"{CATEGORY_CONCENTRATION}:{row.name}",
                        CATEGORY_CONCENTRATION,
                        f"High spending detected in {row.name}",
                        WARNING,
                    )
                )

    return alerts


def without_dismissed(alerts: Iterable[Alert], dismissed_ids: AbstractSet[str]) -> List[Alert]:
    return [alert for alert in alerts if alert.id not in dismissed_ids]
