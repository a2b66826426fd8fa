"""Totals, category and monthly summaries over a transaction snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .models import Transaction, normalize_category
from .periods import month_label


@dataclass(frozen=True)
class Totals:
    total_income: float
    total_expense: float
    balance: float
    savings: float


@dataclass(frozen=True)
class CategoryRow:
    name: str
    total: float
    count: int


@dataclass(frozen=True)
class MonthlyRow:
    month_label: str
    income: float
    expense: float

    @property
    def net(self) -> float:
        return self.income - self.expense


def compute_totals(transactions: Iterable[Transaction], monthly_budget: float = 0.0) -> Totals:
    """Sum income and expenses and derive balance and savings.

    ``balance`` treats the monthly budget as the starting balance, so an empty
    snapshot leaves ``balance == monthly_budget``.
    """

    total_income = 0.0
    total_expense = 0.0
    for tx in transactions:
        if tx.is_income:
            total_income += tx.amount
        elif tx.is_expense:
            total_expense += abs(tx.amount)

    total_income = round(total_income, 2)
    total_expense = round(total_expense, 2)
    balance = monthly_budget + total_income - total_expense
    return Totals(
        total_income=total_income,
        total_expense=total_expense,
        balance=balance,
        savings=max(0.0, balance),
    )


def build_category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryRow]:
    """Group expenses by category in the order categories are first seen."""

    buckets: Dict[str, Dict[str, float]] = {}
    for tx in transactions:
        if not tx.is_expense:
            continue
        bucket = buckets.setdefault(
            normalize_category(tx.category), {"total": 0.0, "count": 0}
        )
        bucket["total"] += abs(tx.amount)
        bucket["count"] += 1

    return [
        CategoryRow(name=name, total=round(values["total"], 2), count=int(values["count"]))
        for name, values in buckets.items()
    ]


def rank_categories(rows: Iterable[CategoryRow]) -> List[CategoryRow]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(rows, key=lambda row: row.total, reverse=True)


def total_expense_value(rows: Iterable[CategoryRow]) -> float:
    return round(sum(row.total for row in rows), 2)


def category_share(row: CategoryRow, total: float) -> float:
    """Percentage of ``total`` spent in ``row``; ``0`` when nothing was spent."""

    if total <= 0:
        return 0.0
    return row.total / total * 100


def top_category(rows: Sequence[CategoryRow]) -> str:
    ranked = rank_categories(rows)
    return ranked[0].name if ranked else "None"


def build_monthly_rollup(
    transactions: Iterable[Transaction], year_qualified: bool = False
) -> List[MonthlyRow]:
    """Bucket transactions by month label, in the order months are first seen.

    Labels are short month names, so the same month of different years shares
    a bucket unless ``year_qualified`` is set. Undated transactions are skipped.
    """

    buckets: Dict[str, Dict[str, float]] = {}
    for tx in transactions:
        if tx.date is None:
            continue
        bucket = buckets.setdefault(
            month_label(tx.date, year_qualified), {"income": 0.0, "expense": 0.0}
        )
        if tx.is_income:
            bucket["income"] += tx.amount
        elif tx.is_expense:
            bucket["expense"] += abs(tx.amount)

    return [
        MonthlyRow(
            month_label=label,
            income=round(values["income"], 2),
            expense=round(values["expense"], 2),
        )
        for label, values in buckets.items()
    ]
