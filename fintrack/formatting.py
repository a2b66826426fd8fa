"""Utility helpers for turning dashboard views into text tables."""

from __future__ import annotations

from typing import Iterable, Sequence

from .config import DEFAULT_CURRENCY
from .engine import DerivedView
from .goals import UNREACHABLE
from .summary import CategoryRow, MonthlyRow, category_share, rank_categories, total_expense_value


def format_money(value: float, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency} {value:,.2f}"


def _column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Sequence[int]:
    widths = [len(h) for h in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))
    return widths


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = _column_widths(headers, rows)

    def format_row(row: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row))

    header_line = format_row(headers)
    separator = "-+-".join("-" * w for w in widths)
    body = "\n".join(format_row(row) for row in rows)
    return "\n".join([header_line, separator, body]) if body else "\n".join(
        [header_line, separator]
    )


def format_category_breakdown(rows: Sequence[CategoryRow]) -> str:
    total = total_expense_value(rows)
    data_rows = [
        [row.name, f"{row.total:,.2f}", str(row.count), f"{category_share(row, total):.1f}%"]
        for row in rank_categories(rows)
    ]
    return _format_table(["Category", "Spent", "Count", "Share"], data_rows)


def format_monthly_rollup(rows: Iterable[MonthlyRow]) -> str:
    data_rows = [
        [row.month_label, f"{row.income:,.2f}", f"{row.expense:,.2f}", f"{row.net:,.2f}"]
        for row in rows
    ]
    return _format_table(["Month", "Income", "Expense", "Net"], data_rows)


def format_dashboard(view: DerivedView, currency: str = DEFAULT_CURRENCY) -> str:
    totals = view.totals
    pace = view.daily_pace
    goal = view.goal_projection

    if goal.months_to_goal == UNREACHABLE:
        timeline = "N/A"
    elif goal.reached:
        timeline = "Goal reached!"
    else:
        timeline = f"{goal.months_to_goal} Months"

    lines = [
        f"Dashboard as of {view.as_of:%Y-%m-%d}",
        f"Income: {format_money(totals.total_income, currency)}",
        f"Expenses: {format_money(totals.total_expense, currency)}",
        f"Balance: {format_money(totals.balance, currency)}",
        f"Savings: {format_money(totals.savings, currency)}",
        "",
        "Daily Budget",
        f"Allowance: {format_money(pace.daily_budget, currency)} "
        f"for {pace.remaining_days} remaining day(s)",
        f"Spent today: {format_money(pace.today_spent, currency)} "
        f"({pace.progress_percent:.0f}%, {pace.status})",
        "",
        "Savings Goal",
        f"Progress: {goal.progress_percent:.1f}% achieved, "
        f"{format_money(goal.remaining, currency)} to go",
        f"Timeline: {timeline}",
        f"Budget used: {view.budget_status.used_percent:.1f}% ({view.budget_status.tier})",
        f"Top category: {view.top_category}",
        "",
        "Categories",
        format_category_breakdown(view.category_breakdown),
        "",
        "Cash Flow",
        format_monthly_rollup(view.monthly_rollup),
    ]

    if view.alerts:
        lines.append("")
        lines.append("Alerts")
        for alert in view.alerts:
            lines.append(f"  [{alert.severity}] {alert.message} ({alert.id})")

    return "\n".join(lines)
