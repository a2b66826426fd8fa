from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .config import DEFAULT_CURRENCY
from .engine import DerivedView
from .summary import category_share, rank_categories, total_expense_value


def _write_rows(ws, headers: Sequence[str], rows: Iterable[Sequence[object]], header_font=None) -> None:
    ws.append(list(headers))
    if header_font is not None:
        for cell in ws[1]:
            cell.font = header_font
    for row in rows:
        ws.append(list(row))
    for idx, header in enumerate(headers, start=1):
        width = max(
            [len(str(header))]
            + [len(str(ws.cell(row=r, column=idx).value or "")) for r in range(2, ws.max_row + 1)]
        )
        ws.column_dimensions[ws.cell(row=1, column=idx).column_letter].width = width + 2


def write_dashboard_workbook(
    view: DerivedView,
    output_path: Path,
    currency: str = DEFAULT_CURRENCY,
) -> None:
    """
    Save the dashboard to ``output_path`` with one sheet per view:
    Summary, Categories, Monthly, Calendar and Alerts.
    """

    try:
        from openpyxl import Workbook
        from openpyxl.styles import Font
    except Exception as exc:  # pragma: no cover - dependency guidance
        raise SystemExit(
            "openpyxl is required for Excel output. Install with: pip install openpyxl"
        ) from exc

    wb = Workbook()
    bold = Font(bold=True)
    summary = wb.active
    summary.title = "Summary"
    totals = view.totals
    pace = view.daily_pace
    goal = view.goal_projection
    _write_rows(
        summary,
        ["Metric", "Value"],
        [
            ["As of", view.as_of],
            ["Currency", currency],
            ["Income", round(totals.total_income, 2)],
            ["Expenses", round(totals.total_expense, 2)],
            ["Balance", round(totals.balance, 2)],
            ["Savings", round(totals.savings, 2)],
            ["Daily budget", round(pace.daily_budget, 2)],
            ["Spent today", round(pace.today_spent, 2)],
            ["Daily pace", pace.status],
            ["Goal progress %", round(goal.progress_percent, 1)],
            ["Months to goal", goal.months_to_goal],
            ["Budget used %", round(view.budget_status.used_percent, 1)],
            ["Top category", view.top_category],
        ],
        header_font=bold,
    )

    total = total_expense_value(view.category_breakdown)
    _write_rows(
        wb.create_sheet("Categories"),
        ["Category", "Spent", "Count", "Share %"],
        [
            [row.name, round(row.total, 2), row.count, round(category_share(row, total), 1)]
            for row in rank_categories(view.category_breakdown)
        ],
        header_font=bold,
    )

    _write_rows(
        wb.create_sheet("Monthly"),
        ["Month", "Income", "Expense", "Net"],
        [
            [row.month_label, round(row.income, 2), round(row.expense, 2), round(row.net, 2)]
            for row in view.monthly_rollup
        ],
        header_font=bold,
    )

    _write_rows(
        wb.create_sheet("Calendar"),
        ["Date", "Spent", "Transactions", "Status"],
        [
            [day.day, round(day.total_spent, 2), len(day.transactions), day.status]
            for day in view.calendar
        ],
        header_font=bold,
    )

    _write_rows(
        wb.create_sheet("Alerts"),
        ["Id", "Severity", "Message"],
        [[alert.id, alert.severity, alert.message] for alert in view.alerts],
        header_font=bold,
    )

    wb.save(str(output_path))
