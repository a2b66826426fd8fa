"""Command line entry point for printing the FinTrack dashboard."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Iterable

from .alerts import without_dismissed
from .config import DEFAULT_CURRENCY, Thresholds
from .engine import build_dashboard
from .excel import write_dashboard_workbook
from .formatting import format_dashboard
from .loader import filter_by_date, load_budget, load_transactions
from .models import parse_budget_amount
from .periods import month_range

logger = logging.getLogger(__name__)


def _non_negative(label: str):
    def parse(value: str) -> float:
        try:
            return parse_budget_amount(value, label)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    return parse


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Summarise a FinTrack transactions export into dashboard totals, "
            "category and monthly breakdowns, daily pace, goal projection and alerts."
        )
    )
    parser.add_argument(
        "transactions_path",
        nargs="?",
        default="transactions.json",
        help="Path to a GET /transactions export (.json or .csv).",
    )
    parser.add_argument(
        "--budget-file",
        type=Path,
        help="Path to a GET /budget export with monthlyBudget and savingsGoal.",
    )
    parser.add_argument(
        "--monthly-budget",
        type=_non_negative("budget amount"),
        help="Override the monthly budget from the budget file.",
    )
    parser.add_argument(
        "--savings-goal",
        type=_non_negative("savings goal"),
        help="Override the savings goal from the budget file.",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        help="Override today's date used for daily pace and the calendar.",
    )
    parser.add_argument(
        "--current-month",
        action="store_true",
        help="Only use transactions dated in the month of --as-of (or today).",
    )
    parser.add_argument(
        "--year-qualified-months",
        action="store_true",
        help="Label monthly buckets with the year so different years don't merge.",
    )
    parser.add_argument(
        "--dismiss",
        action="append",
        default=[],
        metavar="ALERT_ID",
        help="Hide an alert by id. May be given more than once.",
    )
    parser.add_argument(
        "--currency",
        default=DEFAULT_CURRENCY,
        help=f"Currency label used for display (default: {DEFAULT_CURRENCY}).",
    )
    parser.add_argument(
        "--large-transaction-threshold",
        type=_non_negative("threshold"),
        help="Absolute amount at which a transaction raises an alert.",
    )
    parser.add_argument(
        "--concentration-threshold",
        type=_non_negative("threshold"),
        help="Share of spending (0-1) above which a category raises an alert.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the dashboard to the specified file instead of printing to stdout.",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Also write the dashboard to an Excel workbook.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information.",
    )
    return parser.parse_args(argv)


def _thresholds(args: argparse.Namespace) -> Thresholds:
    thresholds = Thresholds()
    if args.large_transaction_threshold is not None:
        thresholds = replace(thresholds, large_transaction=args.large_transaction_threshold)
    if args.concentration_threshold is not None:
        thresholds = replace(thresholds, category_concentration=args.concentration_threshold)
    return thresholds


def run(argv: Iterable[str] | None = None) -> str:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    transactions_path = Path(args.transactions_path)
    if not transactions_path.exists():
        raise SystemExit(f"Transactions file not found: {transactions_path}")

    try:
        transactions = load_transactions(transactions_path)
        budget_goal = load_budget(args.budget_file)
    except ValueError as exc:
        raise SystemExit(f"Could not read export: {exc}")

    if args.monthly_budget is not None:
        budget_goal = replace(budget_goal, monthly_budget=args.monthly_budget)
    if args.savings_goal is not None:
        budget_goal = replace(budget_goal, savings_goal=args.savings_goal)

    today = args.as_of or date.today()
    if args.current_month:
        start, end = month_range(today)
        transactions = filter_by_date(transactions, start, end)
        logger.debug("Restricted snapshot to %s..%s: %d transactions", start, end, len(transactions))

    view = build_dashboard(
        transactions,
        budget_goal,
        today=today,
        thresholds=_thresholds(args),
        year_qualified_months=args.year_qualified_months,
    )
    if args.dismiss:
        view = replace(view, alerts=tuple(without_dismissed(view.alerts, set(args.dismiss))))

    output_text = format_dashboard(view, args.currency) + "\n"

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    if args.excel_output:
        try:
            write_dashboard_workbook(view, args.excel_output, args.currency)
        except OSError as exc:
            raise SystemExit(f"Failed to write Excel workbook: {exc}")
    return output_text


def main() -> None:
    run()


if __name__ == "__main__":
    main()
