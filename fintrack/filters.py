"""Search, filter and sort helpers for the transactions list."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Tuple

from .models import EXPENSE, INCOME, Transaction
from .summary import Totals, compute_totals

KINDS = ("all", INCOME, EXPENSE)
SORT_KEYS = ("date", "amount")


def filter_transactions(
    transactions: Iterable[Transaction],
    search: str = "",
    kind: str = "all",
    category: str = "all",
    sort_by: str = "date",
) -> List[Transaction]:
    """Return the matching transactions, newest (or largest) first."""

    if kind not in KINDS:
        raise ValueError(f"Unknown transaction type filter: {kind!r}")
    if sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_by!r}")

    data = list(transactions)
    needle = search.strip().lower()
    if needle:
        data = [tx for tx in data if needle in (tx.title or "").lower()]
    if kind != "all":
        data = [tx for tx in data if tx.kind == kind]
    if category != "all":
        data = [tx for tx in data if tx.category == category]

    if sort_by == "amount":
        data.sort(key=lambda tx: abs(tx.amount), reverse=True)
    else:
        # Undated entries sort after everything else.
        data.sort(key=lambda tx: (tx.date is not None, tx.date or datetime.min), reverse=True)
    return data


def filter_with_totals(
    transactions: Iterable[Transaction],
    search: str = "",
    kind: str = "all",
    category: str = "all",
    sort_by: str = "date",
) -> Tuple[List[Transaction], Totals]:
    """Filter like ``filter_transactions`` and total income and expenses over the result."""

    data = filter_transactions(transactions, search, kind, category, sort_by)
    return data, compute_totals(data)


def categories_in(transactions: Iterable[Transaction]) -> List[str]:
    seen: List[str] = []
    for tx in transactions:
        if tx.category not in seen:
            seen.append(tx.category)
    return seen
