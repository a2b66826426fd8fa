"""Data models used by the FinTrack engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

DEFAULT_CATEGORY = "General"

INCOME = "income"
EXPENSE = "expense"
NEUTRAL = "neutral"


def normalize_category(value: object) -> str:
    """Return ``value`` as a category label, falling back to ``"General"``."""

    if value is None:
        return DEFAULT_CATEGORY
    text = str(value).strip()
    return text or DEFAULT_CATEGORY


@dataclass(frozen=True)
class Transaction:
    """A single ledger entry as returned by ``GET /transactions``.

    ``type`` is kept only because the backend stores it; every aggregation
    reads the sign of ``amount`` instead.
    """

    id: str
    title: str
    amount: float
    category: str = DEFAULT_CATEGORY
    type: str = ""
    date: Optional[datetime] = None

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def kind(self) -> str:
        if self.is_income:
            return INCOME
        if self.is_expense:
            return EXPENSE
        return NEUTRAL

    @property
    def day(self) -> Optional[date]:
        """Calendar day of the transaction, or ``None`` when undated."""

        return self.date.date() if self.date is not None else None


@dataclass(frozen=True)
class BudgetGoal:
    """Per-user budget record; zeros mirror the backend's default response."""

    monthly_budget: float = 0.0
    savings_goal: float = 0.0


def parse_budget_amount(value: object, label: str = "budget amount") -> float:
    """Validate a budget or goal entered by the user.

    Blank, non-numeric, NaN and negative values are rejected.
    """

    try:
        amount = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(f"Please enter a valid {label}") from None
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        raise ValueError(f"Please enter a valid {label}")
    return amount


def new_transaction(
    title: str,
    amount: object,
    kind: str,
    category: str | None = None,
    when: datetime | None = None,
    id: str = "",
) -> Transaction:
    """Build a transaction from form input, signing ``amount`` from ``kind``."""

    if kind not in (INCOME, EXPENSE):
        raise ValueError(f"Unknown transaction type: {kind!r}")
    try:
        value = abs(float(str(amount).strip()))
    except (TypeError, ValueError):
        raise ValueError("Missing fields") from None
    if not (title or "").strip() or not value or math.isnan(value):
        raise ValueError("Missing fields")
    return Transaction(
        id=id,
        title=title.strip(),
        amount=-value if kind == EXPENSE else value,
        category=normalize_category(category),
        type=kind,
        date=when or datetime.now(),
    )
