"""Helpers for loading a snapshot exported from the FinTrack API."""

from __future__ import annotations

import csv
import json
import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping

from .models import BudgetGoal, Transaction, normalize_category, parse_budget_amount

logger = logging.getLogger(__name__)


CSV_HEADER = ["id", "title", "amount", "category", "type", "date"]


def parse_date(value: Any) -> datetime | None:
    """Parse an ISO-8601 date or date-time into local wall-clock time.

    Offset-aware values (``...Z`` included) are converted to the local
    timezone and returned naive. Anything unparseable gives ``None``.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _parse_amount(value: Any) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    amount = float(value)
    if not math.isfinite(amount):
        raise ValueError(f"amount must be a finite number, got {value!r}")
    return amount


def transaction_from_record(record: Mapping[str, Any]) -> Transaction:
    """Build a ``Transaction`` from one object of ``GET /transactions``.

    Raises ``ValueError`` when ``amount`` is present but not a finite number.
    """

    return Transaction(
        id=str(record.get("id") or ""),
        title=str(record.get("title") or ""),
        amount=_parse_amount(record.get("amount")),
        category=normalize_category(record.get("category")),
        type=str(record.get("type") or ""),
        date=parse_date(record.get("date")),
    )


def transactions_from_records(records: Iterable[Mapping[str, Any]]) -> List[Transaction]:
    transactions: List[Transaction] = []
    for index, record in enumerate(records):
        try:
            transactions.append(transaction_from_record(record))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping transaction #%d (%s): %s", index, record.get("id"), exc)
    return transactions


def _iter_clean_rows(path: Path) -> Iterator[List[str]]:
    with path.open(newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            if not any(field.strip() for field in row):
                continue
            yield row


def _load_csv(path: Path) -> List[Transaction]:
    rows = list(_iter_clean_rows(path))
    if not rows:
        return []

    header, *data_rows = rows
    if [column.strip().lower() for column in header] != CSV_HEADER:
        raise ValueError("Unexpected CSV header")
    return transactions_from_records(dict(zip(CSV_HEADER, raw)) for raw in data_rows)


def _load_json(path: Path) -> List[Transaction]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, Mapping):
        payload = payload.get("transactions", [])
    if not isinstance(payload, list):
        raise ValueError("Expected a JSON array of transactions")
    return transactions_from_records(item for item in payload if isinstance(item, Mapping))


def load_transactions(path: str | Path) -> List[Transaction]:
    """Load transactions from a JSON or CSV export of ``GET /transactions``."""

    path = Path(path)
    if path.suffix.lower() == ".csv":
        transactions = _load_csv(path)
    else:
        transactions = _load_json(path)
    logger.debug("Loaded %d transactions from %s", len(transactions), path)
    return transactions


def budget_from_record(record: Mapping[str, Any] | None) -> BudgetGoal:
    record = record or {}
    return BudgetGoal(
        monthly_budget=parse_budget_amount(record.get("monthlyBudget") or 0, "budget amount"),
        savings_goal=parse_budget_amount(record.get("savingsGoal") or 0, "savings goal"),
    )


def load_budget(path: str | Path | None) -> BudgetGoal:
    """Load a ``GET /budget`` body; a missing file means no budget yet."""

    if path is None:
        return BudgetGoal()
    path = Path(path)
    if not path.exists():
        logger.info("No budget file at %s, using zero defaults", path)
        return BudgetGoal()
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, Mapping):
        raise ValueError("Expected a JSON object with monthlyBudget and savingsGoal")
    return budget_from_record(payload)


def filter_by_date(
    transactions: Iterable[Transaction], start: date, end: date
) -> List[Transaction]:
    """Return dated transactions that occurred between ``start`` and ``end``."""

    return [t for t in transactions if t.day is not None and start <= t.day <= end]
