import json

import pytest
from openpyxl import load_workbook

from fintrack.cli import run


@pytest.fixture
def export(tmp_path):
    transactions = tmp_path / "transactions.json"
    transactions.write_text(
        json.dumps(
            [
                {"id": "3", "title": "Groceries", "amount": -500, "category": "Food",
                 "type": "expense", "date": "2025-01-22T19:00:00"},
                {"id": "2", "title": "Dinner", "amount": -2000, "category": "Food",
                 "type": "expense", "date": "2025-01-10T20:00:00"},
                {"id": "1", "title": "Salary", "amount": 5000, "category": "Salary",
                 "type": "income", "date": "2024-12-31T09:00:00"},
            ]
        ),
        encoding="utf-8",
    )
    budget = tmp_path / "budget.json"
    budget.write_text(json.dumps({"monthlyBudget": 1000, "savingsGoal": 7000}), encoding="utf-8")
    return transactions, budget


def test_run_writes_dashboard(export, tmp_path):
    transactions, budget = export
    output = tmp_path / "dashboard.txt"

    text = run([str(transactions), "--budget-file", str(budget), "--as-of", "2025-01-22",
                "--output", str(output)])

    assert output.read_text(encoding="utf-8") == text
    assert "Dashboard as of 2025-01-22" in text
    assert "Balance: INR 3,500.00" in text
    assert "Timeline: N/A" in text
    assert "Top category: Food" in text
    assert "(budget-exceeded)" in text


def test_run_overrides_and_dismissals(export, tmp_path):
    transactions, budget = export
    text = run([str(transactions), "--budget-file", str(budget), "--as-of", "2025-01-22",
                "--monthly-budget", "5000", "--dismiss", "category-concentration:Food",
                "--currency", "USD", "--output", str(tmp_path / "out.txt")])

    assert "Balance: USD 7,500.00" in text
    assert "budget-exceeded" not in text
    assert "category-concentration:Food" not in text


def test_current_month_and_year_labels(export, tmp_path):
    transactions, _ = export
    text = run([str(transactions), "--as-of", "2025-01-22", "--current-month",
                "--year-qualified-months", "--output", str(tmp_path / "out.txt")])

    assert "Jan 2025" in text
    assert "Dec 2024" not in text
    assert "Income: INR 0.00" in text


def test_run_writes_excel_workbook(export, tmp_path):
    transactions, budget = export
    workbook_path = tmp_path / "dashboard.xlsx"

    run([str(transactions), "--budget-file", str(budget), "--as-of", "2025-01-22",
         "--output", str(tmp_path / "out.txt"), "--excel-output", str(workbook_path)])

    wb = load_workbook(workbook_path)
    assert wb.sheetnames == ["Summary", "Categories", "Monthly", "Calendar", "Alerts"]
    assert wb["Categories"]["A2"].value == "Food"
    assert wb["Categories"]["B2"].value == 2500
    assert wb["Calendar"].max_row == 32
    assert wb["Alerts"]["A2"].value == "budget-exceeded"


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit, match="Transactions file not found"):
        run([str(tmp_path / "nope.json")])


def test_negative_budget_is_rejected(export):
    transactions, _ = export
    with pytest.raises(SystemExit):
        run([str(transactions), "--monthly-budget", "-5"])
