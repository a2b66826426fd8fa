from datetime import datetime

from fintrack.alerts import evaluate_alerts, without_dismissed
from fintrack.config import Thresholds
from fintrack.models import BudgetGoal, Transaction
from fintrack.summary import build_category_breakdown, compute_totals


def make_transaction(amount, category="General"):
    return Transaction(
        id="", title="", amount=amount, category=category, date=datetime(2025, 1, 15)
    )


def alerts_for(transactions, monthly_budget=0.0, savings_goal=0.0, thresholds=None):
    budget_goal = BudgetGoal(monthly_budget=monthly_budget, savings_goal=savings_goal)
    totals = compute_totals(transactions, monthly_budget)
    categories = build_category_breakdown(transactions)
    return evaluate_alerts(totals, categories, transactions, budget_goal, thresholds)


def ids(alerts):
    return [alert.id for alert in alerts]


def test_budget_exceeded_without_spending_over_income():
    transactions = [
        make_transaction(2000),
        make_transaction(-800, "Food"),
        make_transaction(-700, "Rent"),
    ]
    alerts = alerts_for(transactions, monthly_budget=1000)

    assert "budget-exceeded" in ids(alerts)
    assert "spending-exceeds-income" not in ids(alerts)
    exceeded = next(a for a in alerts if a.id == "budget-exceeded")
    assert exceeded.severity == "danger"


def test_budget_exceeded_and_spending_over_income():
    transactions = [
        make_transaction(1000),
        make_transaction(-800, "Food"),
        make_transaction(-700, "Rent"),
    ]
    alerts = alerts_for(transactions, monthly_budget=1000)
    assert ids(alerts)[:2] == ["spending-exceeds-income", "budget-exceeded"]


def test_goal_alerts():
    reached = alerts_for([make_transaction(6000)], savings_goal=5000)
    assert "goal-reached" in ids(reached)
    assert "goal-progress" not in ids(reached)

    progress = alerts_for([make_transaction(2500)], savings_goal=10000)
    alert = next(a for a in progress if a.id == "goal-progress")
    assert alert.message == "You've completed 25% of your savings goal"
    assert alert.severity == "success"


def test_no_goal_alerts_without_goal():
    alerts = alerts_for([make_transaction(2500)], savings_goal=0)
    assert not {"goal-reached", "goal-progress"} & set(ids(alerts))


def test_large_transaction_threshold_is_inclusive():
    alerts = alerts_for([make_transaction(-10000)], monthly_budget=50000)
    large = [a for a in alerts if a.id == "large-transaction"]
    assert len(large) == 1
    assert large[0].message == "Large transaction detected: 10,000.00"

    assert "large-transaction" not in ids(alerts_for([make_transaction(-9999)]))


def test_single_alert_for_several_large_transactions():
    alerts = alerts_for([make_transaction(15000), make_transaction(-20000)])
    large = [a for a in alerts if a.id == "large-transaction"]
    assert len(large) == 1
    assert "15,000.00" in large[0].message


def test_category_concentration():
    transactions = [
        make_transaction(1000),
        make_transaction(-600, "Food"),
        make_transaction(-400, "Rent"),
    ]
    alerts = alerts_for(transactions, monthly_budget=5000)
    assert ids(alerts) == ["category-concentration:Food"]
    assert alerts[0].message == "High spending detected in Food"

    even = [make_transaction(1000), make_transaction(-500, "Food"), make_transaction(-500, "Rent")]
    assert alerts_for(even, monthly_budget=5000) == []


def test_thresholds_are_configurable():
    custom = Thresholds(large_transaction=500, category_concentration=0.9)
    alerts = alerts_for([make_transaction(-600, "Food")], monthly_budget=5000, thresholds=custom)
    assert ids(alerts) == ["spending-exceeds-income", "large-transaction", "category-concentration:Food"]


def test_empty_snapshot_raises_no_alerts():
    assert alerts_for([]) == []


def test_dismissed_alerts_are_filtered():
    transactions = [make_transaction(-800, "Food"), make_transaction(-700, "Rent")]
    alerts = alerts_for(transactions, monthly_budget=1000)
    remaining = without_dismissed(alerts, {"budget-exceeded"})

    assert "budget-exceeded" not in ids(remaining)
    assert "spending-exceeds-income" in ids(remaining)
    assert ids(alerts_for(transactions, monthly_budget=1000)) == ids(alerts)
