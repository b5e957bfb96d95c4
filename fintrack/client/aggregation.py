"""
client/aggregation.py
---------------------
Derived views over the loaded transactions and budgets.

Every function here is pure: it takes the records as returned by the API
(plain dicts) and recomputes its result from scratch. Nothing is cached or
persisted.
"""

from collections import defaultdict
from datetime import date, datetime, timezone

from dateutil.parser import isoparse

from ..models.category import TRANSACTION_CATEGORIES


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        parsed = isoparse(value)
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            # past the datetime range in UTC; keep the wall-clock value
            parsed = parsed.replace(tzinfo=None)
    return parsed


def month_key(value) -> str:
    """Return the ``YYYY-MM`` key of a date string, date or datetime."""
    return _as_datetime(value).strftime("%Y-%m")


def current_month() -> str:
    return date.today().strftime("%Y-%m")


def total_expenses(transactions) -> float:
    """Sum of every amount, all time."""
    return sum(t["amount"] for t in transactions)


def recent_transactions(transactions, limit: int = 5) -> list[dict]:
    """Most recently dated transactions first."""
    ordered = sorted(transactions, key=lambda t: _as_datetime(t["date"]), reverse=True)
    return ordered[:limit]


def monthly_totals(transactions) -> list[dict]:
    """
    Totals per calendar month, oldest month first.

    Returns:
        A list of ``{"month": "Jan 2024", "total": 10.0}`` rows.
    """
    totals = defaultdict(float)
    for t in transactions:
        when = _as_datetime(t["date"])
        totals[(when.year, when.month)] += t["amount"]

    return [
        {"month": date(year, month, 1).strftime("%b %Y"), "total": total}
        for (year, month), total in sorted(totals.items())
    ]


def category_totals(transactions) -> list[dict]:
    """
    Totals per category, largest first.

    Categories without any transaction are left out rather than reported as 0.
    """
    totals = defaultdict(float)
    for t in transactions:
        totals[t["category"]] += t["amount"]

    rows = [{"name": name, "value": value} for name, value in totals.items()]
    rows.sort(key=lambda r: r["value"], reverse=True)
    return rows


def budget_vs_actual(transactions, budgets, selected_month: str) -> list[dict]:
    """
    Budgeted and actual spending for the selected month, one row per category.

    Always yields one row for each of the fixed categories, in their canonical
    order, with 0 where there is no budget or no spending.
    """
    budget_map = {
        b["category"]: b["amount"]
        for b in budgets
        if b.get("month", selected_month) == selected_month
    }

    actual = defaultdict(float)
    for t in transactions:
        if month_key(t["date"]) == selected_month:
            actual[t["category"]] += t["amount"]

    return [
        {
            "category": category,
            "budget": budget_map.get(category, 0),
            "actual": actual.get(category, 0),
        }
        for category in TRANSACTION_CATEGORIES
    ]


def dashboard_summary(transactions) -> dict:
    # Summary card figures: five most recent are kept, three are shown
    recent = recent_transactions(transactions, limit=5)
    return {
        "totalExpenses": total_expenses(transactions),
        "recentTransactions": recent[:3],
        "transactionCount": len(transactions),
    }
