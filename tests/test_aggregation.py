import unittest

from fintrack.client.aggregation import (
    budget_vs_actual, category_totals, dashboard_summary, month_key,
    monthly_totals, recent_transactions, total_expenses,
)
from fintrack.models import TRANSACTION_CATEGORIES


def txn(amount, date, category="Other", description="Something"):
    return {"amount": amount, "date": date, "category": category, "description": description}


class TestAggregation(unittest.TestCase):
    def test_total_expenses_covers_all_time(self):
        data = [txn(10, "2023-05-01"), txn(2.5, "2024-01-01"), txn(7.5, "2024-02-01")]
        self.assertEqual(total_expenses(data), 20)
        self.assertEqual(total_expenses([]), 0)

    def test_monthly_totals_are_chronological(self):
        data = [txn(20, "2024-02-01T00:00:00.000Z"), txn(10, "2024-01-15T00:00:00.000Z")]
        self.assertEqual(
            monthly_totals(data),
            [{"month": "Jan 2024", "total": 10}, {"month": "Feb 2024", "total": 20}],
        )

    def test_monthly_totals_orders_across_years(self):
        data = [txn(1, "2024-01-03"), txn(2, "2023-12-30"), txn(3, "2024-01-20")]
        self.assertEqual(
            monthly_totals(data),
            [{"month": "Dec 2023", "total": 2}, {"month": "Jan 2024", "total": 4}],
        )

    def test_category_totals_sorted_and_sparse(self):
        data = [
            txn(5, "2024-01-01", "Shopping"),
            txn(30, "2024-01-02", "Housing"),
            txn(10, "2024-01-03", "Shopping"),
        ]
        self.assertEqual(
            category_totals(data),
            [{"name": "Housing", "value": 30}, {"name": "Shopping", "value": 15}],
        )

    def test_budget_vs_actual_always_has_every_category(self):
        budgets = [{"category": "Housing", "amount": 500, "month": "2024-01"}]
        data = [
            txn(120, "2024-01-10", "Housing"),
            txn(80, "2024-02-01", "Housing"),
        ]
        rows = budget_vs_actual(data, budgets, "2024-01")

        self.assertEqual(len(rows), 10)
        self.assertEqual([r["category"] for r in rows], list(TRANSACTION_CATEGORIES))
        by_category = {r["category"]: r for r in rows}
        self.assertEqual(by_category["Housing"], {"category": "Housing", "budget": 500, "actual": 120})
        for category, row in by_category.items():
            if category != "Housing":
                self.assertEqual((row["budget"], row["actual"]), (0, 0))

    def test_budget_vs_actual_ignores_other_months_budgets(self):
        budgets = [{"category": "Utilities", "amount": 90, "month": "2024-02"}]
        rows = budget_vs_actual([], budgets, "2024-01")
        self.assertTrue(all(r["budget"] == 0 for r in rows))

    def test_recent_transactions(self):
        data = [txn(i, f"2024-01-{i + 1:02d}", description=f"t{i}") for i in range(8)]
        recent = recent_transactions(data)
        self.assertEqual([t["description"] for t in recent], ["t7", "t6", "t5", "t4", "t3"])

    def test_dashboard_summary(self):
        data = [txn(i, f"2024-03-{i + 1:02d}", description=f"t{i}") for i in range(1, 7)]
        summary = dashboard_summary(data)
        self.assertEqual(summary["totalExpenses"], 21)
        self.assertEqual(summary["transactionCount"], 6)
        self.assertEqual([t["description"] for t in summary["recentTransactions"]], ["t6", "t5", "t4"])

    def test_month_key_normalizes_to_utc(self):
        self.assertEqual(month_key("2024-01-31T23:30:00-02:00"), "2024-02")
        self.assertEqual(month_key("2024-01-31"), "2024-01")

    def test_month_key_at_the_end_of_the_calendar(self):
        self.assertEqual(month_key("9999-12-31T23:00:00-05:00"), "9999-12")


if __name__ == "__main__":
    unittest.main()
