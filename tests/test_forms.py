import unittest

from fintrack.client.forms import (
    FormValidationError, validate_budget_form, validate_transaction_form,
)


class TestClientForms(unittest.TestCase):
    def test_valid_transaction_form(self):
        data = validate_transaction_form(
            {"amount": "19.99", "description": "Taxi", "date": "2024-01-02", "category": "Transportation"}
        )
        self.assertEqual(data["amount"], 19.99)

    def test_transaction_form_messages(self):
        with self.assertRaises(FormValidationError) as ctx:
            validate_transaction_form(
                {"amount": 0, "description": "ab", "date": "", "category": "Snacks"}
            )
        errors = ctx.exception.errors
        self.assertEqual(errors["amount"], "Amount must be greater than 0")
        self.assertEqual(errors["description"], "Description must be at least 3 characters")
        self.assertEqual(errors["date"], "Date is required")
        self.assertEqual(errors["category"], "Please select a valid category")

    def test_long_description(self):
        with self.assertRaises(FormValidationError) as ctx:
            validate_transaction_form(
                {"amount": 1, "description": "x" * 101, "date": "2024-01-02", "category": "Other"}
            )
        self.assertEqual(ctx.exception.errors["description"], "Description must be less than 100 characters")

    def test_budget_form(self):
        data = validate_budget_form({"category": "Housing", "amount": 500, "month": "2024-01"})
        self.assertEqual(data["month"], "2024-01")

        with self.assertRaises(FormValidationError) as ctx:
            validate_budget_form({"category": "Housing", "amount": 500, "month": "2024-1"})
        self.assertEqual(ctx.exception.errors, {"month": "Invalid month format"})


if __name__ == "__main__":
    unittest.main()
