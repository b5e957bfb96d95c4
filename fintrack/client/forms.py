"""
client/forms.py
---------------
Client-side form checks, run before anything is sent to the API.

They mirror what the entry forms enforce and are kept separate from the
server schemas; the server still validates every write on its own.
"""

import re

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..models.category import is_valid_category


class FormValidationError(Exception):
    """Raised when a form fails client-side validation."""

    def __init__(self, errors: dict):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


def _check_category(value):
    if not is_valid_category(value):
        raise ValueError("Please select a valid category")
    return value


class TransactionForm(BaseModel):
    amount: float = Field(..., ge=0.01)
    description: str = Field(..., min_length=3, max_length=100)
    date: str = Field(..., min_length=1)
    category: str

    @field_validator("category")
    @classmethod
    def category_in_enumeration(cls, v):
        return _check_category(v)


class BudgetForm(BaseModel):
    category: str
    amount: float = Field(..., ge=0.01)
    month: str

    @field_validator("category")
    @classmethod
    def category_in_enumeration(cls, v):
        return _check_category(v)

    @field_validator("month")
    @classmethod
    def month_format(cls, v):
        if not re.match(r"^\d{4}-\d{2}$", v):
            raise ValueError("Invalid month format")
        return v


_MESSAGES = {
    ("amount", "greater_than_equal"): "Amount must be greater than 0",
    ("description", "string_too_short"): "Description must be at least 3 characters",
    ("description", "string_too_long"): "Description must be less than 100 characters",
    ("date", "string_too_short"): "Date is required",
}


def _field_errors(exc: ValidationError) -> dict:
    errors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "form"
        message = _MESSAGES.get((field, err["type"]), err["msg"].removeprefix("Value error, "))
        errors.setdefault(field, message)
    return errors


def validate_transaction_form(data: dict) -> dict:
    try:
        return TransactionForm.model_validate(data).model_dump()
    except ValidationError as e:
        raise FormValidationError(_field_errors(e)) from e


def validate_budget_form(data: dict) -> dict:
    try:
        return BudgetForm.model_validate(data).model_dump()
    except ValidationError as e:
        raise FormValidationError(_field_errors(e)) from e
