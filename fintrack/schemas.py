"""
Request schemas for the JSON API.

These are the authoritative server-side checks; every write goes through one
of them before it reaches the database.
"""

import math
import re
from datetime import datetime, timezone

from dateutil.parser import isoparse
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models.category import TRANSACTION_CATEGORIES, DEFAULT_CATEGORY, is_valid_category

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def is_month_key(value) -> bool:
    return isinstance(value, str) and bool(MONTH_PATTERN.match(value))


def to_amount(value) -> float:
    # JSON numbers only: reject booleans and numeric strings
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Amount must be a number")
    try:
        amount = float(value)
    except OverflowError:
        raise ValueError("Amount is too large")
    if not math.isfinite(amount):
        raise ValueError("Amount must be a finite number")
    return amount


def _check_category(value):
    if not is_valid_category(value):
        raise ValueError(f"Category must be one of: {', '.join(TRANSACTION_CATEGORIES)}")
    return value


class TransactionSchema(BaseModel):
    """Transaction fields as stored"""
    amount: float = Field(..., gt=0, description="Expense amount")
    description: str = Field(..., min_length=3, max_length=100)
    date: datetime = Field(..., description="When the expense happened")
    category: str = Field(DEFAULT_CATEGORY)

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_number(cls, v):
        return to_amount(v)

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        if not isinstance(v, str):
            raise ValueError("Description must be a string")
        return v.strip()

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        if isinstance(v, datetime):
            parsed = v
        elif isinstance(v, str):
            try:
                parsed = isoparse(v)
            except (ValueError, OverflowError):
                raise ValueError("Date must be an ISO-8601 date or datetime")
        else:
            raise ValueError("Date must be an ISO-8601 date or datetime")
        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError:
                raise ValueError("Date is out of range")
        return parsed

    @field_validator("category")
    @classmethod
    def category_in_enumeration(cls, v):
        return _check_category(v)


class BudgetSchema(BaseModel):
    """Monthly budget per category"""
    category: str = Field(...)
    amount: float = Field(..., ge=0, description="Budgeted amount for the month")
    month: str = Field(..., description="Budget month, e.g. 2024-01")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_number(cls, v):
        return to_amount(v)

    @field_validator("category")
    @classmethod
    def category_in_enumeration(cls, v):
        return _check_category(v)

    @field_validator("month")
    @classmethod
    def month_format(cls, v):
        if not is_month_key(v) or not 1 <= int(v[5:]) <= 12:
            raise ValueError("Month must be in YYYY-MM format")
        return v


def format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "body"
        message = err.get("msg", "invalid value")
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        parts.append(f"{field}: {message}")
    return "; ".join(parts)
