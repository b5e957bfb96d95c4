from .category import TRANSACTION_CATEGORIES, DEFAULT_CATEGORY, is_valid_category
from .transaction import Transaction
from .budget import Budget
from .base import get_or_none

__all__ = [
    "TRANSACTION_CATEGORIES",
    "DEFAULT_CATEGORY",
    "is_valid_category",
    "Transaction",
    "Budget",
    "get_or_none",
]
