# Fixed category set shared by transactions and budgets.
# Order matters: it drives form defaults and the budget comparison rows.
TRANSACTION_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Housing",
    "Utilities",
    "Shopping",
    "Entertainment",
    "Healthcare",
    "Education",
    "Personal Care",
    "Other",
)

DEFAULT_CATEGORY = "Other"


def is_valid_category(value) -> bool:
    return value in TRANSACTION_CATEGORIES
