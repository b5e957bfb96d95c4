from .api import FinanceApiClient, ApiRequestError
from .forms import FormValidationError, validate_transaction_form, validate_budget_form
from .session import DataSession

__all__ = [
    "FinanceApiClient",
    "ApiRequestError",
    "FormValidationError",
    "validate_transaction_form",
    "validate_budget_form",
    "DataSession",
]
