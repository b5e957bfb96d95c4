"""
client/session.py
-----------------
Session-level snapshot of transactions and budgets.

Responsibilities:
    - Load both collections together for the selected month.
    - Replace both at once, or neither, when a load finishes.
    - Ignore loads that were overtaken by a newer one.
    - Resynchronize after every create, update or delete.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from ..schemas import is_month_key
from ..utils.logger import get_logger
from . import aggregation
from .api import ApiRequestError
from .forms import validate_transaction_form, validate_budget_form

logger = get_logger(__name__)


class DataSession:
    """Holds the data one user session works with."""

    def __init__(self, client, selected_month=None):
        self.client = client
        self.selected_month = selected_month or aggregation.current_month()
        self.transactions: list[dict] = []
        self.budgets: list[dict] = []
        self.is_loading = False
        self.error: str | None = None
        self._lock = threading.Lock()
        self._generation = 0

    @classmethod
    def open(cls, client, selected_month=None) -> "DataSession":
        """
        Start a session and load its data straight away.

        This is the usual entry point. A failed first load is reported
        through ``error``, not raised, and ``refresh()`` retries it.
        """
        session = cls(client, selected_month)
        session.refresh()
        return session

    # ── Loading ─────────────────────────────────────────────
    def refresh(self) -> bool:
        """
        Fetch transactions and budgets concurrently and swap them in.

        Returns:
            True when this call's results were applied. False when the load
            failed, or when a newer load started meanwhile and this one's
            results were dropped.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            month = self.selected_month
            self.is_loading = True
            self.error = None

        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                txn_future = pool.submit(self.client.list_transactions)
                budget_future = pool.submit(self.client.list_budgets, month)
                transactions = txn_future.result()
                budgets = budget_future.result()
        except ApiRequestError as e:
            return self._apply_failure(generation, e.message)

        with self._lock:
            if generation != self._generation:
                logger.info("Discarding stale data for %s", month)
                return False
            self.transactions = transactions
            self.budgets = budgets
            self.is_loading = False
        return True

    def _apply_failure(self, generation: int, message: str) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            logger.error("Data fetch error: %s", message)
            self.transactions = []
            self.budgets = []
            self.error = message or "Failed to load data"
            self.is_loading = False
        return False

    def set_selected_month(self, month: str) -> bool:
        if not is_month_key(month):
            raise ValueError("Month must be in YYYY-MM format")
        with self._lock:
            self.selected_month = month
        return self.refresh()

    # ── Mutations ───────────────────────────────────────────
    def add_transaction(self, data: dict) -> dict:
        created = self.client.create_transaction(validate_transaction_form(data))
        self.refresh()
        return created

    def update_transaction(self, txn_id: str, data: dict) -> dict:
        updated = self.client.update_transaction(txn_id, validate_transaction_form(data))
        self.refresh()
        return updated

    def delete_transaction(self, txn_id: str) -> dict:
        result = self.client.delete_transaction(txn_id)
        self.refresh()
        return result

    def add_budget(self, data: dict) -> dict:
        created = self.client.create_budget(validate_budget_form(data))
        self.refresh()
        return created

    # ── Views ───────────────────────────────────────────────
    def summary(self) -> dict:
        return aggregation.dashboard_summary(self.transactions)

    def monthly_totals(self) -> list[dict]:
        return aggregation.monthly_totals(self.transactions)

    def category_totals(self) -> list[dict]:
        return aggregation.category_totals(self.transactions)

    def budget_comparison(self) -> list[dict]:
        return aggregation.budget_vs_actual(self.transactions, self.budgets, self.selected_month)
