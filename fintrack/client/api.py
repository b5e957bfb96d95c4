"""
client/api.py
-------------
Thin HTTP client for the finance tracker JSON API.
"""

from typing import Optional

import requests

from ..config import API_URL
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ApiRequestError(Exception):
    """A request that did not come back with a 2xx answer."""

    def __init__(self, status_code: Optional[int], message: str, details: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(f"{message} ({details})" if details else message)


class FinanceApiClient:
    """
    Calls the transactions and budgets endpoints.

    No retries and no explicit timeout: a request either answers or the
    underlying transport gives up on its own.
    """

    def __init__(self, base_url: Optional[str] = None, http=None):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.http = http or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise ApiRequestError(None, f"Could not reach the API for {method} {path}", str(e)) from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise ApiRequestError(
                response.status_code,
                body.get("error") or f"{method} {path} returned {response.status_code}",
                body.get("details"),
            )
        try:
            return response.json()
        except ValueError as e:
            raise ApiRequestError(response.status_code, f"{method} {path} returned invalid JSON", str(e)) from e

    # ── Transactions ───────────────────────────────────────
    def list_transactions(self) -> list[dict]:
        return self._request("GET", "/transactions")

    def get_transaction(self, txn_id: str) -> dict:
        return self._request("GET", f"/transactions/{txn_id}")

    def create_transaction(self, data: dict) -> dict:
        return self._request("POST", "/transactions", json=data)

    def update_transaction(self, txn_id: str, data: dict) -> dict:
        return self._request("PUT", f"/transactions/{txn_id}", json=data)

    def delete_transaction(self, txn_id: str) -> dict:
        return self._request("DELETE", f"/transactions/{txn_id}")

    # ── Budgets ────────────────────────────────────────────
    def list_budgets(self, month: Optional[str] = None) -> list[dict]:
        params = {"month": month} if month else None
        return self._request("GET", "/budgets", params=params)

    def create_budget(self, data: dict) -> dict:
        return self._request("POST", "/budgets", json=data)
