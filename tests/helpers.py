import threading
from urllib.parse import urlsplit

from fintrack import create_app
from fintrack.config import TestingConfig
from fintrack.extensions import db


def make_app():
    return create_app(TestingConfig)


def drop_app(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


class _Response:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body


class FlaskHttp:
    """Stands in for requests.Session, answering from a Flask test client."""

    def __init__(self, app):
        self.test_client = app.test_client()
        self._lock = threading.Lock()

    def request(self, method, url, json=None, params=None):
        path = urlsplit(url).path
        with self._lock:
            resp = self.test_client.open(path, method=method, json=json, query_string=params)
        return _Response(resp.status_code, resp.get_json(silent=True))


def transaction_payload(**overrides):
    payload = {
        "amount": 42.5,
        "description": "Weekly groceries",
        "date": "2024-01-15",
        "category": "Food & Dining",
    }
    payload.update(overrides)
    return payload
