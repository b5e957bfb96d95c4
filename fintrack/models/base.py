import uuid
from datetime import datetime, timezone
from ..extensions import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id():
    return uuid.uuid4().hex


def isoformat(value):
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds") + "Z"


def get_or_none(model, raw_id):
    """Look up a record by its string id; malformed ids are treated as missing."""
    try:
        key = uuid.UUID(str(raw_id)).hex
    except ValueError:
        return None
    return db.session.get(model, key)
