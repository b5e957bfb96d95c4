from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from ...extensions import db
from ...errors import error_response
from ...models import Transaction, get_or_none
from ...models.base import utcnow
from ...schemas import TransactionSchema, format_validation_error
from ...utils.logger import get_logger

transactions_bp = Blueprint("transactions", __name__, url_prefix="/transactions")
logger = get_logger(__name__)

REQUIRED_FIELDS = ("amount", "description", "date", "category")
UPDATABLE_FIELDS = ("amount", "description", "date", "category")


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@transactions_bp.route("", methods=["GET"])
def list_transactions():
    try:
        rows = Transaction.query.order_by(Transaction.date.desc()).all()
    except SQLAlchemyError as e:
        logger.exception("Transaction fetch error")
        return error_response("Failed to fetch transactions", 500, str(e))
    return jsonify([t.to_dict() for t in rows])


@transactions_bp.route("", methods=["POST"])
def create_transaction():
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    # Validate required fields
    if not all(data.get(f) for f in REQUIRED_FIELDS):
        return error_response("Missing required fields", 400)

    try:
        fields = TransactionSchema.model_validate({f: data[f] for f in REQUIRED_FIELDS})
    except ValidationError as e:
        return error_response("Invalid transaction data", 400, format_validation_error(e))

    try:
        txn = Transaction(**fields.model_dump())
        db.session.add(txn)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Transaction creation error")
        return error_response("Failed to create transaction", 500, str(e))

    logger.info("Created transaction %s (%s, %.2f)", txn.id, txn.category, txn.amount)
    return jsonify(txn.to_dict()), 201


@transactions_bp.route("/<txn_id>", methods=["GET"])
def get_transaction(txn_id):
    try:
        txn = get_or_none(Transaction, txn_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch transaction %s", txn_id)
        return error_response("Failed to fetch transaction", 500, str(e))
    if txn is None:
        return error_response("Transaction not found", 404)
    return jsonify(txn.to_dict())


@transactions_bp.route("/<txn_id>", methods=["PUT"])
def update_transaction(txn_id):
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    try:
        txn = get_or_none(Transaction, txn_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch transaction %s", txn_id)
        return error_response("Failed to update transaction", 500, str(e))
    if txn is None:
        return error_response("Transaction not found", 404)

    # Merge over the stored values and re-validate the whole record
    merged = {f: getattr(txn, f) for f in UPDATABLE_FIELDS}
    merged.update({f: data[f] for f in UPDATABLE_FIELDS if f in data})
    try:
        fields = TransactionSchema.model_validate(merged)
    except ValidationError as e:
        return error_response("Invalid transaction data", 400, format_validation_error(e))

    try:
        for name, value in fields.model_dump().items():
            setattr(txn, name, value)
        # refreshed even when no column value changed
        txn.updated_at = utcnow()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to update transaction %s", txn_id)
        return error_response("Failed to update transaction", 500, str(e))

    logger.info("Updated transaction %s", txn.id)
    return jsonify(txn.to_dict())


@transactions_bp.route("/<txn_id>", methods=["DELETE"])
def delete_transaction(txn_id):
    try:
        txn = get_or_none(Transaction, txn_id)
        if txn is None:
            return error_response("Transaction not found", 404)
        db.session.delete(txn)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to delete transaction %s", txn_id)
        return error_response("Failed to delete transaction", 500, str(e))

    logger.info("Deleted transaction %s", txn_id)
    return jsonify({"message": "Transaction deleted successfully"})
