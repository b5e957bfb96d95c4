from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ...extensions import db
from ...errors import error_response
from ...models import Budget
from ...schemas import BudgetSchema, format_validation_error, is_month_key, to_amount
from ...utils.logger import get_logger

budgets_bp = Blueprint("budgets", __name__, url_prefix="/budgets")
logger = get_logger(__name__)

INVALID_MONTH = "Invalid month format. Use YYYY-MM"


@budgets_bp.route("", methods=["GET"])
def list_budgets():
    month = request.args.get("month")
    if month and not is_month_key(month):
        return error_response(INVALID_MONTH, 400)

    query = Budget.query
    if month:
        query = query.filter_by(month=month)
    try:
        budgets = query.order_by(Budget.category).all()
    except SQLAlchemyError as e:
        logger.exception("Budget fetch error")
        return error_response("Failed to fetch budgets", 500, str(e))
    return jsonify([b.to_dict() for b in budgets])


@budgets_bp.route("", methods=["POST"])
def create_budget():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    if not data.get("category") or not data.get("amount") or not data.get("month"):
        return error_response(
            "Missing required fields: category, amount, and month are required", 400
        )
    if not is_month_key(data["month"]):
        return error_response(INVALID_MONTH, 400)
    try:
        amount = to_amount(data["amount"])
    except ValueError:
        amount = None
    if amount is None or amount <= 0:
        return error_response("Amount must be a positive number", 400)

    try:
        fields = BudgetSchema.model_validate(
            {"category": data["category"], "amount": amount, "month": data["month"]}
        )
    except ValidationError as e:
        return error_response("Invalid budget data", 400, format_validation_error(e))

    budget = Budget(**fields.model_dump())
    try:
        db.session.add(budget)
        db.session.commit()
    except IntegrityError:
        # Unique (category, month) constraint
        db.session.rollback()
        logger.info("Rejected duplicate budget for %s in %s", fields.category, fields.month)
        return error_response(
            "Budget for this category and month already exists",
            409,
            f"A {fields.category} budget is already set for {fields.month}",
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Budget creation error")
        return error_response("Failed to create budget", 500, str(e))

    logger.info("Created budget %s for %s in %s", budget.id, budget.category, budget.month)
    return jsonify(budget.to_dict()), 201
