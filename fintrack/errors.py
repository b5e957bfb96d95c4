from flask import jsonify
from werkzeug.exceptions import HTTPException

from .utils.logger import get_logger

logger = get_logger(__name__)


def error_response(message, status, details=None):
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_response(exc.name, exc.code, exc.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unhandled error while serving request")
        return error_response("Internal server error", 500, str(exc))
