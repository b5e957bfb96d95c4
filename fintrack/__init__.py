from flask import Flask, jsonify
from .extensions import db, migrate
from .config import Config
from .errors import register_error_handlers
from .utils.logger import configure_logging, get_logger

from .blueprints.transactions.routes import transactions_bp
from .blueprints.budgets.routes import budgets_bp

logger = get_logger(__name__)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Ensure tables exist for a smooth first run
    with app.app_context():
        db.create_all()

    # Register blueprints
    app.register_blueprint(transactions_bp)
    app.register_blueprint(budgets_bp)
    register_error_handlers(app)

    @app.route("/")
    def root():
        return jsonify({"message": "Personal finance tracker API is running"})

    logger.info("Application created (testing=%s)", app.testing)
    return app
