import logging

from flask import Flask, jsonify
from sqlalchemy import text

from .config import get_config
from .extensions import db, migrate, cors, enable_sqlite_foreign_keys


def _engine_options(app: Flask) -> None:
    # sqlite usa sus propias clases de pool; el límite solo aplica a MySQL & co.
    uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if uri.startswith("sqlite") or "SQLALCHEMY_ENGINE_OPTIONS" in app.config:
        return
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
        "pool_size": app.config["DB_POOL_SIZE"],
        "max_overflow": 0,
        # sin timeout: las peticiones esperan en cola hasta que haya conexión
        "pool_timeout": None,
        "pool_pre_ping": True,
    }


def check_database(app: Flask) -> bool:
    """Opens one pooled connection and releases it. Logs the outcome."""
    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            app.logger.exception("Failed to connect to the database")
            return False
    app.logger.info("Successfully connected to the database.")
    return True


def create_app(config_overrides: dict | None = None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(get_config())

    # overrides ANTES de db.init_app para que SQLAlchemy use la BD de tests
    if config_overrides:
        app.config.update(config_overrides)

    _engine_options(app)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))
    app.logger.info("Library loans API - init app")

    db.init_app(app)

    # cargar modelos para que Alembic vea las tablas
    from . import models  # noqa: F401

    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config.get("ENFORCE_FOREIGN_KEYS"):
        with app.app_context():
            if enable_sqlite_foreign_keys(db.engine):
                app.logger.info("SQLite foreign key enforcement enabled")

    from .blueprints.loans.routes import bp as loans_bp
    from .blueprints.books.routes import bp as books_bp
    from .blueprints.users.routes import bp as users_bp
    from .blueprints.ui import bp as ui_bp

    app.register_blueprint(loans_bp)
    app.register_blueprint(books_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(ui_bp)

    from .seeders.cli import init_db_command, seed_command

    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_command)

    # -----------------------------
    # Error handlers (JSON)
    # -----------------------------
    @app.errorhandler(404)
    def err_404(e):
        return jsonify(error="not_found"), 404

    @app.errorhandler(405)
    def err_405(e):
        return jsonify(error="method_not_allowed"), 405

    @app.get("/")
    def index():
        return "Hello world! The library's API is working."

    @app.get("/health")
    def health():
        return jsonify(status="ok")

    @app.get("/routes")
    def routes():
        return jsonify(sorted([str(r) for r in app.url_map.iter_rules()]))

    return app
