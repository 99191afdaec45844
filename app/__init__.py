import os
import time
from typing import Optional
from flask import Flask, render_template
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def create_app(config: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    # Explicit overrides win over the environment defaults below
    if config:
        app.config.update(config)

    app.config.setdefault("SQLALCHEMY_DATABASE_URI", os.getenv("DATABASE_URL", "sqlite:///app.db"))
    app.config.setdefault("SQLALCHEMY_TRACK_MODIFICATIONS", False)
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"pool_pre_ping": True})
    app.config.setdefault("BOOKS_PAGE_LIMIT", int(os.getenv("BOOKS_PAGE_LIMIT", "200")))
    # Treat empty as unset.
    _sk = os.getenv("SECRET_KEY")
    if not _sk:
        _sk = "dev-secret-key"
    app.config["SECRET_KEY"] = _sk

    app.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    db.init_app(app)

    @app.template_filter('humandate_short')
    def humandate_short_filter(value):
        """Format a datetime (or YYYY-MM-DD string) as a short date."""
        if not value:
            return ''
        try:
            from datetime import datetime
            if isinstance(value, datetime):
                dt = value
            else:
                dt = datetime.strptime(value, '%Y-%m-%d')
            # Format as: "Jun 30, 2025"
            return dt.strftime('%b %d, %Y')
        except (ValueError, TypeError):
            return value

    # Create tables on startup (no migrations)
    with app.app_context():
        from . import models  # noqa: F401
        # Wait for DB to be ready
        last_err = None
        for _ in range(30):
            try:
                db.create_all()
                last_err = None
                break
            except Exception as e:
                last_err = e
                app.logger.warning("Database not ready: %s", e)
                time.sleep(1)
        if last_err:
            raise last_err

    from .views.books import bp as books_bp
    app.register_blueprint(books_bp)

    @app.errorhandler(404)
    def not_found(e):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def server_error(e):
        app.logger.error("Unhandled error: %s", e)
        return render_template('errors/500.html'), 500

    return app
