"""Flask application package."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from pymongo import MongoClient

from inventory_app.config import BaseConfig


def create_app(config: type[BaseConfig] | None = None, mongo_client: MongoClient | None = None) -> Flask:
    """Application factory.

    Args:
        config: Config class to load; resolved from APP_ENV when omitted.
        mongo_client: Pre-built client to use instead of connecting to
            MONGODB_URI.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from inventory_app.config import get_config
    from inventory_app.db import init_db
    from inventory_app.error_handlers import register_error_handlers
    from inventory_app.logging_config import configure_logging
    from inventory_app.rate_limit import init_rate_limiting
    from inventory_app.routes.categories import categories_bp
    from inventory_app.routes.health import health_bp
    from inventory_app.routes.items import items_bp
    from inventory_app.routes.web import web_bp
    from inventory_app.utils.urls import category_url, item_url, upload_url

    app = Flask(__name__)
    app.config.from_object(config or get_config())

    configure_logging(app)
    init_db(app, client=mongo_client)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(categories_bp)
    app.register_blueprint(items_bp)

    init_rate_limiting(app)

    app.jinja_env.globals.update(
        category_url=category_url,
        item_url=item_url,
        upload_url=upload_url,
    )

    return app
