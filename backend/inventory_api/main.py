"""Application factory wiring logging, observability, CORS and the inventory routes."""

import logging

from flask import Flask
from flask_cors import CORS
from prometheus_client import CollectorRegistry
from prometheus_flask_exporter import PrometheusMetrics
from sqlalchemy.exc import SQLAlchemyError

from inventory_api import __version__
from inventory_api.core import config
from inventory_api.core.error_handlers import register_error_handlers
from inventory_api.core.limiter_config import limiter
from inventory_api.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _init_sentry(env: str) -> None:
    """Enable Sentry error reporting when SENTRY_DSN is set."""
    sentry_dsn = config.get_sentry_dsn()
    if not sentry_dsn:
        logger.info(
            "Sentry not initialized (SENTRY_DSN not set)",
            extra={"context": {"environment": env}},
        )
        return

    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=env,
        release=config.get_release(),
        integrations=[
            FlaskIntegration(),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,
    )
    logger.info(
        "Sentry initialized",
        extra={"context": {"environment": env, "release": config.get_release()}},
    )


def _init_metrics(app: Flask, env: str) -> PrometheusMetrics:
    """Expose Prometheus metrics on /metrics."""
    # One registry per app so repeated create_app() calls do not collide
    metrics = PrometheusMetrics(app, registry=CollectorRegistry())
    metrics.info(
        "app_info",
        "Application information",
        version=__version__,
        release=config.get_release(),
        environment=env,
    )
    logger.info(
        "Prometheus metrics initialized",
        extra={"context": {"metrics_endpoint": "/metrics"}},
    )
    return metrics


def _init_cors(app: Flask) -> None:
    """Allow the configured frontend origins to call the API."""
    allowed_origins = config.get_cors_allowed_origins()
    allow_any = "*" in allowed_origins
    CORS(
        app,
        origins="*" if allow_any else allowed_origins,
        send_wildcard=allow_any,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )


def _init_limiter(app: Flask) -> None:
    """Apply per-route rate limits unless RATE_LIMIT_ENABLED is off."""
    enabled = config.rate_limit_enabled()
    app.config["RATELIMIT_ENABLED"] = enabled
    app.config["RATELIMIT_STORAGE_URI"] = config.get_limiter_storage_uri()
    limiter.init_app(app)
    limiter.enabled = enabled
    if not enabled:
        logger.info("Rate limiting disabled", extra={"context": {"enabled": False}})


def _init_store() -> None:
    """Create the inventory collection table, logging failures instead of raising."""
    from inventory_api.db.session import create_tables

    try:
        create_tables()
    except SQLAlchemyError as e:
        # The store may come up after the API; requests report StoreError meanwhile
        logger.error(
            "Could not create inventory collection at startup",
            extra={"context": {"error": str(e)}},
        )


def create_app() -> Flask:
    """Build the Flask app from environment configuration."""
    env = config.get_environment()
    is_production = config.is_production()

    app = Flask(__name__)
    app.config["TESTING"] = config.is_testing()
    app.json.sort_keys = False

    setup_logging(
        app=app,
        log_level=config.get_log_level(),
        enable_sql_echo=config.sql_echo_enabled(),
        log_to_file=config.log_to_file_enabled(),
        use_json_format=is_production,  # JSON logs in production, colored in dev
    )
    logger.info(
        "Logging configured",
        extra={"context": {"environment": env, "json_format": is_production}},
    )
    config.log_store_config()

    _init_sentry(env)
    _init_metrics(app, env)
    _init_limiter(app)
    _init_cors(app)

    from inventory_api.controllers.health_controller import health_bp
    from inventory_api.controllers.inventory_controller import inventory_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(inventory_bp)
    register_error_handlers(app)

    _init_store()

    logger.info(
        "Inventory API ready",
        extra={
            "context": {
                "environment": env,
                "collection": config.get_inventory_collection(),
            }
        },
    )
    return app
