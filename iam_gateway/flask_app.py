"""Flask application factory and bootstrap.

This module provides the create_app() factory function for initializing
the Flask application with the enabled service blueprints, middleware,
error handlers and the process-wide management client.
"""
from __future__ import annotations
import logging
from typing import Optional

from flask import Flask, request
from werkzeug.middleware.proxy_fix import ProxyFix

from iam_gateway.config import AppConfig, load_settings
from iam_gateway.core.management import ManagementClient, init_management_client

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(
    cfg: Optional[AppConfig] = None,
    management_client: Optional[ManagementClient] = None,
) -> Flask:
    """Create and configure Flask application.

    Args:
        cfg: Application configuration (loaded from the environment when omitted)
        management_client: Pre-built client; skips the startup step (tests)

    Raises:
        RuntimeError: If the management client cannot be initialized
    """
    cfg = cfg or load_settings()
    _configure_logging(cfg.log_level)

    if management_client is None:
        result = init_management_client(cfg)
        if not result.ok:
            raise RuntimeError(f"Failed to initialize Descope client: {result.error}")
        management_client = result.client

    app = Flask(__name__)
    app.config["APP_CONFIG"] = cfg
    app.config["MANAGEMENT_CLIENT"] = management_client
    app.config["MAX_CONTENT_LENGTH"] = cfg.max_content_length
    app.json.sort_keys = False

    # Trust X-Forwarded-* headers only from the configured number of proxies
    if cfg.trusted_proxy_count:
        hops = cfg.trusted_proxy_count
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)  # type: ignore

    # Register blueprints
    from iam_gateway.api import errors, health

    app.register_blueprint(health.bp)
    for blueprint in _service_blueprints(cfg.services):
        app.register_blueprint(blueprint)

    # Register error handlers
    errors.register_error_handlers(app)

    _register_middleware(app)

    print(f"[flask_app] Services={','.join(cfg.services)}")
    return app


def _service_blueprints(services: list[str]) -> list:
    """Blueprints for the enabled services, in declaration order."""
    from iam_gateway.api import members, relations, tenants, users

    mapping = {
        "members": [members.bp, users.bp],
        "tenants": [tenants.bp],
        "relations": [relations.bp],
    }
    blueprints = []
    for service in services:
        blueprints.extend(mapping[service])
    return blueprints


def _register_middleware(app: Flask):
    """Register request/response hooks."""

    @app.after_request
    def add_correlation_id(response):
        """Echo the caller's correlation id for tracing."""
        correlation_id = request.headers.get("X-Correlation-Id")
        if correlation_id:
            response.headers["X-Correlation-Id"] = correlation_id
        return response


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("iam_gateway").setLevel(level)
