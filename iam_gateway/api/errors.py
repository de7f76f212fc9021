"""Error handlers for the application.

Every error leaves the service as ``{"error": ..., "message": ...}`` JSON.
Remote failures are translated at the handler boundary by
``translate_remote_error``; their upstream detail is logged, never returned.
"""
import logging
from typing import Optional

from flask import jsonify
from werkzeug.exceptions import HTTPException

from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.errors import (
    GENERIC_UNEXPECTED_MESSAGE,
    NotFoundError,
    RemoteServiceError,
    ServiceError,
)
from iam_gateway.core.models import ErrorResponse

logger = logging.getLogger(__name__)

_HTTP_ERROR_MESSAGES = {
    400: "Malformed request",
    404: "Resource not found",
    405: "Method not allowed",
    413: "Request payload too large",
    415: "Unsupported media type",
}


def translate_remote_error(
    exc: DescopeAPIError,
    category: str,
    not_found: Optional[NotFoundError] = None,
) -> ServiceError:
    """Map a remote client failure onto the local taxonomy.

    Args:
        exc: Error raised by the management client
        category: Short error category for the generic 500 body
            (e.g. "Failed to create tenant")
        not_found: Error to return when the remote message says the entity
            does not exist; without it every failure maps to 500

    Returns:
        ServiceError for the caller to raise
    """
    if not_found is not None and exc.is_not_found:
        logger.info("%s: remote reported not found (%s)", category, exc)
        return not_found

    logger.error("%s: %s", category, exc)
    return RemoteServiceError(category)


def _error_response(error: str, message: str, status: int):
    return jsonify(ErrorResponse(error, message).to_dict()), status


def register_error_handlers(app):
    """Register JSON error handlers with the Flask app."""

    @app.errorhandler(ServiceError)
    def handle_service_error(error: ServiceError):
        """Validation, not-found and translated remote errors."""
        if error.status >= 500:
            logger.error("Service error %s: %s", error.error, error.message)
        return jsonify(error.to_dict()), error.status

    @app.errorhandler(DescopeAPIError)
    def handle_untranslated_remote_error(error: DescopeAPIError):
        """Remote error that escaped a handler without translation."""
        logger.error("Descope API error: %s", error)
        translated = RemoteServiceError()
        return jsonify(translated.to_dict()), translated.status

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        """Routing, method and body-size errors raised by werkzeug."""
        status = error.code or 500
        if status >= 500:
            return _error_response("Internal error", GENERIC_UNEXPECTED_MESSAGE, status)
        message = _HTTP_ERROR_MESSAGES.get(status, error.description or error.name)
        return _error_response(error.name, message, status)

    @app.errorhandler(Exception)
    def handle_exception(error: Exception):
        """Handle uncaught exceptions with a fully generic body."""
        # ALWAYS log the full error - logs are secure
        logger.error("Unexpected error: %s", error, exc_info=error)
        return _error_response("Internal error", GENERIC_UNEXPECTED_MESSAGE, 500)
