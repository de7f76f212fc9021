"""HTTP layer: Flask blueprints and error handlers."""
from flask import current_app

from iam_gateway.core.management import ManagementClient


def management_client() -> ManagementClient:
    """Return the process-wide management client stored by create_app()."""
    return current_app.config["MANAGEMENT_CLIENT"]
