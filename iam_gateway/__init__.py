"""IAM Gateway Flask Application Package.

Member, tenant and ReBAC relation services in front of the Descope
management API.

To build the Flask app:
    from iam_gateway.flask_app import create_app

To use the management client directly:
    from iam_gateway.core.management import init_management_client
"""
# Note: We don't import flask_app by default so the core client can be used
# without pulling in Flask
