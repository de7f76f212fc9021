"""Descope management API client library.

Architecture:
- client.py: HTTP client with management-key authentication
- users.py: User lifecycle operations (create, load, update, delete, search)
- tenants.py: Tenant lifecycle operations
- authz.py: ReBAC relation tuples and access queries
- exceptions.py: Typed exceptions for error handling

Usage:
    from iam_gateway.core.descope import DescopeClient, UserManagement

    client = DescopeClient(project_id, management_key)
    users = UserManagement(client)
    user = users.load("alice@example.com")
"""
from .client import DescopeClient, REQUEST_TIMEOUT, DEFAULT_BASE_URL
from .exceptions import DescopeError, DescopeAPIError, DescopeConfigurationError
from .users import UserManagement
from .tenants import TenantManagement
from .authz import AuthzManagement

__all__ = [
    # Client
    "DescopeClient",
    "REQUEST_TIMEOUT",
    "DEFAULT_BASE_URL",
    
    # Exceptions
    "DescopeError",
    "DescopeAPIError",
    "DescopeConfigurationError",
    
    # Services
    "UserManagement",
    "TenantManagement",
    "AuthzManagement",
]
