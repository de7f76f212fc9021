"""Management client seam between the service layer and the remote platform.

The service layer only talks to ``ManagementClient``. Production wires in
``DescopeManagementClient``; tests substitute an in-memory fake.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from iam_gateway.core.descope import (
    AuthzManagement,
    DescopeClient,
    DescopeError,
    TenantManagement,
    UserManagement,
)

logger = logging.getLogger(__name__)


class ManagementClient(ABC):
    """Narrow interface to the identity/authorization management platform.

    Implementations must be safe to share across concurrent requests.
    Failures are reported by raising ``DescopeAPIError``.
    """

    # Users
    @abstractmethod
    def create_user(
        self,
        login_id: str,
        email: Optional[str],
        phone: Optional[str],
        name: Optional[str],
        tenant_ids: List[str],
    ) -> dict: ...

    @abstractmethod
    def load_user(self, login_id: str) -> dict: ...

    @abstractmethod
    def load_user_by_id(self, user_id: str) -> dict: ...

    @abstractmethod
    def update_user(
        self,
        login_id: str,
        email: Optional[str],
        phone: Optional[str],
        name: Optional[str],
        tenant_ids: List[str],
    ) -> dict: ...

    @abstractmethod
    def delete_user(self, login_id: str) -> None: ...

    @abstractmethod
    def search_users(self, tenant_ids: List[str]) -> List[dict]: ...

    # Tenants
    @abstractmethod
    def create_tenant(self, name: str) -> str: ...

    @abstractmethod
    def load_tenant(self, tenant_id: str) -> dict: ...

    @abstractmethod
    def load_all_tenants(self) -> List[dict]: ...

    @abstractmethod
    def update_tenant(self, tenant_id: str, name: str) -> None: ...

    @abstractmethod
    def delete_tenant(self, tenant_id: str) -> None: ...

    # Relations
    @abstractmethod
    def create_relations(self, relations: List[dict]) -> None: ...

    @abstractmethod
    def delete_relations(self, relations: List[dict]) -> None: ...

    @abstractmethod
    def who_can_access(self, resource: str, relation_definition: str, namespace: str) -> List[str]: ...

    @abstractmethod
    def resource_relations(self, resource: str) -> List[dict]: ...

    @abstractmethod
    def target_relations(self, target: str) -> List[dict]: ...


class DescopeManagementClient(ManagementClient):
    """ManagementClient backed by the Descope management REST API."""

    def __init__(self, client: DescopeClient):
        self.client = client
        self.users = UserManagement(client)
        self.tenants = TenantManagement(client)
        self.authz = AuthzManagement(client)

    def create_user(self, login_id, email, phone, name, tenant_ids):
        return self.users.create(login_id, email=email, phone=phone, name=name, tenant_ids=tenant_ids)

    def load_user(self, login_id):
        return self.users.load(login_id)

    def load_user_by_id(self, user_id):
        return self.users.load_by_user_id(user_id)

    def update_user(self, login_id, email, phone, name, tenant_ids):
        return self.users.update(login_id, email=email, phone=phone, name=name, tenant_ids=tenant_ids)

    def delete_user(self, login_id):
        self.users.delete(login_id)

    def search_users(self, tenant_ids):
        return self.users.search_all(tenant_ids)

    def create_tenant(self, name):
        return self.tenants.create(name)

    def load_tenant(self, tenant_id):
        return self.tenants.load(tenant_id)

    def load_all_tenants(self):
        return self.tenants.load_all()

    def update_tenant(self, tenant_id, name):
        self.tenants.update(tenant_id, name)

    def delete_tenant(self, tenant_id):
        self.tenants.delete(tenant_id)

    def create_relations(self, relations):
        self.authz.create_relations(relations)

    def delete_relations(self, relations):
        self.authz.delete_relations(relations)

    def who_can_access(self, resource, relation_definition, namespace):
        return self.authz.who_can_access(resource, relation_definition, namespace)

    def resource_relations(self, resource):
        return self.authz.resource_relations(resource)

    def target_relations(self, target):
        return self.authz.target_relations(target)


@dataclass
class ClientInitResult:
    """Outcome of the startup step: exactly one of client/error is set."""
    client: Optional[ManagementClient] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.client is not None and self.error is None


def init_management_client(cfg) -> ClientInitResult:
    """Build the process-wide management client from configuration.

    Never raises; the caller decides whether a failure is fatal.

    Args:
        cfg: AppConfig (or any object with descope_project_id,
            descope_management_key and descope_base_url)

    Returns:
        ClientInitResult with either a client or an error description
    """
    try:
        client = DescopeClient(
            cfg.descope_project_id,
            cfg.descope_management_key,
            base_url=cfg.descope_base_url,
        )
    except DescopeError as exc:
        logger.error("Failed to initialize Descope client: %s", exc)
        return ClientInitResult(error=str(exc))

    logger.info("Descope management client ready (project=%s, base_url=%s)", client.project_id, client.base_url)
    return ClientInitResult(client=DescopeManagementClient(client))
