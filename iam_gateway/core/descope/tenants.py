"""Descope tenant management operations."""
from __future__ import annotations
from typing import List

from .client import (
    DescopeClient,
    TENANT_CREATE_PATH,
    TENANT_DELETE_PATH,
    TENANT_LOAD_ALL_PATH,
    TENANT_LOAD_PATH,
    TENANT_UPDATE_PATH,
)
from .exceptions import DescopeAPIError


class TenantManagement:
    """Service for managing Descope tenants."""
    
    def __init__(self, client: DescopeClient):
        self.client = client
    
    def create(self, name: str) -> str:
        """Create a tenant and return the id Descope assigned to it.
        
        Raises:
            DescopeAPIError: On HTTP error or when no id is returned
        """
        payload = {"name": name, "selfProvisioningDomains": [], "customAttributes": {}}
        body = self.client.post(TENANT_CREATE_PATH, json=payload)
        tenant_id = body.get("id")
        if not tenant_id:
            raise DescopeAPIError(502, "Tenant created but no id returned", TENANT_CREATE_PATH)
        return tenant_id
    
    def load(self, tenant_id: str) -> dict:
        return self.client.get(TENANT_LOAD_PATH, params={"id": tenant_id})
    
    def load_all(self) -> List[dict]:
        body = self.client.get(TENANT_LOAD_ALL_PATH)
        return body.get("tenants") or []
    
    def update(self, tenant_id: str, name: str) -> None:
        payload = {"id": tenant_id, "name": name, "selfProvisioningDomains": [], "customAttributes": {}}
        self.client.post(TENANT_UPDATE_PATH, json=payload)
    
    def delete(self, tenant_id: str) -> None:
        self.client.post(TENANT_DELETE_PATH, json={"id": tenant_id})
