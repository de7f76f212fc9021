"""Descope user management operations."""
from __future__ import annotations
from typing import List, Optional

from .client import (
    DescopeClient,
    USER_CREATE_PATH,
    USER_DELETE_PATH,
    USER_LOAD_PATH,
    USER_SEARCH_PATH,
    USER_UPDATE_PATH,
)

SEARCH_PAGE_SIZE = 100


def _user_tenants(tenant_ids: Optional[List[str]]) -> list[dict]:
    return [{"tenantId": tenant_id, "roleNames": []} for tenant_id in tenant_ids or []]


class UserManagement:
    """Service for managing Descope users."""
    
    def __init__(self, client: DescopeClient):
        """Initialize user management.
        
        Args:
            client: Configured Descope client
        """
        self.client = client
    
    def create(
        self,
        login_id: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        name: Optional[str] = None,
        tenant_ids: Optional[List[str]] = None,
    ) -> dict:
        """Create a user associated with the given tenants.
        
        Returns:
            Created user representation
        """
        payload = {
            "loginId": login_id,
            "email": email,
            "phone": phone,
            "name": name,
            "userTenants": _user_tenants(tenant_ids),
        }
        body = self.client.post(USER_CREATE_PATH, json=payload)
        return body.get("user") or {}
    
    def load(self, login_id: str) -> dict:
        """Load the full user record by login id."""
        body = self.client.get(USER_LOAD_PATH, params={"loginId": login_id})
        return body.get("user") or {}
    
    def load_by_user_id(self, user_id: str) -> dict:
        """Load the full user record by Descope user id."""
        body = self.client.get(USER_LOAD_PATH, params={"userId": user_id})
        return body.get("user") or {}
    
    def update(
        self,
        login_id: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        name: Optional[str] = None,
        tenant_ids: Optional[List[str]] = None,
    ) -> dict:
        """Replace the user's details and tenant associations.
        
        Descope update is a full overwrite: fields left out are cleared.
        """
        payload = {
            "loginId": login_id,
            "email": email,
            "phone": phone,
            "name": name,
            "userTenants": _user_tenants(tenant_ids),
        }
        body = self.client.post(USER_UPDATE_PATH, json=payload)
        return body.get("user") or {}
    
    def delete(self, login_id: str) -> None:
        """Delete the user identified by login id."""
        self.client.post(USER_DELETE_PATH, json={"loginId": login_id})
    
    def search_all(self, tenant_ids: List[str]) -> List[dict]:
        """Return every user associated with any of the given tenants.
        
        Walks the search pages until a short page comes back.
        """
        users: list[dict] = []
        page = 0
        while True:
            payload = {"tenantIds": list(tenant_ids), "limit": SEARCH_PAGE_SIZE, "page": page}
            body = self.client.post(USER_SEARCH_PATH, json=payload)
            batch = body.get("users") or []
            users.extend(batch)
            if len(batch) < SEARCH_PAGE_SIZE:
                return users
            page += 1
