"""Low-level HTTP client for the Descope management API.

Handles authentication headers, HTTP operations and error extraction.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

import requests

from .exceptions import DescopeAPIError, DescopeConfigurationError

REQUEST_TIMEOUT = 10
DEFAULT_BASE_URL = "https://api.descope.com"

# Management API paths
USER_CREATE_PATH = "/v1/mgmt/user/create"
USER_UPDATE_PATH = "/v1/mgmt/user/update"
USER_DELETE_PATH = "/v1/mgmt/user/delete"
USER_LOAD_PATH = "/v1/mgmt/user"
USER_SEARCH_PATH = "/v2/mgmt/user/search"
TENANT_CREATE_PATH = "/v1/mgmt/tenant/create"
TENANT_UPDATE_PATH = "/v1/mgmt/tenant/update"
TENANT_DELETE_PATH = "/v1/mgmt/tenant/delete"
TENANT_LOAD_PATH = "/v1/mgmt/tenant"
TENANT_LOAD_ALL_PATH = "/v1/mgmt/tenant/all"
RELATIONS_CREATE_PATH = "/v1/mgmt/authz/re/create"
RELATIONS_DELETE_PATH = "/v1/mgmt/authz/re/delete"
RELATIONS_WHO_PATH = "/v1/mgmt/authz/re/who"
RELATIONS_RESOURCE_PATH = "/v1/mgmt/authz/re/resource"
RELATIONS_TARGETS_PATH = "/v1/mgmt/authz/re/targetall"


class DescopeClient:
    """HTTP client for the Descope management API.
    
    Every request is authenticated with the project id and management key
    (``Authorization: Bearer <projectId>:<managementKey>``). The key does not
    expire, so there is no token refresh. Calls are blocking and never
    retried; timeouts are bounded by REQUEST_TIMEOUT.
    
    Usage:
        client = DescopeClient("P2abc...", "K2xyz...")
        response = client.get("/v1/mgmt/tenant", params={"id": "T123"})
    """
    
    def __init__(self, project_id: str, management_key: str, base_url: Optional[str] = None):
        """Initialize Descope client.
        
        Args:
            project_id: Descope project identifier
            management_key: Management key with admin rights on the project
            base_url: API base URL (defaults to https://api.descope.com)
        
        Raises:
            DescopeConfigurationError: If project id or management key is empty
        """
        if not project_id:
            raise DescopeConfigurationError("Descope project id is required")
        if not management_key:
            raise DescopeConfigurationError("Descope management key is required")
        
        self.project_id = project_id
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._management_key = management_key
    
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.project_id}:{self._management_key}",
            "Content-Type": "application/json",
            "x-descope-project-id": self.project_id,
        }
    
    def get(self, path: str, params: Optional[Dict] = None) -> Any:
        """Execute GET request and return the decoded JSON body.
        
        Args:
            path: API endpoint path (e.g., "/v1/mgmt/tenant")
            params: Query parameters
        
        Raises:
            DescopeAPIError: On HTTP or transport error
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.get(url, params=params, headers=self._headers(), timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            raise DescopeAPIError(503, f"Request failed: {exc.__class__.__name__}", path) from exc
        self._handle_error(resp, path)
        return self._json(resp)
    
    def post(self, path: str, json: Optional[Dict] = None) -> Any:
        """Execute POST request and return the decoded JSON body.
        
        Descope uses POST for every mutating management call, deletes included.
        
        Args:
            path: API endpoint path
            json: JSON payload
        
        Raises:
            DescopeAPIError: On HTTP or transport error
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(url, json=json or {}, headers=self._headers(), timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            raise DescopeAPIError(503, f"Request failed: {exc.__class__.__name__}", path) from exc
        self._handle_error(resp, path)
        return self._json(resp)
    
    @staticmethod
    def _json(resp: requests.Response) -> Any:
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            return {}
    
    @staticmethod
    def _handle_error(resp: requests.Response, path: str) -> None:
        """Centralized error handling for HTTP responses.
        
        Descope error bodies look like
        ``{"errorCode": "E062108", "errorDescription": "User not found", "errorMessage": "..."}``.
        
        Raises:
            DescopeAPIError: If response status indicates error
        """
        if resp.status_code < 400:
            return
        
        message = resp.text
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            parts = [body.get("errorDescription"), body.get("errorMessage")]
            parts = [part for part in parts if part]
            if parts:
                message = ": ".join(dict.fromkeys(parts))
        
        raise DescopeAPIError(resp.status_code, message, path)
