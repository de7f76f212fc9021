"""Tenant service: tenant CRUD on top of the management client."""
from __future__ import annotations
import logging

from .management import ManagementClient
from .models import PaginatedResponse, Tenant, TenantRequest
from .pagination import paginate

logger = logging.getLogger(__name__)


class TenantService:
    """Service for managing tenants."""
    
    def __init__(self, client: ManagementClient):
        self.client = client
    
    def create_tenant(self, request: TenantRequest) -> Tenant:
        logger.info("Creating tenant with name: %s", request.name)
        
        tenant_id = self.client.create_tenant(request.name)
        
        logger.info("Tenant created successfully with ID: %s", tenant_id)
        return Tenant(id=tenant_id, name=request.name)
    
    def get_tenant(self, tenant_id: str) -> Tenant:
        logger.info("Retrieving tenant with ID: %s", tenant_id)
        tenant = Tenant.from_remote(self.client.load_tenant(tenant_id))
        if not tenant.id:
            tenant.id = tenant_id
        return tenant
    
    def update_tenant(self, tenant_id: str, request: TenantRequest) -> Tenant:
        logger.info("Updating tenant %s with name: %s", tenant_id, request.name)
        
        self.client.update_tenant(tenant_id, request.name)
        
        logger.info("Tenant %s updated successfully", tenant_id)
        return Tenant(id=tenant_id, name=request.name)
    
    def delete_tenant(self, tenant_id: str) -> None:
        logger.info("Deleting tenant with ID: %s", tenant_id)
        self.client.delete_tenant(tenant_id)
        logger.info("Tenant %s deleted successfully", tenant_id)
    
    def get_all_tenants(self, page: int, page_size: int) -> PaginatedResponse:
        """Return one page of all tenants, in remote order."""
        logger.info("Retrieving all tenants - page: %d, pageSize: %d", page, page_size)
        
        tenants = self.client.load_all_tenants() or []
        response = paginate(tenants, page, page_size, transform=Tenant.from_remote)
        
        logger.info("Retrieved %d tenants out of %d total", len(response.items), response.total_items)
        return response
