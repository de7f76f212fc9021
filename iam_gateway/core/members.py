"""Member service: tenant-scoped user CRUD on top of the management client.

Every read, update and delete first loads the full user record and checks
that the requested tenant is among its associations, so members are never
exposed or mutated across tenant boundaries. The load-then-act sequence is
not transactional; a concurrent delete surfaces as a remote error.
"""
from __future__ import annotations
import logging

from .errors import MemberNotFoundError
from .management import ManagementClient
from .models import Member, MemberRequest, PaginatedResponse, UserInfo
from .pagination import paginate

logger = logging.getLogger(__name__)


def tenant_ids_of(user: dict) -> list[str]:
    """Tenant ids the user is associated with (empty when none recorded)."""
    associations = user.get("userTenants") or []
    return [assoc.get("tenantId") for assoc in associations if assoc.get("tenantId")]


def belongs_to_tenant(user: dict, tenant_id: str) -> bool:
    return tenant_id in tenant_ids_of(user)


class MemberService:
    """Service for managing members within tenants."""
    
    def __init__(self, client: ManagementClient):
        self.client = client
    
    def create_member(self, tenant_id: str, request: MemberRequest) -> Member:
        """Create a user associated with tenant_id.
        
        Raises:
            DescopeAPIError: If the remote creation fails
        """
        logger.info("Creating member with loginId: %s in tenant: %s", request.login_id, tenant_id)
        
        self.client.create_user(
            request.login_id,
            email=request.email,
            phone=request.phone,
            name=request.name,
            tenant_ids=[tenant_id],
        )
        
        logger.info("Member created successfully: %s in tenant: %s", request.login_id, tenant_id)
        return Member(
            login_id=request.login_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            tenant_id=tenant_id,
        )
    
    def get_member(self, tenant_id: str, login_id: str) -> Member:
        """Load a member and verify it belongs to tenant_id.
        
        Raises:
            MemberNotFoundError: If the user has no association with the tenant
            DescopeAPIError: If the remote load fails (including unknown login id)
        """
        logger.info("Retrieving member with loginId: %s from tenant: %s", login_id, tenant_id)
        
        user = self.client.load_user(login_id)
        associations = tenant_ids_of(user)
        if not associations:
            logger.warning("User %s has no tenant associations", login_id)
        else:
            logger.debug("User %s has %d tenant associations: %s", login_id, len(associations), ", ".join(associations))
        
        if tenant_id not in associations:
            raise MemberNotFoundError(tenant_id, login_id)
        
        member = Member.from_user(user, tenant_id)
        if not member.login_id:
            member.login_id = login_id
        return member
    
    def update_member(self, tenant_id: str, login_id: str, request: MemberRequest) -> Member:
        """Overwrite a member's details, keeping the tenant association.
        
        Raises:
            MemberNotFoundError: If the user is not a member of the tenant
            DescopeAPIError: If a remote call fails
        """
        logger.info("Updating member %s in tenant: %s", login_id, tenant_id)
        
        self.get_member(tenant_id, login_id)
        
        self.client.update_user(
            login_id,
            email=request.email,
            phone=request.phone,
            name=request.name,
            tenant_ids=[tenant_id],
        )
        
        logger.info("Member %s updated successfully in tenant: %s", login_id, tenant_id)
        return Member(
            login_id=login_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            tenant_id=tenant_id,
        )
    
    def delete_member(self, tenant_id: str, login_id: str) -> None:
        """Delete a member after verifying tenant membership.
        
        Raises:
            MemberNotFoundError: If the user is not a member of the tenant
            DescopeAPIError: If a remote call fails
        """
        logger.info("Deleting member %s from tenant: %s", login_id, tenant_id)
        
        self.get_member(tenant_id, login_id)
        self.client.delete_user(login_id)
        
        logger.info("Member %s deleted successfully from tenant: %s", login_id, tenant_id)
    
    def get_all_members(self, tenant_id: str, page: int, page_size: int) -> PaginatedResponse:
        """List members of tenant_id, one page at a time.
        
        The tenant filter is pushed down to the remote search; the returned
        records are still checked client-side before being exposed.
        """
        logger.info("Retrieving all members for tenant: %s - page: %d, pageSize: %d", tenant_id, page, page_size)
        
        users = self.client.search_users([tenant_id]) or []
        members = [user for user in users if belongs_to_tenant(user, tenant_id)]
        if len(members) != len(users):
            logger.warning(
                "Dropped %d search result(s) not associated with tenant: %s",
                len(users) - len(members),
                tenant_id,
            )
        
        response = paginate(members, page, page_size, transform=lambda user: Member.from_user(user, tenant_id))
        
        logger.info(
            "Retrieved %d members out of %d total for tenant: %s",
            len(response.items),
            response.total_items,
            tenant_id,
        )
        return response
    
    def get_user_by_id(self, user_id: str) -> UserInfo:
        """Cross-tenant lookup of basic user info by Descope user id."""
        logger.info("Retrieving user info for userId: %s", user_id)
        
        user = self.client.load_user_by_id(user_id)
        info = UserInfo.from_user(user)
        if not info.user_id:
            info.user_id = user_id
        return info
