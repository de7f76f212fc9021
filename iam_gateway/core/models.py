"""Request/response data types.

None of these are persisted locally; they are built per call from remote
data and discarded after serialization. JSON keys are camelCase.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Member:
    """A user viewed through one tenant association."""
    login_id: str
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    tenant_id: str

    @classmethod
    def from_user(cls, user: dict, tenant_id: str) -> "Member":
        """Scope a remote user record to tenant_id.

        Uses the first login id, falling back to the user id.
        """
        login_ids = user.get("loginIds") or []
        login_id = login_ids[0] if login_ids else user.get("userId", "")
        return cls(
            login_id=login_id,
            name=user.get("name"),
            email=user.get("email"),
            phone=user.get("phone"),
            tenant_id=tenant_id,
        )

    def to_dict(self) -> dict:
        return {
            "loginId": self.login_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "tenantId": self.tenant_id,
        }


@dataclass
class MemberRequest:
    """Body of member create/update calls."""
    login_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class UserInfo:
    """Basic user details without tenant context."""
    user_id: str
    name: Optional[str]
    email: Optional[str]

    @classmethod
    def from_user(cls, user: dict) -> "UserInfo":
        return cls(user_id=user.get("userId", ""), name=user.get("name"), email=user.get("email"))

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "name": self.name, "email": self.email}


@dataclass
class Tenant:
    id: str
    name: Optional[str]

    @classmethod
    def from_remote(cls, tenant: dict) -> "Tenant":
        return cls(id=tenant.get("id", ""), name=tenant.get("name"))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass
class TenantRequest:
    name: str


@dataclass(frozen=True)
class RelationTuple:
    """``target`` has ``relation_definition`` on ``resource`` within ``namespace``."""
    resource: str
    relation_definition: str
    namespace: str
    target: str

    @classmethod
    def from_dict(cls, data: dict) -> "RelationTuple":
        return cls(
            resource=data.get("resource"),
            relation_definition=data.get("relationDefinition"),
            namespace=data.get("namespace"),
            target=data.get("target"),
        )

    def to_dict(self) -> dict:
        return {
            "resource": self.resource,
            "relationDefinition": self.relation_definition,
            "namespace": self.namespace,
            "target": self.target,
        }


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of an ordered result set.

    Invariants: ``total_pages == ceil(total_items / page_size)`` and
    ``len(items) <= page_size``.
    """
    items: List[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.items],
            "page": self.page,
            "pageSize": self.page_size,
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
        }


@dataclass
class ErrorResponse:
    error: str
    message: str

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


@dataclass
class RelationsResponse:
    relations: List[RelationTuple] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"relations": [relation.to_dict() for relation in self.relations]}
