"""Input validation helpers for request bodies and query parameters.

All helpers raise ValidationError so handlers can reject input before any
remote call is made.
"""
from __future__ import annotations
import re
from typing import Any, List, Mapping, Optional

from .errors import ValidationError
from .models import MemberRequest, RelationTuple, TenantRequest

EMAIL_MAX_LENGTH = 254
TENANT_NAME_MAX_LENGTH = 100
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
RELATION_FIELDS = ("resource", "relationDefinition", "namespace", "target")


def require_json_object(payload: Any) -> dict:
    """Ensure the decoded request body is a JSON object."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _optional_string(payload: Mapping, field: str) -> Optional[str]:
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip() or None


def _required_string(payload: Mapping, field: str) -> str:
    value = _optional_string(payload, field)
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def validate_email(email: Optional[str]) -> Optional[str]:
    """Validate email format (basic check, max 254 chars).

    Returns:
        The stripped address with its case intact, or None when absent
    """
    if email is None:
        return None
    email = email.strip()
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"email must not exceed {EMAIL_MAX_LENGTH} characters")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("email format is invalid")
    return email


def validate_member_request(payload: Any, require_login_id: bool = True) -> MemberRequest:
    """Build a MemberRequest from a JSON body.

    Args:
        payload: Decoded JSON body
        require_login_id: False on update, where the path carries the login id

    Raises:
        ValidationError: If the body is not an object or a field is invalid
    """
    payload = require_json_object(payload)
    if require_login_id:
        login_id = _required_string(payload, "loginId")
    else:
        login_id = _optional_string(payload, "loginId")

    return MemberRequest(
        login_id=login_id,
        name=_optional_string(payload, "name"),
        email=validate_email(_optional_string(payload, "email")),
        phone=_optional_string(payload, "phone"),
    )


def validate_tenant_request(payload: Any) -> TenantRequest:
    payload = require_json_object(payload)
    name = _optional_string(payload, "name")
    if not name:
        raise ValidationError("Tenant name cannot be empty")
    if len(name) > TENANT_NAME_MAX_LENGTH:
        raise ValidationError(f"Tenant name must not exceed {TENANT_NAME_MAX_LENGTH} characters")
    return TenantRequest(name=name)


def validate_relation_tuple(data: Any, index: Optional[int] = None) -> RelationTuple:
    """Validate a single relation tuple; all four fields are mandatory."""
    where = f"relations[{index}]" if index is not None else "relation"
    if not isinstance(data, dict):
        raise ValidationError(f"{where} must be an object")

    missing = [
        field for field in RELATION_FIELDS
        if not isinstance(data.get(field), str) or not data.get(field).strip()
    ]
    if missing:
        raise ValidationError(f"{where}: {', '.join(missing)} must not be blank")

    return RelationTuple(
        resource=data["resource"].strip(),
        relation_definition=data["relationDefinition"].strip(),
        namespace=data["namespace"].strip(),
        target=data["target"].strip(),
    )


def validate_relation_request(payload: Any) -> List[RelationTuple]:
    """Validate a ``{"relations": [...]}`` body for bulk create/delete."""
    if payload is None:
        raise ValidationError("Relations list cannot be empty")
    payload = require_json_object(payload)
    relations = payload.get("relations")
    if relations is None or (isinstance(relations, list) and not relations):
        raise ValidationError("Relations list cannot be empty")
    if not isinstance(relations, list):
        raise ValidationError("relations must be a list")
    return [validate_relation_tuple(item, index) for index, item in enumerate(relations)]


def validate_who_can_access_params(args: Mapping[str, str]) -> tuple[str, str, str]:
    """Read the three required who-can-access query params."""
    values = tuple((args.get(name) or "").strip() for name in ("resource", "relationDefinition", "namespace"))
    if not all(values):
        raise ValidationError("resource, relationDefinition, and namespace are required")
    return values
