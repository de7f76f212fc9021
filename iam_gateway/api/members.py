"""Member endpoints: CRUD and listing of members within a tenant."""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from iam_gateway.api import management_client
from iam_gateway.api.errors import translate_remote_error
from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.errors import MemberNotFoundError
from iam_gateway.core.members import MemberService
from iam_gateway.core.pagination import parse_page_params
from iam_gateway.core.validators import validate_member_request

bp = Blueprint("members", __name__, url_prefix="/tenants/<tenant_id>/members")


def _service() -> MemberService:
    return MemberService(management_client())


@bp.route("", methods=["POST"])
def create_member(tenant_id: str):
    """Create a new member in the tenant.
    
    Returns:
        201 Created with the Member
    """
    member_request = validate_member_request(request.get_json(silent=True))
    try:
        member = _service().create_member(tenant_id, member_request)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to create member") from exc
    return jsonify(member.to_dict()), 201


@bp.route("/<login_id>", methods=["GET"])
def get_member(tenant_id: str, login_id: str):
    """Retrieve a member by login id.
    
    Returns:
        200 OK with the Member, 404 if absent or not in the tenant
    """
    try:
        member = _service().get_member(tenant_id, login_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to retrieve member",
            not_found=MemberNotFoundError(tenant_id, login_id),
        ) from exc
    return jsonify(member.to_dict()), 200


@bp.route("", methods=["GET"])
def list_members(tenant_id: str):
    """List members with pagination.
    
    Query parameters:
        - page: 0-indexed page number (default: 0)
        - pageSize: items per page (default: 20)
    """
    page, page_size = parse_page_params(request.args)
    try:
        response = _service().get_all_members(tenant_id, page, page_size)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to retrieve members") from exc
    return jsonify(response.to_dict()), 200


@bp.route("/<login_id>", methods=["PUT"])
def update_member(tenant_id: str, login_id: str):
    member_request = validate_member_request(request.get_json(silent=True), require_login_id=False)
    try:
        member = _service().update_member(tenant_id, login_id, member_request)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to update member",
            not_found=MemberNotFoundError(tenant_id, login_id),
        ) from exc
    return jsonify(member.to_dict()), 200


@bp.route("/<login_id>", methods=["DELETE"])
def delete_member(tenant_id: str, login_id: str):
    """Delete a member from the tenant.
    
    Returns:
        204 No Content
    """
    try:
        _service().delete_member(tenant_id, login_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to delete member",
            not_found=MemberNotFoundError(tenant_id, login_id),
        ) from exc
    return "", 204
