"""Tenant endpoints: CRUD and listing of tenants."""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from iam_gateway.api import management_client
from iam_gateway.api.errors import translate_remote_error
from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.errors import ResourceNotFoundError
from iam_gateway.core.pagination import parse_page_params
from iam_gateway.core.tenants import TenantService
from iam_gateway.core.validators import validate_tenant_request

bp = Blueprint("tenants", __name__, url_prefix="/tenants")


def _service() -> TenantService:
    return TenantService(management_client())


@bp.route("", methods=["POST"])
def create_tenant():
    """Create a tenant; the id is assigned by Descope.
    
    Returns:
        201 Created with {id, name}
    """
    tenant_request = validate_tenant_request(request.get_json(silent=True))
    try:
        tenant = _service().create_tenant(tenant_request)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to create tenant") from exc
    return jsonify(tenant.to_dict()), 201


@bp.route("/<tenant_id>", methods=["GET"])
def get_tenant(tenant_id: str):
    try:
        tenant = _service().get_tenant(tenant_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to retrieve tenant",
            not_found=ResourceNotFoundError("Tenant", tenant_id),
        ) from exc
    return jsonify(tenant.to_dict()), 200


@bp.route("", methods=["GET"])
def list_tenants():
    """List tenants with pagination (?page=0&pageSize=20)."""
    page, page_size = parse_page_params(request.args)
    try:
        response = _service().get_all_tenants(page, page_size)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to retrieve tenants") from exc
    return jsonify(response.to_dict()), 200


@bp.route("/<tenant_id>", methods=["PUT"])
def update_tenant(tenant_id: str):
    tenant_request = validate_tenant_request(request.get_json(silent=True))
    try:
        tenant = _service().update_tenant(tenant_id, tenant_request)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to update tenant",
            not_found=ResourceNotFoundError("Tenant", tenant_id),
        ) from exc
    return jsonify(tenant.to_dict()), 200


@bp.route("/<tenant_id>", methods=["DELETE"])
def delete_tenant(tenant_id: str):
    try:
        _service().delete_tenant(tenant_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to delete tenant",
            not_found=ResourceNotFoundError("Tenant", tenant_id),
        ) from exc
    return "", 204
