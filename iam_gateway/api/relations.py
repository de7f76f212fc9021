"""ReBAC relation endpoints: bulk create/delete and access queries."""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from iam_gateway.api import management_client
from iam_gateway.api.errors import translate_remote_error
from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.models import RelationsResponse
from iam_gateway.core.relations import RelationService
from iam_gateway.core.validators import validate_relation_request, validate_who_can_access_params

bp = Blueprint("relations", __name__, url_prefix="/relations")


def _service() -> RelationService:
    return RelationService(management_client())


@bp.route("", methods=["POST"])
def create_relations():
    """Create one or more relation tuples.
    
    Body: {"relations": [{resource, relationDefinition, namespace, target}, ...]}
    
    Returns:
        201 Created with a summary message, 400 on empty or blank input
    """
    tuples = validate_relation_request(request.get_json(silent=True))
    try:
        _service().create_relations(tuples)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to create relations") from exc
    return jsonify({"message": f"Created {len(tuples)} relation tuple(s)"}), 201


@bp.route("", methods=["DELETE"])
def delete_relations():
    """Delete one or more relation tuples.
    
    Returns:
        204 No Content, 400 on empty or blank input
    """
    tuples = validate_relation_request(request.get_json(silent=True))
    try:
        _service().delete_relations(tuples)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to delete relations") from exc
    return "", 204


@bp.route("/who-can-access", methods=["GET"])
def who_can_access():
    """Targets holding a relation on a resource.
    
    Query parameters (all required): resource, relationDefinition, namespace
    """
    resource, relation_definition, namespace = validate_who_can_access_params(request.args)
    try:
        targets = _service().who_can_access(resource, relation_definition, namespace)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to query who can access") from exc
    return jsonify({"targets": targets}), 200


@bp.route("/resource/<resource_id>", methods=["GET"])
def resource_relations(resource_id: str):
    try:
        relations = _service().get_resource_relations(resource_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to get resource relations") from exc
    return jsonify(RelationsResponse(relations).to_dict()), 200


@bp.route("/target/<target_id>", methods=["GET"])
def target_relations(target_id: str):
    try:
        relations = _service().get_target_access(target_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(exc, "Failed to get target access") from exc
    return jsonify(RelationsResponse(relations).to_dict()), 200
