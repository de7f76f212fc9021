"""User lookup endpoint (cross-tenant)."""
from flask import Blueprint, jsonify

from iam_gateway.api import management_client
from iam_gateway.api.errors import translate_remote_error
from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.errors import ResourceNotFoundError
from iam_gateway.core.members import MemberService

bp = Blueprint("users", __name__, url_prefix="/users")


@bp.route("/<user_id>", methods=["GET"])
def get_user(user_id: str):
    """Retrieve basic user info ({userId, name, email}) by Descope user id."""
    try:
        user_info = MemberService(management_client()).get_user_by_id(user_id)
    except DescopeAPIError as exc:
        raise translate_remote_error(
            exc,
            "Failed to retrieve user",
            not_found=ResourceNotFoundError("User", user_id),
        ) from exc
    return jsonify(user_info.to_dict()), 200
