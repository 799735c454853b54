from flask import Blueprint, jsonify

from ...extensions import db
from ...services import user_service
from ..errors import store_errors

bp = Blueprint("users", __name__, url_prefix="/api/v1/users")


@bp.get("/with-overdue")
@store_errors("Error getting users with overdue loans")
def list_users_with_overdue_loans():
    return jsonify(user_service.get_users_with_overdue_loans(db.session)), 200
