from flask import Blueprint, current_app, jsonify, request

from ...extensions import db
from ...services import loan_service
from ..errors import store_errors

bp = Blueprint("loans", __name__, url_prefix="/api/v1/loans")


def _json() -> dict:
    return request.get_json(silent=True) or {}


def _statuses():
    return current_app.config.get("LOAN_STATUSES") or None


def _not_found(loan_id):
    return jsonify(message=f"Loan with ID {loan_id} not found."), 404


# ---------- CRUD (colección) ----------
@bp.get("", strict_slashes=False)
@store_errors("Error getting all loans")
def list_loans():
    return jsonify(loan_service.get_all_loans(db.session)), 200


@bp.post("", strict_slashes=False)
@store_errors("Error creating the loan")
def create_loan():
    new_loan = loan_service.create_loan(db.session, _json(), allowed_statuses=_statuses())
    return jsonify(new_loan), 201


# ---------- RUTAS ESPECÍFICAS ----------
# Deben registrarse antes de "/<loan_id>": "active" no es un id.
@bp.get("/active")
@store_errors("Error getting active loans")
def list_active_loans():
    return jsonify(loan_service.get_active_loans(db.session)), 200


@bp.get("/user/<user_id>")
@store_errors("Error getting the user's loans")
def list_loans_by_user(user_id):
    # lista vacía (200) si el usuario no tiene préstamos
    return jsonify(loan_service.get_loans_by_user_id(db.session, user_id)), 200


@bp.get("/history/<isbn>")
@store_errors("Error getting the book's loan history")
def list_loan_history(isbn):
    return jsonify(loan_service.get_loan_history_by_isbn(db.session, isbn)), 200


# ---------- RUTAS DINÁMICAS POR ID (al final) ----------
@bp.get("/<loan_id>")
@store_errors("Error getting the loan")
def get_loan(loan_id):
    loan = loan_service.get_loan_by_id(db.session, loan_id)
    if loan is None:
        return _not_found(loan_id)
    return jsonify(loan), 200


@bp.put("/<loan_id>")
@store_errors("Error updating the loan")
def update_loan(loan_id):
    updated = loan_service.update_loan_by_id(
        db.session, loan_id, _json(), allowed_statuses=_statuses()
    )
    if updated is None:
        return _not_found(loan_id)
    return jsonify(updated), 200


@bp.delete("/<loan_id>")
@store_errors("Error deleting the loan")
def delete_loan(loan_id):
    if not loan_service.delete_loan_by_id(db.session, loan_id):
        return _not_found(loan_id)
    return "", 204
