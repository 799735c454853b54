from flask import Blueprint, jsonify

from ...extensions import db
from ...services import book_service
from ..errors import store_errors

bp = Blueprint("books", __name__, url_prefix="/api/v1/books")


@bp.get("/most-loaned")
@store_errors("Error getting the top 5 most loaned books")
def list_top_books():
    return jsonify(book_service.get_top5_most_loaned_books(db.session)), 200
