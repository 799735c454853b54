from functools import wraps

from flask import current_app, jsonify

from ..extensions import db


def store_errors(message: str):
    """
    Uso:
      @store_errors("Error getting all loans")

    Any exception raised by the handler is rolled back, logged and answered
    with 500 {message, error}.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                db.session.rollback()
                current_app.logger.exception("%s | %s", message, exc)
                return jsonify(message=message, error=str(exc)), 500
        return wrapper
    return decorator
