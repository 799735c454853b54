import os
import sys
from datetime import date

# Ensure project root is on PYTHONPATH
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest
from sqlalchemy.pool import StaticPool

from library_loans.extensions import db
from library_loans.models import Book, Loan, User


TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "SQLALCHEMY_ENGINE_OPTIONS": {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    },
    "SQLALCHEMY_TRACK_MODIFICATIONS": False,
    "ENFORCE_FOREIGN_KEYS": False,
    "LOAN_STATUSES": (),
}


def make_app(**overrides):
    from library_loans import create_app

    return create_app(config_overrides={**TEST_CONFIG, **overrides})


@pytest.fixture()
def app():
    app = make_app()

    with app.app_context():
        db.drop_all()
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def ensure_user(id_user: int, name: str | None = None, identification: str | None = None):
    user = db.session.get(User, id_user)
    if user is None:
        user = User(
            id_user=id_user,
            name=name or f"User {id_user}",
            identification=identification or f"ID-{id_user}",
            email=f"user{id_user}@test.local",
            phone="555-0100",
        )
        db.session.add(user)
        db.session.commit()
    return user


def ensure_book(isbn: str, title: str | None = None, author: str = "Author"):
    book = db.session.get(Book, isbn)
    if book is None:
        book = Book(isbn=isbn, title=title or f"Book {isbn}", author=author, release_year=2000)
        db.session.add(book)
        db.session.commit()
    return book


def add_loan(id_user: int, isbn: str, status: str = "checked out", loan_date: date = date(2024, 1, 1)):
    ensure_user(id_user)
    ensure_book(isbn)
    loan = Loan(id_user=id_user, isbn=isbn, loan_date=loan_date, status=status)
    db.session.add(loan)
    db.session.commit()
    return loan.id_loan
