from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from library_loans.models.book import Book
from library_loans.models.loan import Loan

TOP_BOOKS_LIMIT = 5


def get_top5_most_loaned_books(session: Session) -> list[dict]:
    """
    Books joined with their loans, counted per book, highest count first.
    Equal counts fall back to isbn order so the result is stable.
    """
    loan_count = func.count(Loan.id_loan).label("loan_count")
    stmt = (
        select(Book.isbn, Book.title, Book.author, loan_count)
        .select_from(Loan)
        .join(Book, Loan.isbn == Book.isbn)
        .group_by(Book.isbn, Book.title, Book.author)
        .order_by(loan_count.desc(), Book.isbn)
        .limit(TOP_BOOKS_LIMIT)
    )
    return [dict(row) for row in session.execute(stmt).mappings()]
