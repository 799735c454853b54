from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from library_loans.models import Book, Loan, User
from library_loans.seeders.csv_rows import CsvRows
from library_loans.services.loan_service import parse_date

logger = logging.getLogger(__name__)

USERS_FILE = "users.csv"
BOOKS_FILE = "books.csv"
LOANS_FILE = "library-loans.csv"


def users_source(data_dir: Path | str) -> CsvRows:
    return CsvRows(
        Path(data_dir) / USERS_FILE,
        headers=["name", "identification", "email", "phone"],
        skip_lines=1,
    )


def books_source(data_dir: Path | str) -> CsvRows:
    return CsvRows(
        Path(data_dir) / BOOKS_FILE,
        headers=["isbn", "title", "release_year", "author"],
        skip_lines=1,
    )


def loans_source(data_dir: Path | str) -> CsvRows:
    return CsvRows(Path(data_dir) / LOANS_FILE)


def _bulk_insert(session: Session, model, rows: list[dict]) -> int:
    if rows:
        session.execute(insert(model), rows)
    session.commit()
    return len(rows)


def load_users(session: Session, rows: Iterable[dict]) -> int:
    users = [
        {
            "name": r["name"],
            "identification": r["identification"],
            "email": r.get("email") or None,
            "phone": r.get("phone") or None,
        }
        for r in rows
    ]
    count = _bulk_insert(session, User, users)
    logger.info("%s users inserted", count)
    return count


def load_books(session: Session, rows: Iterable[dict]) -> int:
    books = [
        {
            "isbn": r["isbn"],
            "title": r["title"],
            "author": r.get("author") or None,
            "release_year": int(r["release_year"]) if r.get("release_year") else None,
        }
        for r in rows
    ]
    count = _bulk_insert(session, Book, books)
    logger.info("%s books inserted", count)
    return count


def load_loans(session: Session, rows: Iterable[dict]) -> int:
    """
    Loans reference users by their external identification; rows whose user
    is unknown or whose isbn is empty are dropped.
    """
    user_ids = dict(session.execute(select(User.identification, User.id_user)).all())

    loans = []
    for r in rows:
        id_user = user_ids.get(r.get("identification"))
        isbn = r.get("isbn")
        if not id_user or not isbn:
            continue
        loans.append(
            {
                "id_user": id_user,
                "isbn": isbn,
                "loan_date": parse_date(r.get("loan_date")),
                "return_date": parse_date(r.get("return_date")),
                "status": r.get("status") or None,
            }
        )

    count = _bulk_insert(session, Loan, loans)
    logger.info("%s loans inserted", count)
    return count


def run_seeders(session: Session, data_dir: Path | str) -> dict[str, int | None]:
    """
    Loads users, books and loans in that order. A failing table is rolled
    back and logged; the remaining tables are still attempted.
    Returns {table: inserted count, or None when it failed}.
    """
    steps = [
        ("users", load_users, users_source(data_dir)),
        ("books", load_books, books_source(data_dir)),
        ("loans", load_loans, loans_source(data_dir)),
    ]

    summary: dict[str, int | None] = {}
    for table, loader, source in steps:
        logger.info("Filling the '%s' table from %r", table, source)
        try:
            summary[table] = loader(session, source)
        except Exception:
            session.rollback()
            logger.exception("Error loading %s", table)
            summary[table] = None
    return summary
