"""
Data access for the ``loans`` table.

Every function receives the SQLAlchemy session explicitly and runs a single
parameterized statement. Absence is reported with ``None`` / ``False``;
store failures propagate to the caller untouched.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from library_loans.models.loan import Loan

ACTIVE_STATUS = "checked out"
OVERDUE_STATUS = "overdue"


class LoanStatusError(ValueError):
    """Status outside the configured LOAN_STATUSES whitelist."""


def parse_date(value: Any) -> date | None:
    """
    Acepta None, "", date, "YYYY-MM-DD" o ISO 8601 completo (con o sin Z).
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    v = str(value).strip()
    if v.endswith("Z"):
        v = v[:-1]
    try:
        return date.fromisoformat(v)
    except ValueError:
        return datetime.fromisoformat(v).date()


def _as_id(value: Any) -> Any:
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def _status_allowed(status, allowed_statuses: Iterable[str] | None) -> bool:
    return not allowed_statuses or status in allowed_statuses


def _check_status(status, allowed_statuses: Iterable[str] | None) -> None:
    if not _status_allowed(status, allowed_statuses):
        raise LoanStatusError(
            f"Invalid loan status {status!r}; allowed: {', '.join(allowed_statuses)}"
        )


def _row_values(data: dict) -> dict:
    return {
        "id_user": data.get("id_user"),
        "isbn": data.get("isbn"),
        "loan_date": parse_date(data.get("loan_date")),
        "return_date": parse_date(data.get("return_date")),
        "status": data.get("status"),
    }


def _dicts(session: Session, stmt) -> list[dict]:
    return [loan.to_dict() for loan in session.execute(stmt).scalars()]


def get_all_loans(session: Session) -> list[dict]:
    return _dicts(session, select(Loan))


def get_loan_by_id(session: Session, loan_id) -> dict | None:
    loan = session.execute(
        select(Loan).where(Loan.id_loan == loan_id)
    ).scalar_one_or_none()
    return loan.to_dict() if loan else None


def create_loan(session: Session, data: dict, allowed_statuses=None) -> dict:
    """
    Inserts the five loan fields and returns the generated id merged with the
    payload. The row is not read back, so store-side defaults are not reflected.
    """
    _check_status(data.get("status"), allowed_statuses)
    loan = Loan(**_row_values(data))
    session.add(loan)
    session.flush()
    new_id = loan.id_loan
    session.commit()
    return {"id": new_id, **data}


def update_loan_by_id(session: Session, loan_id, data: dict, allowed_statuses=None) -> dict | None:
    """
    Full-row overwrite. Returns None when no row has that id; an unknown id
    wins over a status outside the whitelist.
    """
    status = data.get("status")
    if not _status_allowed(status, allowed_statuses):
        if get_loan_by_id(session, loan_id) is None:
            return None
        _check_status(status, allowed_statuses)

    result = session.execute(
        update(Loan)
        .where(Loan.id_loan == loan_id)
        .values(**_row_values(data))
        .execution_options(synchronize_session=False)
    )
    session.commit()

    if result.rowcount == 0:
        return None
    return {"id": _as_id(loan_id), **data}


def delete_loan_by_id(session: Session, loan_id) -> bool:
    """Hard delete. True if a row was removed."""
    result = session.execute(
        delete(Loan)
        .where(Loan.id_loan == loan_id)
        .execution_options(synchronize_session=False)
    )
    session.commit()
    return result.rowcount > 0


def get_loans_by_user_id(session: Session, user_id) -> list[dict]:
    return _dicts(session, select(Loan).where(Loan.id_user == user_id))


def get_active_loans(session: Session) -> list[dict]:
    return _dicts(session, select(Loan).where(Loan.status == ACTIVE_STATUS))


def get_loan_history_by_isbn(session: Session, isbn: str) -> list[dict]:
    return _dicts(session, select(Loan).where(Loan.isbn == isbn))
