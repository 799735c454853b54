from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_loans.models.loan import Loan
from library_loans.models.user import User
from library_loans.services.loan_service import OVERDUE_STATUS


def get_users_with_overdue_loans(session: Session) -> list[dict]:
    # DISTINCT: un usuario con varios préstamos vencidos aparece una sola vez
    stmt = (
        select(User)
        .join(Loan, Loan.id_user == User.id_user)
        .where(Loan.status == OVERDUE_STATUS)
        .distinct()
        .order_by(User.id_user)
    )
    return [u.to_dict() for u in session.execute(stmt).scalars()]
