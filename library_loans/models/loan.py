from ..extensions import db


class Loan(db.Model):
    __tablename__ = "loans"

    id_loan = db.Column(db.Integer, primary_key=True)

    id_user = db.Column(
        db.Integer,
        db.ForeignKey("users.id_user"),
        nullable=False,
        index=True
    )

    isbn = db.Column(
        db.String(20),
        db.ForeignKey("books.isbn"),
        nullable=False,
        index=True
    )

    loan_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date, nullable=True)

    # checked out | returned | overdue (texto libre salvo LOAN_STATUSES)
    status = db.Column(db.String(20), nullable=True, index=True)

    def to_dict(self) -> dict:
        return {
            "id_loan": self.id_loan,
            "id_user": self.id_user,
            "isbn": self.isbn,
            "loan_date": self.loan_date.isoformat() if self.loan_date else None,
            "return_date": self.return_date.isoformat() if self.return_date else None,
            "status": self.status,
        }
