from library_loans.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id_user = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    # documento nacional u otro identificador externo
    identification = db.Column(db.String(30), unique=True, nullable=False, index=True)

    email = db.Column(db.String(255))
    phone = db.Column(db.String(30))

    def to_dict(self) -> dict:
        return {
            "id_user": self.id_user,
            "name": self.name,
            "identification": self.identification,
            "email": self.email,
            "phone": self.phone,
        }
