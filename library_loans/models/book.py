from ..extensions import db


class Book(db.Model):
    __tablename__ = "books"

    isbn = db.Column(db.String(20), primary_key=True)

    title = db.Column(db.String(255), nullable=False, index=True)
    author = db.Column(db.String(255), index=True)
    release_year = db.Column(db.Integer)

    def to_dict(self) -> dict:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "release_year": self.release_year,
        }
