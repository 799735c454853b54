from .user import User
from .book import Book
from .loan import Loan


__all__ = ["User", "Book", "Loan"]
