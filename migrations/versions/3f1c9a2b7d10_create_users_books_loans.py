"""Create users, books and loans tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f1c9a2b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id_user", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("identification", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=30), nullable=True),
    )
    op.create_index("ix_users_identification", "users", ["identification"], unique=True)

    op.create_table(
        "books",
        sa.Column("isbn", sa.String(length=20), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=True),
        sa.Column("release_year", sa.Integer(), nullable=True),
    )
    op.create_index("ix_books_title", "books", ["title"], unique=False)
    op.create_index("ix_books_author", "books", ["author"], unique=False)

    op.create_table(
        "loans",
        sa.Column("id_loan", sa.Integer(), primary_key=True),
        sa.Column("id_user", sa.Integer(), nullable=False),
        sa.Column("isbn", sa.String(length=20), nullable=False),
        sa.Column("loan_date", sa.Date(), nullable=False),
        sa.Column("return_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=True),
        sa.ForeignKeyConstraint(["id_user"], ["users.id_user"], name="fk_loans_id_user_users"),
        sa.ForeignKeyConstraint(["isbn"], ["books.isbn"], name="fk_loans_isbn_books"),
    )
    op.create_index("ix_loans_id_user", "loans", ["id_user"], unique=False)
    op.create_index("ix_loans_isbn", "loans", ["isbn"], unique=False)
    op.create_index("ix_loans_status", "loans", ["status"], unique=False)


def downgrade():
    op.drop_index("ix_loans_status", table_name="loans")
    op.drop_index("ix_loans_isbn", table_name="loans")
    op.drop_index("ix_loans_id_user", table_name="loans")
    op.drop_table("loans")

    op.drop_index("ix_books_author", table_name="books")
    op.drop_index("ix_books_title", table_name="books")
    op.drop_table("books")

    op.drop_index("ix_users_identification", table_name="users")
    op.drop_table("users")
