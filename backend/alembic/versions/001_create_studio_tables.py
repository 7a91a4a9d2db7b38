"""Create studio tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the five entity tables: users, contacts, bookings,
       portfolio_items, messages.
How:   Integer identity keys; `created_at` defaults to CURRENT_TIMESTAMP on
       every table except `users`.

Rollback: downgrade() drops all five tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
        comment="When this row was created (UTC)",
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(64), nullable=False, comment="Unique login name"),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "contacts",
        _id_column(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "bookings",
        _id_column(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("event_type", sa.String(100), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("location", sa.String(300), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "portfolio_items",
        _id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=False, comment="Durable URL on the image host"),
        sa.Column("category", sa.String(100), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    # Gallery pages filter by category
    op.create_index("ix_portfolio_items_category", "portfolio_items", ["category"])

    op.create_table(
        "messages",
        _id_column(),
        sa.Column("sender", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("subject", sa.String(300), nullable=True),
        sa.Column("body", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_index("ix_portfolio_items_category", table_name="portfolio_items")
    op.drop_table("portfolio_items")
    op.drop_table("bookings")
    op.drop_table("contacts")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
