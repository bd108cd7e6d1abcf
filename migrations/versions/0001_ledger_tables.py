"""Create ledger_accounts and journal_transactions.

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

ACCOUNT_TYPES = ("ASSET", "LIABILITY", "EQUITY", "REVENUE", "EXPENSE")
BALANCE_SIDES = ("DEBIT", "CREDIT")


def upgrade() -> None:
    op.create_table(
        "ledger_accounts",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "account_type",
            sa.Enum(*ACCOUNT_TYPES, name="account_type_enum"),
            nullable=False,
        ),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column(
            "normal_balance",
            sa.Enum(*BALANCE_SIDES, name="balance_side_enum"),
            nullable=False,
        ),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(
        "ix_ledger_accounts_position", "ledger_accounts", ["position"]
    )

    op.create_table(
        "journal_transactions",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("posted_at", sa.DateTime(), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column(
            "debit_account_id",
            sa.String(64),
            sa.ForeignKey("ledger_accounts.id"),
            nullable=False,
        ),
        sa.Column(
            "credit_account_id",
            sa.String(64),
            sa.ForeignKey("ledger_accounts.id"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    for column in ("posted_at", "debit_account_id", "credit_account_id"):
        op.create_index(
            f"ix_journal_transactions_{column}",
            "journal_transactions",
            [column],
        )


def downgrade() -> None:
    op.drop_table("journal_transactions")
    op.drop_table("ledger_accounts")
    sa.Enum(name="balance_side_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="account_type_enum").drop(op.get_bind(), checkfirst=True)
