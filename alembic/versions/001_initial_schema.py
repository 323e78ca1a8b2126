"""Initial schema - accounts, inventory, ledger_entries, catalog_items + catalog seed.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from coinshop.core.catalog import catalog_rows

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("coins", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("username", name="uq_accounts_username"),
        sa.CheckConstraint("coins >= 0", name="ck_accounts_coins_non_negative"),
    )

    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer, sa.ForeignKey("accounts.id", name="fk_inventory_account_id_accounts"), nullable=False),
        sa.Column("item_type", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint("account_id", "item_type", name="uq_inventory_account_item"),
        sa.CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sender_account_id", sa.Integer, sa.ForeignKey("accounts.id", name="fk_ledger_entries_sender_account_id_accounts"), nullable=False),
        sa.Column("receiver_account_id", sa.Integer, sa.ForeignKey("accounts.id", name="fk_ledger_entries_receiver_account_id_accounts"), nullable=False),
        sa.Column("amount", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("amount > 0", name="ck_ledger_entries_amount_positive"),
        sa.CheckConstraint("sender_account_id <> receiver_account_id", name="ck_ledger_entries_distinct_parties"),
    )
    op.create_index("ix_ledger_entries_sender_account_id", "ledger_entries", ["sender_account_id"])
    op.create_index("ix_ledger_entries_receiver_account_id", "ledger_entries", ["receiver_account_id"])

    catalog_items = op.create_table(
        "catalog_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("price", sa.Integer, nullable=False),
        sa.UniqueConstraint("item_name", name="uq_catalog_items_item_name"),
        sa.CheckConstraint("price > 0", name="ck_catalog_items_price_positive"),
    )
    op.bulk_insert(catalog_items, catalog_rows())


def downgrade() -> None:
    op.drop_table("catalog_items")
    op.drop_index("ix_ledger_entries_receiver_account_id", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_sender_account_id", table_name="ledger_entries")
    op.drop_table("ledger_entries")
    op.drop_table("inventory")
    op.drop_table("accounts")
