"""add authors
Revision ID: 0002_add_authors
Revises: 0001_init
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0002_add_authors"
down_revision = "0001_init"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("inserted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("first_name", sa.String(length=200), nullable=True),
        sa.Column("middle_name", sa.String(length=200), nullable=True),
        sa.Column("last_name", sa.String(length=200), nullable=False),
    )
    op.create_index("ix_authors_last_name", "authors", ["last_name"])

    op.add_column("sources", sa.Column("author_id", sa.Integer(), nullable=True))
    op.create_foreign_key(
        "fk_sources_author_id_authors", "sources", "authors", ["author_id"], ["id"], ondelete="SET NULL"
    )
    op.create_index("ix_sources_author_id", "sources", ["author_id"])


def downgrade():
    op.drop_index("ix_sources_author_id", table_name="sources")
    op.drop_constraint("fk_sources_author_id_authors", "sources", type_="foreignkey")
    op.drop_column("sources", "author_id")
    op.drop_index("ix_authors_last_name", table_name="authors")
    op.drop_table("authors")
