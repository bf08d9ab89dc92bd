"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("inserted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    op.create_table(
        "source_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
    )

    op.create_table(
        "sources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *_timestamps(),
        sa.Column("author", sa.String(length=300), nullable=False),
        sa.Column("topic", sa.Text(), nullable=False),
        sa.Column("publication", sa.String(length=500), nullable=True),
        sa.Column("url", sa.String(length=2000), nullable=True),
        sa.Column("source_type_id", sa.Integer(), sa.ForeignKey("source_types.id"), nullable=False),
    )
    op.create_index("ix_sources_source_type_id", "sources", ["source_type_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *_timestamps(),
        sa.Column("text", sa.String(length=500), nullable=False, unique=True),
    )

    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *_timestamps(),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("page_start", sa.Integer(), nullable=True),
        sa.Column("page_end", sa.Integer(), nullable=True),
        sa.Column("volume", sa.String(length=100), nullable=True),
        sa.Column("issue", sa.String(length=100), nullable=True),
        sa.Column("extras", sa.Text(), nullable=True),
        sa.Column("source_id", sa.Integer(), sa.ForeignKey("sources.id"), nullable=False),
    )
    op.create_index("ix_quotes_source_id", "quotes", ["source_id"])

    op.create_table(
        "quote_tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *_timestamps(),
        sa.Column("quote_id", sa.Integer(), sa.ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint("quote_id", "tag_id", name="uq_quote_tags_quote_tag"),
    )
    op.create_index("ix_quote_tags_quote_id", "quote_tags", ["quote_id"])
    op.create_index("ix_quote_tags_tag_id", "quote_tags", ["tag_id"])


def downgrade():
    op.drop_index("ix_quote_tags_tag_id", table_name="quote_tags")
    op.drop_index("ix_quote_tags_quote_id", table_name="quote_tags")
    op.drop_table("quote_tags")
    op.drop_index("ix_quotes_source_id", table_name="quotes")
    op.drop_table("quotes")
    op.drop_table("tags")
    op.drop_index("ix_sources_source_type_id", table_name="sources")
    op.drop_table("sources")
    op.drop_table("source_types")
