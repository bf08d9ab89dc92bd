from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.common import IntIdMixin, TimestampMixin


class QuoteTag(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "quote_tags"
    __table_args__ = (UniqueConstraint("quote_id", "tag_id", name="uq_quote_tags_quote_tag"),)

    quote_id: Mapped[int] = mapped_column(Integer, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id: Mapped[int] = mapped_column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True)
