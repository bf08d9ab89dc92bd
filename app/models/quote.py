import datetime

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, backref, mapped_column, relationship
from app.db.session import Base
from app.models.common import IntIdMixin, TimestampMixin
from app.models.quote_tag import QuoteTag
from app.models.source import Source
from app.models.tag import Tag

class Quote(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "quotes"
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    page_start: Mapped[int | None] = mapped_column(Integer, nullable=True)
    page_end: Mapped[int | None] = mapped_column(Integer, nullable=True)
    volume: Mapped[str | None] = mapped_column(String(100), nullable=True)
    issue: Mapped[str | None] = mapped_column(String(100), nullable=True)
    extras: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_id: Mapped[int] = mapped_column(Integer, ForeignKey("sources.id"), nullable=False, index=True)

    source: Mapped[Source] = relationship(Source)
    # Association rows are written in bulk by the quote transaction, never through these collections.
    tags: Mapped[list[Tag]] = relationship(
        Tag,
        secondary=QuoteTag.__table__,
        viewonly=True,
        order_by=Tag.id,
        backref=backref("quotes", viewonly=True, order_by="Quote.id"),
    )
