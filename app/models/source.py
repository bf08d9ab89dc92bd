from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, backref, mapped_column, relationship
from app.db.session import Base
from app.models.author import Author
from app.models.common import IntIdMixin, TimestampMixin
from app.models.source_type import SourceType

class Source(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "sources"
    author: Mapped[str] = mapped_column(String(300), nullable=False)
    topic: Mapped[str] = mapped_column(Text, nullable=False)
    publication: Mapped[str | None] = mapped_column(String(500), nullable=True)
    url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    source_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("source_types.id"), nullable=False, index=True)
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="SET NULL"), nullable=True, index=True
    )

    source_type: Mapped[SourceType] = relationship(SourceType, lazy="joined")
    author_record: Mapped[Author | None] = relationship(
        Author, backref=backref("sources", order_by="Source.id")
    )

    @property
    def display(self) -> str:
        parts = [self.author, self.topic]
        if self.publication:
            parts.append(self.publication)
        return " | ".join(parts)
