from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import IntIdMixin, TimestampMixin

class Author(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "authors"
    first_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    last_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    @property
    def name(self) -> str:
        return " ".join(part for part in (self.first_name, self.middle_name, self.last_name) if part)
