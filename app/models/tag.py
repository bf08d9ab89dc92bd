from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import IntIdMixin, TimestampMixin

class Tag(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "tags"
    text: Mapped[str] = mapped_column(String(500), unique=True, nullable=False)
