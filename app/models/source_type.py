from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import IntIdMixin, TimestampMixin

class SourceType(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "source_types"
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
