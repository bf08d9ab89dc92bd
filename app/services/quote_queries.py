from __future__ import annotations

from sqlalchemy.orm import Session

from app.models.quote import Quote
from app.models.source import Source
from app.services.validation import parse_id


def get_quotes_by(db: Session, filters: dict | None = None) -> list[Quote]:
    """All quotes, or only those of ``filters["source"]`` when a source id is given."""
    q = db.query(Quote)
    source = (filters or {}).get("source")
    if source is not None:
        source_id = parse_id("source", source)
        q = q.join(Source, Quote.source_id == Source.id).filter(Source.id == source_id)
    return q.order_by(Quote.id.asc()).all()
