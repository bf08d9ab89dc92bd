from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.db.session import get_db
from app.models.author import Author
from app.models.source import Source
from app.models.source_type import SourceType
from app.schemas.catalog import SourceCreate
from app.services.validation import MAX_INT, optional_text, require_text
from app.api.catalog.common import source_row

router = APIRouter()


@router.get("")
def list_sources(db: Session = Depends(get_db)):
    rows = db.query(Source).order_by(Source.id.asc()).all()
    return [source_row(r) for r in rows]


@router.get("/{source_id}")
def get_source(source_id: int = Path(..., ge=1, le=MAX_INT), db: Session = Depends(get_db)):
    row = db.get(Source, source_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Source not found")
    return source_row(row)


@router.post("", status_code=201)
def create_source(payload: SourceCreate, db: Session = Depends(get_db)):
    try:
        author = require_text("author", payload.author)
        topic = require_text("topic", payload.topic)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if db.get(SourceType, payload.source_type_id) is None:
        raise HTTPException(status_code=400, detail="Source type not found")
    if payload.author_id is not None and db.get(Author, payload.author_id) is None:
        raise HTTPException(status_code=400, detail="Author not found")
    row = Source(
        author=author,
        topic=topic,
        publication=optional_text(payload.publication),
        url=optional_text(payload.url),
        source_type_id=payload.source_type_id,
        author_id=payload.author_id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return source_row(row)
