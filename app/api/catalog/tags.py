from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.db.session import get_db
from app.models.tag import Tag
from app.schemas.catalog import TagCreate
from app.services.validation import MAX_INT, require_text
from app.api.catalog.common import tag_row, tag_with_quotes_row

router = APIRouter()


@router.get("")
def list_tags(db: Session = Depends(get_db)):
    rows = db.query(Tag).order_by(Tag.text.asc()).all()
    return [tag_row(r) for r in rows]


@router.get("/by-text")
def get_tag_by_text(text: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    row = db.query(Tag).filter(Tag.text == text.strip()).first()
    if row is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag_with_quotes_row(row)


@router.get("/{tag_id}")
def get_tag(tag_id: int = Path(..., ge=1, le=MAX_INT), db: Session = Depends(get_db)):
    row = db.get(Tag, tag_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag_with_quotes_row(row)


@router.post("", status_code=201)
def create_tag(payload: TagCreate, db: Session = Depends(get_db)):
    try:
        row = Tag(text=require_text("text", payload.text))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Tag with this text already exists")
    return tag_row(row)
