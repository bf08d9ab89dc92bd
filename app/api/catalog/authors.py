from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.db.session import get_db
from app.models.author import Author
from app.schemas.catalog import AuthorCreate
from app.services.validation import MAX_INT, check_length, optional_text, require_text
from app.api.catalog.common import author_row, author_with_sources_row

router = APIRouter()

NAME_MAX_LENGTH = 200


@router.get("")
def list_authors(db: Session = Depends(get_db)):
    rows = db.query(Author).order_by(Author.last_name.asc(), Author.id.asc()).all()
    return [author_row(r) for r in rows]


@router.get("/{author_id}")
def get_author(author_id: int = Path(..., ge=1, le=MAX_INT), db: Session = Depends(get_db)):
    row = db.get(Author, author_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author_with_sources_row(row)


@router.post("", status_code=201)
def create_author(payload: AuthorCreate, db: Session = Depends(get_db)):
    try:
        last_name = require_text("last_name", payload.last_name)
        first_name = optional_text(payload.first_name)
        middle_name = optional_text(payload.middle_name)
        for field, value in (("first_name", first_name), ("middle_name", middle_name), ("last_name", last_name)):
            check_length(field, value, NAME_MAX_LENGTH)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    row = Author(first_name=first_name, middle_name=middle_name, last_name=last_name)
    db.add(row)
    db.commit()
    db.refresh(row)
    return author_row(row)
