from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.db.session import get_db
from app.models.source_type import SourceType
from app.schemas.catalog import SourceTypeCreate
from app.services.validation import require_text
from app.api.catalog.common import source_type_row

router = APIRouter()


@router.get("")
def list_source_types(db: Session = Depends(get_db)):
    rows = db.query(SourceType).order_by(SourceType.name.asc()).all()
    return [source_type_row(r) for r in rows]


@router.post("", status_code=201)
def create_source_type(payload: SourceTypeCreate, db: Session = Depends(get_db)):
    try:
        row = SourceType(name=require_text("name", payload.name))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Source type with this name already exists")
    return source_type_row(row)
