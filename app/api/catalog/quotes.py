from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import TransactionAbortError, ValidationError
from app.db.session import get_db
from app.models.quote import Quote
from app.schemas.catalog import CreateQuoteInput
from app.services.full_text_search import full_text_search
from app.services.quote_queries import get_quotes_by
from app.services.quote_transaction import create_with_tags
from app.services.validation import MAX_INT
from app.api.catalog.common import quote_row

router = APIRouter()


@router.get("/search")
def quote_full_search(
    text: str = Query(..., min_length=1, max_length=settings.SEARCH_MAX_TEXT_LENGTH),
    db: Session = Depends(get_db),
):
    result = full_text_search(db, text)
    return result.model_dump(mode="json", by_alias=True)


@router.get("")
def list_quotes(source: Optional[str] = Query(None), db: Session = Depends(get_db)):
    try:
        rows = get_quotes_by(db, {"source": source} if source is not None else None)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return [quote_row(r) for r in rows]


@router.get("/{quote_id}")
def get_quote(quote_id: int = Path(..., ge=1, le=MAX_INT), db: Session = Depends(get_db)):
    row = db.get(Quote, quote_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote_row(row)


@router.post("", status_code=201)
def create_quote(payload: CreateQuoteInput, db: Session = Depends(get_db)):
    try:
        result = create_with_tags(db, payload)
    except TransactionAbortError as exc:
        raise HTTPException(status_code=400, detail=exc.as_detail())
    return quote_row(result.quote)
