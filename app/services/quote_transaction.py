from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy import insert
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import TransactionAbortError, ValidationError
from app.models.common import utcnow
from app.models.quote import Quote
from app.models.quote_tag import QuoteTag
from app.schemas.catalog import CreateQuoteInput
from app.services.validation import (
    MAX_INT,
    check_length,
    integrity_error_to_validation,
    optional_text,
    parse_id,
    require_text,
)

logger = logging.getLogger(__name__)

Step = Callable[[Session, CreateQuoteInput, dict[str, Any]], Any]

VOLUME_MAX_LENGTH = 100
ISSUE_MAX_LENGTH = 100


@dataclass(frozen=True)
class QuoteWriteResult:
    quote: Quote
    tag_count: int


def _validated_pages(page_start: int | None, page_end: int | None, errors: dict[str, list[str]]) -> None:
    if page_start is not None and page_start < 0:
        errors.setdefault("page_start", []).append("must be greater than or equal to 0")
    if page_end is not None and page_end < 0:
        errors.setdefault("page_end", []).append("must be greater than or equal to 0")
    if page_start is not None and page_start > MAX_INT:
        errors.setdefault("page_start", []).append(f"must be less than or equal to {MAX_INT}")
    if page_end is not None and page_end > MAX_INT:
        errors.setdefault("page_end", []).append(f"must be less than or equal to {MAX_INT}")
    if page_start is not None and page_end is not None and page_end < page_start:
        errors.setdefault("page_end", []).append("must be greater than or equal to page_start")


def _insert_quote(db: Session, payload: CreateQuoteInput, changes: dict[str, Any]) -> Quote:
    errors: dict[str, list[str]] = {}
    text = source_id = None
    try:
        text = require_text("text", payload.text)
    except ValidationError as exc:
        errors.update(exc.errors)
    try:
        source_id = parse_id("source_id", payload.source_id)
    except ValidationError as exc:
        errors.update(exc.errors)
    volume = optional_text(payload.volume)
    issue = optional_text(payload.issue)
    for field, value, max_length in (("volume", volume, VOLUME_MAX_LENGTH), ("issue", issue, ISSUE_MAX_LENGTH)):
        try:
            check_length(field, value, max_length)
        except ValidationError as exc:
            errors.update(exc.errors)
    _validated_pages(payload.page_start, payload.page_end, errors)
    if errors:
        raise ValidationError.from_errors(errors)

    quote = Quote(
        text=text,
        source_id=source_id,
        date=payload.date,
        page_start=payload.page_start,
        page_end=payload.page_end,
        volume=volume,
        issue=issue,
        extras=optional_text(payload.extras),
    )
    db.add(quote)
    try:
        # Source existence is left to the foreign key.
        db.flush()
    except (IntegrityError, DataError) as exc:
        raise integrity_error_to_validation("source_id", exc)
    return quote


def _parse_tag_ids(raw_tags: list) -> list[int]:
    tag_ids = [parse_id("tags", raw) for raw in raw_tags]
    if len(set(tag_ids)) != len(tag_ids):
        raise ValidationError("tags", "has duplicates")
    return tag_ids


def _insert_quote_tags(db: Session, payload: CreateQuoteInput, changes: dict[str, Any]) -> int:
    quote: Quote = changes["quote"]
    tag_ids = _parse_tag_ids(payload.tags)
    if not tag_ids:
        return 0

    now = utcnow()
    rows = [
        {"tag_id": tag_id, "quote_id": quote.id, "inserted_at": now, "updated_at": now}
        for tag_id in tag_ids
    ]
    try:
        db.execute(insert(QuoteTag), rows)
    except (IntegrityError, DataError) as exc:
        raise integrity_error_to_validation("tags", exc)
    return len(rows)


QUOTE_WRITE_STEPS: tuple[tuple[str, Step], ...] = (
    ("quote", _insert_quote),
    ("quote_tags", _insert_quote_tags),
)


def run_steps(db: Session, steps: tuple[tuple[str, Step], ...], payload: CreateQuoteInput) -> dict[str, Any]:
    """Run named write steps in the session's transaction and commit them together.

    The first step raising ``ValidationError`` rolls the whole transaction back
    and surfaces as ``TransactionAbortError``. Any other error also rolls
    back and propagates unchanged. Each step sees the results of the
    previous ones in ``changes``.
    """
    changes: dict[str, Any] = {}
    for name, step in steps:
        try:
            changes[name] = step(db, payload, changes)
        except ValidationError as exc:
            db.rollback()
            logger.warning(
                "quote write aborted step=%s fields=%s succeeded=%s",
                name,
                ",".join(exc.errors),
                ",".join(changes) or "-",
            )
            raise TransactionAbortError(name, exc.errors, tuple(changes)) from exc
        except Exception:
            db.rollback()
            raise
    db.commit()
    return changes


def create_with_tags(db: Session, payload: CreateQuoteInput) -> QuoteWriteResult:
    changes = run_steps(db, QUOTE_WRITE_STEPS, payload)
    quote: Quote = changes["quote"]
    db.refresh(quote)
    logger.info("quote created id=%s source_id=%s tag_count=%s", quote.id, quote.source_id, changes["quote_tags"])
    return QuoteWriteResult(quote=quote, tag_count=changes["quote_tags"])
