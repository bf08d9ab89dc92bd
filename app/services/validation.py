from __future__ import annotations

from sqlalchemy.exc import DataError, IntegrityError

from app.core.errors import ForeignKeyError, ValidationError

# Upper bound of the INTEGER id and page columns.
MAX_INT = 2_147_483_647


def parse_id(field: str, value) -> int:
    """Coerce an id given as int or numeric string, raising ``ValidationError`` on anything else."""
    if isinstance(value, bool):
        raise ValidationError(field, "is invalid")
    if isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValidationError(field, "is invalid")
        try:
            parsed = int(text)
        except ValueError:
            raise ValidationError(field, "is invalid")
    if parsed < 1 or parsed > MAX_INT:
        raise ValidationError(field, "is invalid")
    return parsed


def require_text(field: str, value: str | None) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValidationError(field, "can't be blank")
    return text


def optional_text(value: str | None) -> str | None:
    text = str(value or "").strip()
    return text or None


def check_length(field: str, value: str | None, max_length: int) -> None:
    if value is not None and len(value) > max_length:
        raise ValidationError(field, f"should be at most {max_length} character(s)")


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    # psycopg exposes the SQLSTATE, sqlite only the message.
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == "23503"
    return "foreign key" in str(orig).lower()


def integrity_error_to_validation(field: str, exc: IntegrityError | DataError) -> ValidationError:
    if isinstance(exc, DataError):
        return ValidationError(field, "is invalid")
    if is_foreign_key_violation(exc):
        return ForeignKeyError(field)
    return ValidationError(field, "has already been taken")
