"""
Federated substring search over the catalog tables.

Every searchable (table, column) pair becomes one ``SELECT`` and all of them
are combined into a single ``UNION`` so one round trip answers the whole
search. Each sub-query carries the table name and the column name as literal
columns, which is how a matched row finds its way back to its bucket.
"""

from __future__ import annotations

import logging
from enum import Enum

from sqlalchemy import String, Text, cast, literal_column, select, union
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from app.core.errors import SearchConfigurationError
from app.models.quote import Quote
from app.models.source import Source
from app.models.source_type import SourceType
from app.models.tag import Tag
from app.schemas.catalog import QuoteFullSearchTable, SearchResultRow, SearchResultSet

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


class SearchTable(str, Enum):
    QUOTES = "quotes"
    SOURCES = "sources"
    TAGS = "tags"
    SOURCE_TYPES = "source_types"


SEARCH_MODELS = {
    SearchTable.QUOTES: Quote,
    SearchTable.SOURCES: Source,
    SearchTable.TAGS: Tag,
    SearchTable.SOURCE_TYPES: SourceType,
}

SEARCH_COLUMNS = {
    SearchTable.QUOTES: (Quote.text, Quote.volume, Quote.issue, Quote.extras),
    SearchTable.SOURCES: (Source.author, Source.topic, Source.publication, Source.url),
    SearchTable.TAGS: (Tag.text,),
    SearchTable.SOURCE_TYPES: (SourceType.name,),
}


def _column_python_type(column):
    try:
        return column.property.columns[0].type.python_type
    except (AttributeError, IndexError, NotImplementedError):
        return None


def validate_search_columns(columns: dict, models: dict) -> None:
    """Check the table/column mapping once, before any search runs."""
    missing = [table.value for table in SearchTable if table not in columns or table not in models]
    if missing:
        raise SearchConfigurationError(f"No searchable columns configured for: {', '.join(missing)}")
    for table, table_columns in columns.items():
        model = models[table]
        if model.__tablename__ != table.value:
            raise SearchConfigurationError(f"Model {model.__name__} is not mapped to table {table.value}")
        if not table_columns:
            raise SearchConfigurationError(f"Table {table.value} has an empty column list")
        seen: set[str] = set()
        for column in table_columns:
            if getattr(column, "class_", None) is not model:
                raise SearchConfigurationError(f"Column {column!r} does not belong to {table.value}")
            if _column_python_type(column) is not str:
                raise SearchConfigurationError(f"Column {table.value}.{column.key} is not a text column")
            if column.key in seen:
                raise SearchConfigurationError(f"Column {table.value}.{column.key} is listed twice")
            seen.add(column.key)


validate_search_columns(SEARCH_COLUMNS, SEARCH_MODELS)


def substring_pattern(text: str) -> str:
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _sql_string(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_search_statement(text: str):
    pattern = substring_pattern(text)
    selects: list[Select] = []
    for table, table_columns in SEARCH_COLUMNS.items():
        model = SEARCH_MODELS[table]
        for column in table_columns:
            selects.append(
                select(
                    model.id.label("tid"),
                    cast(column, Text).label("text"),
                    literal_column(_sql_string(table.value), String).label("source"),
                    literal_column(_sql_string(column.key), String).label("column"),
                ).where(column.ilike(pattern, escape=LIKE_ESCAPE))
            )
    return union(*selects)


def _parse_row(row) -> SearchResultRow:
    table = SearchTable(row["source"])
    return SearchResultRow(
        tid=row["tid"],
        text=row["text"],
        source=QuoteFullSearchTable[table.name],
        column=row["column"],
    )


def group_rows(rows) -> SearchResultSet:
    buckets: dict[str, list[SearchResultRow]] = {table.value: [] for table in SearchTable}
    for row in rows:
        parsed = _parse_row(row)
        buckets[SearchTable(row["source"]).value].append(parsed)
    return SearchResultSet(**buckets)


def full_text_search(db: Session, text: str) -> SearchResultSet:
    needle = str(text or "").strip()
    if not needle:
        return SearchResultSet()

    rows = db.execute(build_search_statement(needle)).mappings().all()
    result = group_rows(rows)
    logger.info(
        "full text search text=%r quotes=%s sources=%s tags=%s source_types=%s",
        needle,
        len(result.quotes),
        len(result.sources),
        len(result.tags),
        len(result.source_types),
    )
    return result
