from app.models.author import Author
from app.models.quote import Quote
from app.models.source import Source
from app.models.source_type import SourceType
from app.models.tag import Tag


def source_type_row(row: SourceType):
    return {"id": row.id, "name": row.name}


def author_row(row: Author):
    return {
        "id": row.id,
        "firstName": row.first_name,
        "middleName": row.middle_name,
        "lastName": row.last_name,
        "name": row.name,
    }


def source_row(row: Source):
    return {
        "id": row.id,
        "author": row.author,
        "topic": row.topic,
        "publication": row.publication,
        "url": row.url,
        "display": row.display,
        "sourceTypeId": row.source_type_id,
        "sourceType": source_type_row(row.source_type) if row.source_type else None,
        "authorId": row.author_id,
    }


def tag_row(row: Tag):
    return {"id": row.id, "text": row.text}


def quote_row(row: Quote):
    return {
        "id": row.id,
        "text": row.text,
        "date": row.date.isoformat() if row.date else None,
        "pageStart": row.page_start,
        "pageEnd": row.page_end,
        "volume": row.volume,
        "issue": row.issue,
        "extras": row.extras,
        "sourceId": row.source_id,
        "source": source_row(row.source) if row.source else None,
        "tags": [tag_row(t) for t in row.tags],
        "insertedAt": row.inserted_at.isoformat() if row.inserted_at else None,
    }


def tag_with_quotes_row(row: Tag):
    return {
        **tag_row(row),
        "quotes": [
            {
                "id": q.id,
                "text": q.text,
                "date": q.date.isoformat() if q.date else None,
                "source": {"display": q.source.display} if q.source else None,
            }
            for q in row.quotes
        ],
    }


def author_with_sources_row(row: Author):
    return {**author_row(row), "sources": [source_row(s) for s in row.sources]}

