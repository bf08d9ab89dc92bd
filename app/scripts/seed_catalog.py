from __future__ import annotations

from sqlalchemy.orm import Session

from app.data.catalog_seed import SOURCE_TYPES, TAGS
from app.db.session import SessionLocal
from app.models.source_type import SourceType
from app.models.tag import Tag


def upsert_source_types(db: Session, names: list[str]) -> int:
    created = 0
    for raw in names:
        name = str(raw).strip()
        if not name:
            continue
        if db.query(SourceType).filter(SourceType.name == name).first() is None:
            db.add(SourceType(name=name))
            created += 1
    db.commit()
    return created


def upsert_tags(db: Session, texts: list[str]) -> int:
    created = 0
    for raw in texts:
        text = str(raw).strip()
        if not text:
            continue
        if db.query(Tag).filter(Tag.text == text).first() is None:
            db.add(Tag(text=text))
            created += 1
    db.commit()
    return created


def main() -> None:
    db = SessionLocal()
    try:
        source_types = upsert_source_types(db, SOURCE_TYPES)
        tags = upsert_tags(db, TAGS)
        totals = (db.query(SourceType).count(), db.query(Tag).count())
    finally:
        db.close()
    print(
        f"catalog seed done: source_types created={source_types} total={totals[0]}, "
        f"tags created={tags} total={totals[1]}"
    )


if __name__ == "__main__":
    main()
