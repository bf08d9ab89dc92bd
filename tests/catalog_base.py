import os
import unittest

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.db.session import enable_sqlite_foreign_keys
from app.models.author import Author
from app.models.quote import Quote
from app.models.quote_tag import QuoteTag
from app.models.source import Source
from app.models.source_type import SourceType
from app.models.tag import Tag
from app.schemas.catalog import CreateQuoteInput
from app.services.quote_transaction import create_with_tags

# Creation order; dropped and cleared in reverse.
CATALOG_MODELS = (SourceType, Author, Source, Tag, Quote, QuoteTag)


class CatalogDbTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        enable_sqlite_foreign_keys(cls.engine)
        cls.SessionLocal = sessionmaker(bind=cls.engine, autocommit=False, autoflush=False)
        for model in CATALOG_MODELS:
            model.__table__.create(bind=cls.engine)

    @classmethod
    def tearDownClass(cls):
        for model in reversed(CATALOG_MODELS):
            model.__table__.drop(bind=cls.engine)
        cls.engine.dispose()

    def setUp(self):
        with self.SessionLocal() as db:
            for model in reversed(CATALOG_MODELS):
                db.execute(delete(model))
            db.commit()
        self.db = self.SessionLocal()

    def tearDown(self):
        self.db.close()

    def _source_type(self, name: str = "Journal") -> SourceType:
        row = SourceType(name=name)
        self.db.add(row)
        self.db.commit()
        return row

    def _source(self, source_type: SourceType | None = None, **overrides) -> Source:
        source_type = source_type or self._source_type()
        values = {
            "author": "Ciferno",
            "topic": "Biomass gasification",
            "publication": None,
            "url": None,
        }
        values.update(overrides)
        row = Source(source_type_id=source_type.id, **values)
        self.db.add(row)
        self.db.commit()
        return row

    def _tag(self, text: str) -> Tag:
        row = Tag(text=text)
        self.db.add(row)
        self.db.commit()
        return row

    def _quote(self, source: Source, text: str, tags=(), **fields) -> Quote:
        payload = CreateQuoteInput(text=text, source_id=source.id, tags=[t.id for t in tags], **fields)
        return create_with_tags(self.db, payload).quote
