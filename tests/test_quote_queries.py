from tests.catalog_base import CatalogDbTestCase
from app.core.errors import ValidationError
from app.services.quote_queries import get_quotes_by


class GetQuotesByTests(CatalogDbTestCase):
    def setUp(self):
        super().setUp()
        book = self._source_type("Book")
        self.first = self._source(book, author="Basu", topic="Biomass gasification and pyrolysis")
        self.second = self._source(book, author="Reed", topic="Handbook of biomass downdraft gasifier engine systems")
        self.empty = self._source(book, author="Nobody", topic="Unquoted work")
        self.q1 = self._quote(self.first, "first quote")
        self.q2 = self._quote(self.second, "second quote")
        self.q3 = self._quote(self.first, "third quote")

    def test_no_filter_returns_every_quote(self):
        self.assertEqual([q.id for q in get_quotes_by(self.db, None)], [self.q1.id, self.q2.id, self.q3.id])
        self.assertEqual(len(get_quotes_by(self.db, {})), 3)
        self.assertEqual(len(get_quotes_by(self.db, {"source": None})), 3)

    def test_source_filter_returns_only_that_source(self):
        for source, expected in (
            (self.first, [self.q1.id, self.q3.id]),
            (self.second, [self.q2.id]),
            (self.empty, []),
        ):
            with self.subTest(source=source.author):
                rows = get_quotes_by(self.db, {"source": source.id})
                self.assertEqual([q.id for q in rows], expected)
                self.assertTrue(all(q.source_id == source.id for q in rows))

    def test_source_id_may_be_a_string(self):
        rows = get_quotes_by(self.db, {"source": str(self.second.id)})
        self.assertEqual([q.id for q in rows], [self.q2.id])

    def test_unknown_source_returns_nothing(self):
        self.assertEqual(get_quotes_by(self.db, {"source": self.empty.id + 1000}), [])

    def test_malformed_source_id_is_a_validation_error(self):
        with self.assertRaises(ValidationError) as ctx:
            get_quotes_by(self.db, {"source": "abc"})
        self.assertEqual(ctx.exception.field, "source")

    def test_out_of_range_source_id_is_a_validation_error(self):
        for bad in (2**63, "99999999999999999999", 0):
            with self.subTest(source=bad):
                with self.assertRaises(ValidationError) as ctx:
                    get_quotes_by(self.db, {"source": bad})
                self.assertEqual(ctx.exception.errors, {"source": ["is invalid"]})
