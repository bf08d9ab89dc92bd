import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.services.validation import MAX_INT


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Ids arrive from clients either as numbers or as numeric strings.
RawId = Union[int, str]


class CreateQuoteInput(CamelModel):
    text: str
    source_id: RawId
    tags: List[Optional[RawId]]
    date: Optional[datetime.date] = None
    page_start: Optional[int] = None
    page_end: Optional[int] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    extras: Optional[str] = None


class TagCreate(CamelModel):
    text: str


class SourceTypeCreate(CamelModel):
    name: str


class AuthorCreate(CamelModel):
    last_name: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None


class SourceCreate(CamelModel):
    author: str
    topic: str
    source_type_id: int = Field(ge=1, le=MAX_INT)
    author_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    publication: Optional[str] = None
    url: Optional[str] = None


class QuoteFullSearchTable(str, Enum):
    QUOTES = "QUOTES"
    SOURCES = "SOURCES"
    SOURCE_TYPES = "SOURCE_TYPES"
    TAGS = "TAGS"


class SearchResultRow(BaseModel):
    tid: int
    text: str
    source: QuoteFullSearchTable
    column: str


class SearchResultSet(CamelModel):
    quotes: List[SearchResultRow] = Field(default_factory=list)
    sources: List[SearchResultRow] = Field(default_factory=list)
    tags: List[SearchResultRow] = Field(default_factory=list)
    source_types: List[SearchResultRow] = Field(default_factory=list)
