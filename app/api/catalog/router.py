from fastapi import APIRouter
from app.api.catalog import authors, quotes, tags, sources, source_types

router = APIRouter()
router.include_router(quotes.router, prefix="/quotes", tags=["Quotes"])
router.include_router(tags.router, prefix="/tags", tags=["Tags"])
router.include_router(sources.router, prefix="/sources", tags=["Sources"])
router.include_router(source_types.router, prefix="/source-types", tags=["SourceTypes"])
router.include_router(authors.router, prefix="/authors", tags=["Authors"])
