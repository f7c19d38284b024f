# services/book_service.py — delegates to crud.book
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from crud import book as book_repository
from models import Book

logger = logging.getLogger(__name__)


async def find_all(db: AsyncSession) -> List[Book]:
    books = await book_repository.find_all(db)
    logger.debug("Loaded %d books", len(books))
    return books


async def find_by_id(db: AsyncSession, book_id: int) -> Optional[Book]:
    book = await book_repository.find_by_id(db, book_id)
    if book is None:
        logger.debug("No book with id %s", book_id)
    return book


async def save(db: AsyncSession, book: Book) -> Book:
    created = book.id is None
    saved = await book_repository.save(db, book)
    logger.info("%s book id=%s title=%r", "Created" if created else "Saved", saved.id, saved.title)
    return saved


async def delete_by_id(db: AsyncSession, book_id: int) -> None:
    await book_repository.delete_by_id(db, book_id)
    logger.info("Deleted book id=%s", book_id)
