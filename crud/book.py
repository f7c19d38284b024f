# crud/book.py — storage access for Book rows
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from models import Book
from typing import List, Optional


async def find_all(db: AsyncSession) -> List[Book]:
    result = await db.execute(select(Book).order_by(Book.id))
    return list(result.scalars().all())


async def find_by_id(db: AsyncSession, book_id: int) -> Optional[Book]:
    return await db.get(Book, book_id)


async def save(db: AsyncSession, book: Book) -> Book:
    """Insert when book.id is None, otherwise overwrite the row with that id."""
    persistent = await db.merge(book)
    await db.commit()
    return persistent


async def delete_by_id(db: AsyncSession, book_id: int) -> None:
    await db.execute(delete(Book).where(Book.id == book_id))
    await db.commit()
