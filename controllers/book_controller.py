# controllers/book_controller.py — /books routes
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas import BookDTO
from services import book_service

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_class=HTMLResponse)
async def list_books(request: Request, db: AsyncSession = Depends(get_db)):
    books = await book_service.find_all(db)
    return templates.TemplateResponse(request, "books/list.html", {"books": books})


@router.get("/new", response_class=HTMLResponse)
async def new_book_form(request: Request):
    return templates.TemplateResponse(request, "books/form.html", {"book": BookDTO()})


@router.get("/edit", response_class=HTMLResponse)
async def edit_book_form(id: int, request: Request, db: AsyncSession = Depends(get_db)):
    book = await book_service.find_by_id(db, id)
    if not book:
        raise HTTPException(404, "Book not found")
    return templates.TemplateResponse(request, "books/form.html", {"book": BookDTO.from_entity(book)})


@router.post("")
async def save_book(
    id: Optional[int] = Form(None),
    title: str = Form(""),
    author: str = Form(""),
    isbn: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    book_data = BookDTO(id=id, title=title, author=author, isbn=isbn)
    await book_service.save(db, book_data.to_entity())
    return RedirectResponse("/books", status_code=303)


# Deletes on GET, as the list page links to it directly.
@router.get("/delete")
async def delete_book(id: int, db: AsyncSession = Depends(get_db)):
    await book_service.delete_by_id(db, id)
    return RedirectResponse("/books", status_code=303)
