# api/routes/books.py

from typing import List
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_book_service
from bookstore.models import BookCreate, BookUpdate, BookSchema
from bookstore.services import BookService

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=List[BookSchema])
def get_books(service: BookService = Depends(get_book_service)):
    return [BookSchema.model_validate(book) for book in service.list_books()]


@router.get("/search", response_model=List[BookSchema])
def search_books(
    title: str = Query(..., description="Case-insensitive title substring"),
    service: BookService = Depends(get_book_service)
):
    """Search for books by title (case-insensitive)"""
    return [BookSchema.model_validate(book) for book in service.search_books(title)]


@router.get("/{book_id}", response_model=BookSchema)
def get_book(book_id: int, service: BookService = Depends(get_book_service)):
    return BookSchema.model_validate(service.get_book(book_id))


@router.post("", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, service: BookService = Depends(get_book_service)):
    return BookSchema.model_validate(service.create_book(book))


@router.put("/{book_id}", response_model=BookSchema)
def update_book(book_id: int, book: BookUpdate, service: BookService = Depends(get_book_service)):
    """Update title, isbn and page count of an existing book"""
    return BookSchema.model_validate(service.update_book(book_id, book))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{book_id}/genres/{genre_id}", response_model=BookSchema)
def add_genre_to_book(book_id: int, genre_id: int, service: BookService = Depends(get_book_service)):
    """Add a genre to a specific book"""
    return BookSchema.model_validate(service.attach_genre(book_id, genre_id))


@router.delete("/{book_id}/genres/{genre_id}", response_model=BookSchema)
def remove_genre_from_book(book_id: int, genre_id: int, service: BookService = Depends(get_book_service)):
    """Remove a genre from a specific book"""
    return BookSchema.model_validate(service.detach_genre(book_id, genre_id))
