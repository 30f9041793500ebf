# api/routes/authors.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_author_service
from bookstore.models import AuthorCreate, AuthorUpdate, AuthorSchema, BookBase, BookSchema
from bookstore.services import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=List[AuthorSchema])
def get_authors(
    name: Optional[str] = Query(None, description="Filter authors by name"),
    service: AuthorService = Depends(get_author_service)
):
    """Retrieve a list of all authors"""
    return [AuthorSchema.model_validate(author) for author in service.list_authors(name)]


@router.get("/{author_id}", response_model=AuthorSchema)
def get_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    """Retrieve a specific author by their ID"""
    return AuthorSchema.model_validate(service.get_author(author_id))


@router.post("", response_model=AuthorSchema, status_code=status.HTTP_201_CREATED)
def create_author(author: AuthorCreate, service: AuthorService = Depends(get_author_service)):
    return AuthorSchema.model_validate(service.create_author(author))


@router.put("/{author_id}", response_model=AuthorSchema)
def update_author(
    author_id: int,
    author: AuthorUpdate,
    service: AuthorService = Depends(get_author_service)
):
    return AuthorSchema.model_validate(service.update_author(author_id, author))


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    """Delete an author and all their books"""
    service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{author_id}/books", response_model=List[BookSchema])
def get_books_by_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    """Retrieve all books written by a specific author"""
    return [BookSchema.model_validate(book) for book in service.list_books_by_author(author_id)]


@router.post("/{author_id}/books", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def add_book_to_author(
    author_id: int,
    book: BookBase,
    service: AuthorService = Depends(get_author_service)
):
    """Add a new book to a specific author"""
    return BookSchema.model_validate(service.add_book_to_author(author_id, book))
