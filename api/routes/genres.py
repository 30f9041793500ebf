# api/routes/genres.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_genre_service
from bookstore.models import GenreCreate, GenreUpdate, GenreSchema
from bookstore.services import GenreService

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("", response_model=List[GenreSchema])
def get_genres(
    name: Optional[str] = Query(None, description="Filter genres by name"),
    service: GenreService = Depends(get_genre_service)
):
    return [GenreSchema.model_validate(genre) for genre in service.list_genres(name)]


@router.get("/{genre_id}", response_model=GenreSchema)
def get_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    return GenreSchema.model_validate(service.get_genre(genre_id))


@router.post("", response_model=GenreSchema, status_code=status.HTTP_201_CREATED)
def create_genre(genre: GenreCreate, service: GenreService = Depends(get_genre_service)):
    return GenreSchema.model_validate(service.create_genre(genre))


@router.put("/{genre_id}", response_model=GenreSchema)
def update_genre(genre_id: int, genre: GenreUpdate, service: GenreService = Depends(get_genre_service)):
    return GenreSchema.model_validate(service.update_genre(genre_id, genre))


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    """Delete a genre; books keep existing without it"""
    service.delete_genre(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
