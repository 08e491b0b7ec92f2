"""
API endpoints for catalog operations.

This module defines the FastAPI routes for managing and searching books.
It handles HTTP concerns and delegates to the catalog service. Catalog
errors are turned into responses by the handler registered in
library_catalog.main.
"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from library_catalog.domain.services import CatalogService
from library_catalog.api.v1 import schemas as api
from library_catalog.api.v1.converters import domain_book_to_api, domain_stats_to_api
from library_catalog.api.v1.dependencies import get_catalog_service

router = APIRouter()


@router.get("/books", response_model=List[api.Book])
def list_books(
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """List every book in insertion order."""
    return [domain_book_to_api(book) for book in service.all_books()]


@router.post(
    "/books",
    response_model=api.Book,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": api.ErrorResponse}, 409: {"model": api.ErrorResponse}},
)
def add_book(
    request: api.BookIn,
    service: CatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Add a book to the catalog.

    Raises:
        400: Invalid field
        409: A book with the same name and author already exists
    """
    book = service.add_book(
        request.name, request.author, request.year_of_publishing, request.price
    )
    return domain_book_to_api(book)


@router.get("/books/search", response_model=List[api.Book])
def search_books(
    name: Optional[str] = Query(default=None, description="Fragment of the book name"),
    author: Optional[str] = Query(default=None, description="Fragment of the author name"),
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """
    Case-insensitive partial match on either the name or the author.

    Exactly one of the two query parameters must be given.
    """
    if (name is None) == (author is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide exactly one of 'name' or 'author'",
        )

    books = service.search_by_name(name) if name is not None else service.search_by_author(author)
    return [domain_book_to_api(book) for book in books]


@router.get("/books/newest", response_model=List[api.Book])
def books_newest_first(
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """All books, newest year of publishing first."""
    return [domain_book_to_api(book) for book in service.books_ordered_by_year()]


@router.get("/books/by-year/{year}", response_model=List[api.Book])
def books_by_year(
    year: int,
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    return [domain_book_to_api(book) for book in service.books_by_year(year)]


@router.get("/books/by-year-range", response_model=List[api.Book])
def books_by_year_range(
    start_year: int,
    end_year: int,
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    return [
        domain_book_to_api(book)
        for book in service.books_by_year_range(start_year, end_year)
    ]


@router.get("/books/by-price", response_model=List[api.Book])
def books_by_price_range(
    min_price: Decimal,
    max_price: Decimal,
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """Books priced between min_price and max_price, inclusive."""
    return [
        domain_book_to_api(book)
        for book in service.books_by_price_range(min_price, max_price)
    ]


@router.get("/books/{book_id}", response_model=api.Book)
def get_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Get a book by its identifier.

    Raises:
        404: Book not found
    """
    book = service.get_book(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with ID {book_id} not found",
        )

    return domain_book_to_api(book)


@router.put(
    "/books/{book_id}",
    response_model=api.Book,
    responses={404: {"model": api.ErrorResponse}, 409: {"model": api.ErrorResponse}},
)
def update_book(
    book_id: int,
    request: api.BookIn,
    service: CatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Replace all fields of an existing book.

    Raises:
        404: Book not found
        409: Another book already has this name and author
    """
    book = service.update_book(
        book_id, request.name, request.author, request.year_of_publishing, request.price
    )
    return domain_book_to_api(book)


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    if not service.delete_book(book_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with ID {book_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats", response_model=api.LibraryStats)
def library_stats(
    service: CatalogService = Depends(get_catalog_service),
) -> api.LibraryStats:
    """Catalog statistics, recomputed on each call."""
    return domain_stats_to_api(service.library_stats())


@router.get("/health")
def health_check(
    service: CatalogService = Depends(get_catalog_service),
) -> dict:
    """
    Check that the catalog store answers.
    """
    return {
        "status": "ok",
        "total_books": service.total_count(),
    }
