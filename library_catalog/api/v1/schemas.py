"""
API request/response models.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


# request body of POST /books and PUT /books/{id}
class BookIn(BaseModel):
    """
    Request body for creating or replacing a book.

    All four fields are required; an update replaces all of them.
    Business rules (non-empty text, positive numbers) are checked by the
    catalog service so the error messages match the tool surface.
    """
    name: str = Field(description="Book title")
    author: str = Field(description="Author name")
    year_of_publishing: int = Field(description="Year of publishing")
    price: Decimal = Field(description="Price, rounded to cents")


class Book(BaseModel):
    """
    A stored book as returned by the API.

    Price is serialised as a decimal string with two fractional digits.
    """

    id: int = Field(description="Identifier assigned by the catalog")
    name: str = Field(description="Book title")
    author: str = Field(description="Author name")
    year_of_publishing: int = Field(description="Year of publishing")
    price: Decimal = Field(description="Price with two fractional digits")


class LibraryStats(BaseModel):
    """
    Aggregate statistics over the catalog.
    """
    empty: bool = Field(description="True if the catalog has no books")
    total_books: int = Field(ge=0)
    unique_authors: int = Field(ge=0, description="Distinct author strings (case-sensitive)")
    earliest_year: int = Field(ge=0)
    latest_year: int = Field(ge=0)
    min_price: Decimal
    max_price: Decimal


class ToolDescriptor(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any] = Field(description="JSON schema of the tool arguments")


class ToolResult(BaseModel):
    tool: str = Field(description="Name of the invoked tool")
    result: str = Field(description="Text result, 'Error: ...' on failure")


class ErrorResponse(BaseModel):
    kind: str = Field(description="Error kind (invalid_argument, not_found, ...)")
    detail: str
