"""
Name-based tool invocation.

ToolRegistry is the single-string surface over BookTools: a caller names a
tool and passes its arguments as one JSON object string, and gets one text
result back. Arguments are parsed with pydantic models, which accept both
snake_case names and the camelCase names used by tool-calling clients
(bookName, yearOfPublishing, ...).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .book_tools import BookTools

logger = logging.getLogger(__name__)


class ToolArguments(BaseModel):
    """Base for tool argument models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NoArguments(ToolArguments):
    pass


class BookIdArguments(ToolArguments):
    book_id: int


class AddBookArguments(ToolArguments):
    book_name: str
    author: str
    year_of_publishing: int
    price: Decimal


class UpdateBookArguments(AddBookArguments):
    book_id: int


class BookNameArguments(ToolArguments):
    book_name: str


class AuthorArguments(ToolArguments):
    author: str


class YearArguments(ToolArguments):
    year: int


class YearRangeArguments(ToolArguments):
    start_year: int
    end_year: int


class PriceRangeArguments(ToolArguments):
    min_price: Decimal
    max_price: Decimal


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool."""

    name: str
    description: str
    arguments: Type[ToolArguments]
    handler: Callable[..., str]

    def describe(self) -> Dict[str, Any]:
        """Descriptor for listing tools to a client."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.arguments.model_json_schema(by_alias=False),
        }


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class ToolRegistry:
    """
    Registry of the library tools.

    Usage:
        registry = ToolRegistry(BookTools(service))
        registry.invoke("search_books_by_name", '{"bookName": "lord"}')
    """

    def __init__(self, tools: BookTools) -> None:
        specs = [
            ToolSpec("add_book", "Add a new book to the library",
                     AddBookArguments, tools.add_book),
            ToolSpec("remove_book", "Remove a book from the library by ID",
                     BookIdArguments, tools.remove_book),
            ToolSpec("update_book", "Update an existing book in the library",
                     UpdateBookArguments, tools.update_book),
            ToolSpec("get_all_books", "Get all books in the library",
                     NoArguments, tools.get_all_books),
            ToolSpec("get_book_by_id", "Get a specific book by its ID",
                     BookIdArguments, tools.get_book_by_id),
            ToolSpec("search_books_by_name", "Search books by book name (partial match)",
                     BookNameArguments, tools.search_books_by_name),
            ToolSpec("search_books_by_author", "Search books by author name (partial match)",
                     AuthorArguments, tools.search_books_by_author),
            ToolSpec("get_books_by_year", "Get books published in a specific year",
                     YearArguments, tools.get_books_by_year),
            ToolSpec("get_books_by_year_range", "Get books published between two years",
                     YearRangeArguments, tools.get_books_by_year_range),
            ToolSpec("get_books_by_price_range", "Get books within a specific price range",
                     PriceRangeArguments, tools.get_books_by_price_range),
            ToolSpec("get_library_stats", "Get statistics about the library",
                     NoArguments, tools.get_library_stats),
        ]
        self._specs: Dict[str, ToolSpec] = {spec.name: spec for spec in specs}

    def names(self) -> List[str]:
        return list(self._specs)

    def describe(self) -> List[Dict[str, Any]]:
        return [spec.describe() for spec in self._specs.values()]

    def invoke(self, name: str, arguments: str = "") -> str:
        """
        Run a tool by name.

        Args:
            name: Tool name (e.g. 'add_book')
            arguments: JSON object with the tool arguments; empty means none

        Returns:
            The tool's text result, or an "Error: ..." text for unknown tools
            and malformed arguments
        """
        spec = self._specs.get(name)
        if spec is None:
            return f"Error: Unknown tool '{name}'"

        try:
            parsed = spec.arguments.model_validate_json(arguments.strip() or "{}")
        except ValidationError as e:
            logger.info(f"Invalid arguments for tool {name}: {e.error_count()} error(s)")
            return f"Error: Invalid arguments for {name}: {_format_validation_error(e)}"

        logger.debug(f"Invoking tool {name}")
        return spec.handler(**parsed.model_dump())
