"""FastAPI dependencies."""
from fastapi import Request
from pydantic import ValidationError

from bookstore.core.exceptions import InvalidPayloadError
from bookstore.schemas import Book
from bookstore.storage import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Dependency provider for the BookStore attached to the running app.
    """
    return request.app.state.book_store


async def get_book_payload(request: Request) -> Book:
    """
    Decode the request body into a Book whatever its content type.

    Runs before the handler, so no store lock is held while reading.
    """
    body = await request.body()
    try:
        return Book.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(reason=str(e)) from e
