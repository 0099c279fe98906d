"""Book API routes."""
from typing import List

from fastapi import APIRouter, Depends

from bookstore.dependencies import get_book_payload, get_book_store
from bookstore.schemas import Book, ErrorResponse, MessageResponse
from bookstore.storage import BookStore

router = APIRouter(prefix="/book", tags=["Books"])

# Body is decoded by get_book_payload; declared here so it still shows in the docs
BOOK_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Book"}}},
    }
}


@router.get("", response_model=List[Book])
def list_books(store: BookStore = Depends(get_book_store)) -> List[Book]:
    """List all books."""
    return store.list()


@router.get(
    "/{id}",
    response_model=Book,
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
def get_book(id: str, store: BookStore = Depends(get_book_store)) -> Book:
    """Get a book by id."""
    return store.get(id)


@router.post(
    "",
    response_model=Book,
    responses={400: {"model": ErrorResponse, "description": "Invalid JSON format or duplicate id"}},
    openapi_extra=BOOK_BODY,
)
def create_book(
    book: Book = Depends(get_book_payload),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Create a book and echo it back."""
    return store.insert(book)


@router.put(
    "/{id}",
    response_model=Book,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON format"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
    openapi_extra=BOOK_BODY,
)
def update_book(
    id: str,
    book: Book = Depends(get_book_payload),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """
    Replace the book stored at ``id`` and echo the new value.

    The body's own ``id`` is accepted as-is and need not match the path.
    """
    return store.update(id, book)


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
def delete_book(id: str, store: BookStore = Depends(get_book_store)) -> dict:
    """Delete a book by id."""
    store.delete(id)
    return {"message": "Book deleted successfully"}
