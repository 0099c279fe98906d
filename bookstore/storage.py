"""Thread-safe in-memory book store."""
from typing import Dict, List

from bookstore.core.exceptions import ConflictError, NotFoundError
from bookstore.core.locks import ReadWriteLock
from bookstore.schemas import Book


class BookStore:
    """
    Dict-based in-memory store for books keyed by id.

    Reads take the lock in shared mode, writes in exclusive mode. Every
    mutation performs its existence check and its change under a single
    exclusive acquisition.
    """

    def __init__(self):
        self._storage: Dict[str, Book] = {}
        self._lock = ReadWriteLock()

    def list(self) -> List[Book]:
        """Return a snapshot of every stored book, in no particular order."""
        with self._lock.read_locked():
            return list(self._storage.values())

    def get(self, book_id: str) -> Book:
        with self._lock.read_locked():
            try:
                return self._storage[book_id]
            except KeyError:
                raise NotFoundError(book_id) from None

    def insert(self, book: Book) -> Book:
        """Add ``book`` unless its id is already taken."""
        with self._lock.write_locked():
            if book.id in self._storage:
                raise ConflictError(book.id)
            self._storage[book.id] = book
        return book

    def update(self, book_id: str, book: Book) -> Book:
        """
        Replace the book stored at ``book_id``.

        The entry stays keyed at ``book_id`` even when ``book.id`` differs;
        the payload's own id is stored as given and is not checked.
        """
        with self._lock.write_locked():
            if book_id not in self._storage:
                raise NotFoundError(book_id)
            self._storage[book_id] = book
        return book

    def delete(self, book_id: str) -> None:
        with self._lock.write_locked():
            if book_id not in self._storage:
                raise NotFoundError(book_id)
            del self._storage[book_id]

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._storage)

    def __contains__(self, book_id: object) -> bool:
        with self._lock.read_locked():
            return book_id in self._storage
