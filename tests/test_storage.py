"""BookStore tests."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from bookstore.core.exceptions import ConflictError, NotFoundError
from bookstore.schemas import Book
from bookstore.storage import BookStore


def make_book(book_id: str = "1", name: str = "A", author: str = "B") -> Book:
    return Book(id=book_id, name=name, author=author)


def test_empty_store_lists_nothing(store: BookStore):
    assert store.list() == []
    assert len(store) == 0


def test_insert_then_get_returns_same_record(store: BookStore):
    book = make_book()
    assert store.insert(book) == book
    assert store.get("1") == book
    assert "1" in store


def test_duplicate_insert_keeps_first_value(store: BookStore):
    store.insert(make_book(name="first"))

    with pytest.raises(ConflictError) as exc_info:
        store.insert(make_book(name="second"))

    assert exc_info.value.message == "Record already exists"
    assert store.list() == [make_book(name="first")]


def test_update_replaces_value_at_path_id(store: BookStore):
    store.insert(make_book())
    replacement = make_book(book_id="other", name="A2")

    assert store.update("1", replacement) == replacement

    # Entry stays keyed at the path id; the body id is stored verbatim.
    assert store.get("1") == replacement
    assert "other" not in store
    assert len(store) == 1


def test_delete_twice(store: BookStore):
    store.insert(make_book())

    store.delete("1")
    with pytest.raises(NotFoundError):
        store.delete("1")


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_missing_id_is_not_found(store: BookStore, operation: str):
    calls = {
        "get": lambda: store.get("missing"),
        "update": lambda: store.update("missing", make_book("missing")),
        "delete": lambda: store.delete("missing"),
    }
    with pytest.raises(NotFoundError) as exc_info:
        calls[operation]()
    assert exc_info.value.status_code == 404
    assert exc_info.value.details == {"id": "missing"}


def test_empty_strings_are_accepted(store: BookStore):
    book = Book(id="", name="", author="")
    store.insert(book)
    assert store.get("") == book


def test_list_returns_snapshot(store: BookStore):
    store.insert(make_book("1"))
    snapshot = store.list()
    store.insert(make_book("2"))
    assert len(snapshot) == 1
    assert len(store.list()) == 2


def test_concurrent_distinct_inserts_are_all_kept(store: BookStore):
    count = 200
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: store.insert(make_book(str(i))), range(count)))

    ids = [book.id for book in store.list()]
    assert len(ids) == count
    assert set(ids) == {str(i) for i in range(count)}


def test_concurrent_same_id_inserts_only_one_wins(store: BookStore):
    def attempt(i: int) -> bool:
        try:
            store.insert(make_book("same", name=str(i)))
            return True
        except ConflictError:
            return False

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(attempt, range(50)))

    assert results.count(True) == 1
    assert len(store) == 1
