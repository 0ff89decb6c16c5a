"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

__all__ = ["LinkedList"]

T = TypeVar("T")
U = TypeVar("U")


@dataclass(slots=True)
class _Node(Generic[T]):
    content: T
    next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: T) -> None:
        """Insert ``content`` at the front of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: T) -> None:
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the content of the last element; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every element's content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Callable[[U], Any] | None = None,
    ) -> LinkedList[U]:
        """Return a new list holding ``func`` applied to each content.

        If ``func`` raises part way, ``delete`` (when given) is called on
        each content already produced before the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[T], Any] | None = None) -> None:
        """Remove every element, passing each content to ``delete`` if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"