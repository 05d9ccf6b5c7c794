"""
Insertion-ordered container of owned elements.

``OrderedCollection`` is a singly linked sequence parameterised by two
callables supplied at construction:

- ``clone_fn`` produces the owned copy stored by ``push_back`` and ``clone``;
- ``destroy_fn`` releases an owned element when the collection is destroyed.

The same container therefore serves both student and course storage without
duplicating traversal or lifetime logic. Positions returned by ``begin``,
``next`` and ``find`` stay valid until the collection is destroyed, since
no operation removes or reorders elements.

Usage:
    from gradebook.collections import OrderedCollection

    names = OrderedCollection(clone_fn=str, destroy_fn=lambda _: None)
    names.push_back("Alice")
    pos = names.begin()
    while pos is not None:
        print(names.get(pos))
        pos = names.next(pos)
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Protocol, TypeVar

from gradebook.errors import CloneFailedError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
K = TypeVar("K")


class CloneFn(Protocol[T]):
    """Produces an independent, owned copy of an element."""

    def __call__(self, value: T) -> T:
        ...


class DestroyFn(Protocol[T_contra]):
    """Releases whatever an owned element holds."""

    def __call__(self, value: T_contra) -> None:
        ...


class Position(Generic[T]):
    """
    Handle to one element slot of an ``OrderedCollection``.

    Positions are opaque to callers: read the element through
    ``OrderedCollection.get`` and advance with ``OrderedCollection.next``.
    """

    __slots__ = ("_value", "_next", "_owner")

    def __init__(self, value: T, owner: "OrderedCollection[T]") -> None:
        self._value = value
        self._next: Optional[Position[T]] = None
        self._owner = owner

    def __repr__(self) -> str:
        return f"Position({self._value!r})"


class OrderedCollection(Generic[T]):
    """
    Generic insertion-ordered sequence that owns deep copies of its elements.

    Time: O(1) ``push_back``, ``size``, ``begin`` and ``next``; O(n) ``find``,
    ``clone`` and ``destroy``.
    """

    __slots__ = ("_clone_fn", "_destroy_fn", "_head", "_tail", "_size")

    def __init__(self, clone_fn: CloneFn[T], destroy_fn: DestroyFn[T]) -> None:
        self._clone_fn = clone_fn
        self._destroy_fn = destroy_fn
        self._head: Optional[Position[T]] = None
        self._tail: Optional[Position[T]] = None
        self._size: int = 0

    # --- mutation ---

    def push_back(self, value: T) -> None:
        """
        Append an owned clone of ``value`` at the tail.

        The caller keeps ownership of ``value``. If cloning fails the
        collection is left unchanged and ``CloneFailedError`` is raised.
        """
        node = Position(self._make_clone(value), self)
        if self._tail is None:
            self._head = node
        else:
            self._tail._next = node
        self._tail = node
        self._size += 1

    def destroy(self) -> None:
        """Destroy every owned element in order, then release the storage."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node._next
            self._destroy_fn(node._value)
            node._next = None
            node._owner = None
            node = following

    # --- traversal ---

    def begin(self) -> Optional[Position[T]]:
        """Position of the first element, or None when the collection is empty."""
        return self._head

    def next(self, position: Position[T]) -> Optional[Position[T]]:
        """Position after ``position``, or None once past the last element."""
        self._check_position(position)
        return position._next

    def get(self, position: Position[T]) -> T:
        """Element stored at a non-terminal ``position``."""
        self._check_position(position)
        return position._value

    def size(self) -> int:
        return self._size

    def find(self, target: K, matches: Callable[[T, K], bool]) -> Optional[Position[T]]:
        """
        Linear scan from the head for the first element where
        ``matches(element, target)`` holds.
        """
        node = self._head
        while node is not None:
            if matches(node._value, target):
                return node
            node = node._next
        return None

    # --- copying ---

    def clone(self) -> "OrderedCollection[T]":
        """
        Return a new collection holding independent clones of every element.

        Atomic: if any element fails to clone, the clones produced so far are
        destroyed and ``CloneFailedError`` propagates; ``self`` is untouched.
        """
        copy: OrderedCollection[T] = OrderedCollection(self._clone_fn, self._destroy_fn)
        try:
            for value in self:
                copy.push_back(value)
        except CloneFailedError:
            copy.destroy()
            raise
        return copy

    def _make_clone(self, value: T) -> T:
        try:
            return self._clone_fn(value)
        except CloneFailedError:
            raise
        except Exception as exc:
            raise CloneFailedError(
                f"Could not clone element of type {type(value).__name__}",
                details={"cause": repr(exc)},
            ) from exc

    def _check_position(self, position: Optional[Position[T]]) -> None:
        if position is None:
            raise ValueError("Terminal position has no element")
        if position._owner is not self:
            raise ValueError("Position does not belong to this collection")

    # --- python protocols ---

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node._value
            node = node._next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"OrderedCollection(size={self._size})"


__all__ = ["CloneFn", "DestroyFn", "OrderedCollection", "Position"]
