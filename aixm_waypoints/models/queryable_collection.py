"""
Queryable collection classes for fluent, composable queries.

A small chainable wrapper around a list, used to filter and sort
extracted records without pulling in a query layer.
"""

from typing import TypeVar, Generic, Callable, List, Optional, Any, Union, Iterator
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda x: x.lat > 45).all()

        # Attribute matching
        collection.where(designator='ABLAN').first()

        # Sorting
        collection.order_by(lambda x: x.designator).take(10).all()
    """

    def __init__(self, items: Union[List[T], Iterable]):
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """Keep the items for which predicate returns True."""
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def order_by(self, key: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """Sort by key. The sort is stable, so equal keys keep their order."""
        return self.__class__(sorted(self._items, key=key, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        return self.__class__(self._items[:n])

    def map(self, func: Callable[[T], Any]) -> List[Any]:
        return [func(item) for item in self._items]

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return a copy of the items as a list."""
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._items)} items)"
