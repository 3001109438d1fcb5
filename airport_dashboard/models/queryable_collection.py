"""
Queryable collection classes for fluent, composable queries.

Chainable filtering over in-memory data. The dashboard only ever holds a
small fixed dataset, so every query simply builds a new list.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Every filtering method returns a new collection and leaves the wrapped
    items untouched, so the same collection can be queried repeatedly.

    Examples:
        # Basic filtering
        collection.filter(lambda a: a.runways > 3).all()

        # Attribute matching
        collection.where(country='USA').all()

        # Chaining
        collection.filter(lambda a: a.elevation > 500).where(country='USA').first()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Relative order of the kept items is preserved.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items

        Examples:
            # Airports with several runways
            airports.filter(lambda a: a.runways >= 4)
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Args:
            **kwargs: Attribute name-value pairs to match

        Returns:
            New collection with matching items

        Examples:
            # Find airport by code
            airports.where(code='LAX')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """
        Return all items as a list.

        The returned list is a copy, callers may modify it freely.
        """
        return list(self._items)

    def count(self) -> int:
        """Return the count of items in the collection."""
        return len(self._items)

    def exists(self) -> bool:
        """Check whether the collection holds at least one item."""
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group items by a key function.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items, keys in first-seen order

        Examples:
            by_city = airports.group_by(lambda a: a.city)
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            key = key_func(item)
            if key not in result:
                result[key] = []
            result[key].append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order

        Returns:
            New collection with sorted items
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def map(self, transform: Callable[[T], Any]) -> 'QueryableCollection[Any]':
        """
        Transform each item using a function.

        Examples:
            # Extract airport ids
            ids = airports.map(lambda a: a.id).all()
        """
        return QueryableCollection([transform(item) for item in self._items])

    def to_dict(self, key_func: Callable[[T], str]) -> Dict[str, T]:
        """
        Convert to dictionary using key function.
        Raises ValueError if keys are not unique.

        Examples:
            # Create id -> Airport mapping
            by_id = airports.to_dict(lambda a: a.id)
        """
        result = {}
        for item in self._items:
            key = key_func(item)
            if key in result:
                raise ValueError(f"Duplicate key: {key}")
            result[key] = item
        return result

    # Make the collection behave like a list
    def __iter__(self):
        """Allow iteration over items."""
        return iter(self._items)

    def __len__(self):
        """Return count of items."""
        return len(self._items)

    def __getitem__(self, index):
        """Allow indexing and slicing."""
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        """Return True if collection is not empty."""
        return len(self._items) > 0

    def __repr__(self):
        """Return string representation with a preview of the first items."""
        class_name = self.__class__.__name__
        count = len(self._items)

        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'code'):
                preview_items.append(repr(item.code))
            elif hasattr(item, 'name'):
                preview_items.append(repr(item.name))
            else:
                preview_items.append(f"<{type(item).__name__}>")

        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"
