"""Generic grouping of records by a derived key."""

from typing import Callable, Dict, Hashable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(
    items: Sequence[T],
    key_fn: Callable[[T], Optional[K]],
) -> Dict[K, List[T]]:
    """Group items by key, preserving first-seen order.

    Items whose key is None are left out entirely.

    Args:
        items: Records to group (not modified)
        key_fn: Derives the grouping key of a record

    Returns:
        Fresh dict of key -> members, keys in first-seen order
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        key = key_fn(item)
        if key is None:
            continue
        if key not in groups:
            groups[key] = []
        groups[key].append(item)
    return groups


def duplicates_only(groups: Dict[K, List[T]]) -> List[Tuple[K, List[T]]]:
    """Keep only groups with more than one member."""
    return [(key, members) for key, members in groups.items() if len(members) > 1]


def find_duplicates(
    items: Sequence[T],
    key_fn: Callable[[T], Optional[K]],
) -> List[Tuple[K, List[T]]]:
    """Group by key and drop singletons in one step."""
    return duplicates_only(group_by(items, key_fn))
